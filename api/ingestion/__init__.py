"""
One-time startup ingestion of the current APOD entry.
"""
