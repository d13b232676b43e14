"""
Record API: CRUD over the `apoddata` table.
"""
