"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that other packages use
(settings, DB wiring, upstream client, error mapping, middleware). Keep
record SQL in `records/` and the startup ingestion flow in `ingestion/`.
"""
