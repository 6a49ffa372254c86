"""
Shared, cross-cutting code for the portfolio API.

`core/` holds the small building blocks every resource uses (DB wiring,
settings, error rendering, dependencies). Table SQL lives in `storage/` and
HTTP wiring lives in the per-resource router packages.
"""
