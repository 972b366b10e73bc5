"""Product API: CRUD HTTP service over a SQLite product store."""

__version__ = "1.0.0"
