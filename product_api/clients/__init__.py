"""Client modules for external services."""

from product_api.clients.sqlite_client import SqliteClient, StatementResult

__all__ = [
    "SqliteClient",
    "StatementResult",
]
