"""Schema initialization for the Products store.

Runs once at startup, before the API accepts traffic. Safe to call on every
process start: the table is created with IF NOT EXISTS semantics.
"""

import logging
import sqlite3

from ..clients import SqliteClient
from ..repositories import RepositoryError

logger = logging.getLogger(__name__)

# SQL statements
CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS Products (
    Id INTEGER PRIMARY KEY AUTOINCREMENT,
    Name TEXT NOT NULL,
    Description TEXT NOT NULL,
    Price REAL NOT NULL
)
"""


class SchemaInitializer:
    """Ensures the store file and the Products table exist."""

    def __init__(self, sqlite_client: SqliteClient):
        self._sqlite_client = sqlite_client

    def initialize(self) -> None:
        """Create the store file and Products table if they don't exist.

        Raises:
            RepositoryError: If the store cannot be created or opened.
        """
        try:
            self._sqlite_client.ensure_parent_directory()
            self._sqlite_client.execute_statement(CREATE_TABLE_SQL)
        except (OSError, sqlite3.Error) as e:
            logger.critical(f"Cannot initialize product store at {self._sqlite_client.db_path}: {e}")
            raise RepositoryError(f"Cannot initialize product store: {e}") from e

        logger.info(f"Product store ready at {self._sqlite_client.db_path}")
