import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from sqlite3 import Connection
from typing import Generator, Optional


@dataclass(frozen=True)
class StatementResult:
    """Outcome of a write statement."""

    rowcount: int
    lastrowid: Optional[int]


class SqliteClient:
    """SQLite database client with per-call connection management.

    No connection is held by the client itself: every query or statement
    opens its own connection and closes it before returning.
    """

    def __init__(self, db_path: str, timeout: float = 5.0):
        self.db_path = db_path
        self.timeout = timeout

    def ensure_parent_directory(self) -> None:
        """Create the directory holding the database file if it is missing."""
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def connection(self) -> Generator[Connection, None, None]:
        """Context manager for a database connection with guaranteed cleanup."""
        conn = sqlite3.connect(self.db_path, timeout=self.timeout)
        try:
            yield conn
        finally:
            conn.close()

    def execute_query(self, query: str, params=None) -> list[tuple]:
        """Execute a query and return all results."""
        with self.connection() as conn:
            cursor = conn.cursor()
            try:
                if params:
                    cursor.execute(query, params)
                else:
                    cursor.execute(query)
                return cursor.fetchall()
            finally:
                cursor.close()

    def execute_statement(self, statement: str, params=None) -> StatementResult:
        """Execute a write statement, commit it, and report affected rows."""
        with self.connection() as conn:
            cursor = conn.cursor()
            try:
                if params:
                    cursor.execute(statement, params)
                else:
                    cursor.execute(statement)
                conn.commit()
                return StatementResult(rowcount=cursor.rowcount, lastrowid=cursor.lastrowid)
            finally:
                cursor.close()
