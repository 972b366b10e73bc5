"""Tests for the SQLite client.

These tests verify:
- Statements commit and report rowcount / lastrowid
- Queries return all rows
- Every call closes its connection, including failing calls
"""

import sqlite3

import pytest

from product_api.clients import SqliteClient
from product_api.clients import sqlite_client as sqlite_client_module


class TrackingConnection:
    """Wraps a real connection and records whether it was closed."""

    def __init__(self, conn):
        self._conn = conn
        self.closed = False

    def cursor(self):
        return self._conn.cursor()

    def commit(self):
        self._conn.commit()

    def close(self):
        self.closed = True
        self._conn.close()


@pytest.fixture
def opened_connections(monkeypatch):
    """Record every connection the client opens."""
    connections = []
    real_connect = sqlite3.connect

    def tracking_connect(*args, **kwargs):
        conn = TrackingConnection(real_connect(*args, **kwargs))
        connections.append(conn)
        return conn

    monkeypatch.setattr(sqlite_client_module.sqlite3, "connect", tracking_connect)
    return connections


class TestSqliteClient:
    """Test SqliteClient query and statement execution."""

    def test_statement_reports_lastrowid_and_rowcount(self, sqlite_client):
        sqlite_client.execute_statement("CREATE TABLE t (id INTEGER PRIMARY KEY, v TEXT)")

        result = sqlite_client.execute_statement("INSERT INTO t (v) VALUES (?)", ("a",))

        assert result.lastrowid == 1
        assert result.rowcount == 1

    def test_statement_is_committed(self, sqlite_client, temp_db_path):
        sqlite_client.execute_statement("CREATE TABLE t (v TEXT)")
        sqlite_client.execute_statement("INSERT INTO t (v) VALUES (?)", ("x",))

        # Read back through an independent client
        rows = SqliteClient(temp_db_path).execute_query("SELECT v FROM t")

        assert rows == [("x",)]

    def test_query_without_params(self, sqlite_client):
        sqlite_client.execute_statement("CREATE TABLE t (v INTEGER)")
        for value in (3, 1, 2):
            sqlite_client.execute_statement("INSERT INTO t (v) VALUES (?)", (value,))

        rows = sqlite_client.execute_query("SELECT v FROM t ORDER BY v")

        assert rows == [(1,), (2,), (3,)]

    def test_each_call_opens_and_closes_its_own_connection(self, sqlite_client, opened_connections):
        sqlite_client.execute_statement("CREATE TABLE t (v TEXT)")
        sqlite_client.execute_query("SELECT v FROM t")

        assert len(opened_connections) == 2
        assert all(conn.closed for conn in opened_connections)

    def test_connection_closed_when_statement_fails(self, sqlite_client, opened_connections):
        with pytest.raises(sqlite3.OperationalError):
            sqlite_client.execute_statement("INSERT INTO missing_table (v) VALUES (1)")

        assert len(opened_connections) == 1
        assert opened_connections[0].closed is True

    def test_connection_closed_when_query_fails(self, sqlite_client, opened_connections):
        with pytest.raises(sqlite3.OperationalError):
            sqlite_client.execute_query("SELECT * FROM missing_table")

        assert opened_connections[0].closed is True

    def test_ensure_parent_directory_creates_nested_dirs(self, tmp_path):
        client = SqliteClient(str(tmp_path / "a" / "b" / "products.db"))

        client.ensure_parent_directory()

        assert (tmp_path / "a" / "b").is_dir()
