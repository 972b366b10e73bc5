"""Shared fixtures for the product API tests."""

import os
import tempfile
from dataclasses import replace
from typing import Optional

import pytest

from product_api.clients import SqliteClient
from product_api.config import AppConfig, DatabaseConfig, LoggingConfig, ServerConfig
from product_api.models import Product
from product_api.repositories import SqliteProductRepository
from product_api.services import SchemaInitializer


class InMemoryProductRepository:
    """ProductRepository fake keeping rows in a dict."""

    def __init__(self):
        self.rows: dict[int, Product] = {}
        self._next_id = 1

    def add(self, product: Product) -> Product:
        stored = replace(product, id=self._next_id)
        self.rows[stored.id] = stored
        self._next_id += 1
        return replace(stored)

    def get_all(self) -> list[Product]:
        return [replace(self.rows[key]) for key in sorted(self.rows)]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        product = self.rows.get(product_id)
        return replace(product) if product else None

    def update(self, product: Product) -> int:
        if product.id not in self.rows:
            return 0
        self.rows[product.id] = replace(product)
        return 1

    def delete(self, product_id: int) -> int:
        return 1 if self.rows.pop(product_id, None) else 0


@pytest.fixture
def temp_db_path():
    """Create a temporary database file for testing."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    yield path
    # Cleanup
    if os.path.exists(path):
        os.remove(path)


@pytest.fixture
def sqlite_client(temp_db_path):
    return SqliteClient(temp_db_path)


@pytest.fixture
def repository(sqlite_client):
    """SqliteProductRepository over a freshly initialized store."""
    SchemaInitializer(sqlite_client).initialize()
    return SqliteProductRepository(sqlite_client)


@pytest.fixture
def in_memory_repository():
    return InMemoryProductRepository()


@pytest.fixture
def app_config(temp_db_path):
    return AppConfig(
        database=DatabaseConfig(path=temp_db_path, timeout_seconds=1.0),
        logging=LoggingConfig(level="DEBUG", format="%(levelname)s %(message)s"),
        server=ServerConfig(host="127.0.0.1", port=8000),
    )
