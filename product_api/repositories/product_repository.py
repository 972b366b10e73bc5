"""Product repository issuing parameterised SQL against the SQLite store.

Every method opens its own connection through the SqliteClient and releases
it before returning, on success and on failure alike. Driver errors are
re-raised as RepositoryError so callers see a single failure type.
"""

import logging
import math
import sqlite3
from decimal import Decimal
from typing import Optional, Protocol

from ..clients import SqliteClient
from ..models import Product

logger = logging.getLogger(__name__)

# SQL statements
INSERT_PRODUCT_SQL = "INSERT INTO Products (Name, Description, Price) VALUES (?, ?, ?)"

SELECT_ALL_PRODUCTS_SQL = "SELECT Id, Name, Description, Price FROM Products ORDER BY Id"

SELECT_PRODUCT_BY_ID_SQL = "SELECT Id, Name, Description, Price FROM Products WHERE Id = ?"

UPDATE_PRODUCT_SQL = "UPDATE Products SET Name = ?, Description = ?, Price = ? WHERE Id = ?"

DELETE_PRODUCT_SQL = "DELETE FROM Products WHERE Id = ?"


class RepositoryError(Exception):
    """Raised when the store cannot be opened or a statement fails."""
    pass


class ProductRepository(Protocol):
    """Capabilities the controller needs from a product store."""

    def add(self, product: Product) -> Product: ...

    def get_all(self) -> list[Product]: ...

    def get_by_id(self, product_id: int) -> Optional[Product]: ...

    def update(self, product: Product) -> int: ...

    def delete(self, product_id: int) -> int: ...


def _price_to_store(price: Decimal) -> float:
    value = float(price)
    if not math.isfinite(value):
        raise OverflowError(f"price {price} does not fit in a REAL column")
    return value


def _row_to_product(row: tuple) -> Product:
    product_id, name, description, price = row
    return Product(
        id=product_id,
        name=name,
        description=description,
        # REAL column; str() gives the shortest repr so 1.5 reads back as Decimal("1.5")
        price=Decimal(str(price)),
    )


class SqliteProductRepository:
    """ProductRepository backed by the Products table."""

    def __init__(self, sqlite_client: SqliteClient):
        """Initialize the repository.

        Args:
            sqlite_client: Client used to open a connection per call.
        """
        self._sqlite_client = sqlite_client

    def add(self, product: Product) -> Product:
        """Insert a product; the store assigns its id.

        Args:
            product: Product to insert. Its id is ignored.

        Returns:
            A new Product carrying the store-assigned id.

        Raises:
            RepositoryError: If the insert fails.
        """
        try:
            result = self._sqlite_client.execute_statement(
                INSERT_PRODUCT_SQL,
                (product.name, product.description, _price_to_store(product.price)),
            )
        except (sqlite3.Error, OverflowError) as e:
            logger.exception(f"Failed to add product '{product.name}': {e}")
            raise RepositoryError(f"Failed to add product: {e}") from e

        logger.info(f"Added product {result.lastrowid}: {product.name}")
        return Product(
            id=result.lastrowid,
            name=product.name,
            description=product.description,
            price=product.price,
        )

    def get_all(self) -> list[Product]:
        """Return every product ordered by id. An empty store yields an empty list."""
        try:
            rows = self._sqlite_client.execute_query(SELECT_ALL_PRODUCTS_SQL)
        except (sqlite3.Error, OverflowError) as e:
            logger.exception(f"Failed to list products: {e}")
            raise RepositoryError(f"Failed to list products: {e}") from e

        logger.debug(f"Loaded {len(rows)} products")
        return [_row_to_product(row) for row in rows]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product with the given id, or None if there is none."""
        try:
            rows = self._sqlite_client.execute_query(SELECT_PRODUCT_BY_ID_SQL, (product_id,))
        except (sqlite3.Error, OverflowError) as e:
            logger.exception(f"Failed to load product {product_id}: {e}")
            raise RepositoryError(f"Failed to load product {product_id}: {e}") from e

        if not rows:
            return None
        return _row_to_product(rows[0])

    def update(self, product: Product) -> int:
        """Overwrite name, description and price of the row matching product.id.

        A missing id is a no-op, not an error.

        Returns:
            Number of rows affected (0 or 1).

        Raises:
            RepositoryError: If the update fails.
        """
        try:
            result = self._sqlite_client.execute_statement(
                UPDATE_PRODUCT_SQL,
                (product.name, product.description, _price_to_store(product.price), product.id),
            )
        except (sqlite3.Error, OverflowError) as e:
            logger.exception(f"Failed to update product {product.id}: {e}")
            raise RepositoryError(f"Failed to update product {product.id}: {e}") from e

        logger.info(f"Updated product {product.id} ({result.rowcount} row(s) affected)")
        return result.rowcount

    def delete(self, product_id: int) -> int:
        """Hard-delete the row with the given id. A missing id is a no-op.

        Returns:
            Number of rows affected (0 or 1).
        """
        try:
            result = self._sqlite_client.execute_statement(DELETE_PRODUCT_SQL, (product_id,))
        except (sqlite3.Error, OverflowError) as e:
            logger.exception(f"Failed to delete product {product_id}: {e}")
            raise RepositoryError(f"Failed to delete product {product_id}: {e}") from e

        logger.info(f"Deleted product {product_id} ({result.rowcount} row(s) affected)")
        return result.rowcount
