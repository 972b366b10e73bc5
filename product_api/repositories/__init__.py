"""Repository modules."""

from product_api.repositories.product_repository import (
    ProductRepository,
    RepositoryError,
    SqliteProductRepository,
)

__all__ = [
    "ProductRepository",
    "RepositoryError",
    "SqliteProductRepository",
]
