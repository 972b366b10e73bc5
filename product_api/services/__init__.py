"""Service modules."""

from product_api.services.schema_initializer import SchemaInitializer

__all__ = ["SchemaInitializer"]
