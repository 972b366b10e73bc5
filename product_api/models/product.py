"""Product model for database representation."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """Product data model representing a row of the Products table."""

    name: str
    description: str
    price: Decimal
    id: Optional[int] = None  # Assigned by the store on insert
