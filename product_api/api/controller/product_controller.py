"""REST controller for product CRUD operations."""

import logging
import math
from decimal import Decimal
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from pydantic import BaseModel, Field, field_serializer, field_validator

from product_api.models import Product
from product_api.repositories import ProductRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])

# SQLite INTEGER is a signed 64-bit value
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1

StoreId = Annotated[int, Field(ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER)]


class ProductPayload(BaseModel):
    """Product as sent and received over the wire."""

    id: Optional[StoreId] = None  # Ignored on create
    name: str
    description: str
    price: Decimal

    @field_validator("price")
    @classmethod
    def price_fits_store(cls, price: Decimal) -> Decimal:
        if not math.isfinite(float(price)):
            raise ValueError("price is out of range")
        return price

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)

    def to_product(self) -> Product:
        return Product(id=self.id, name=self.name, description=self.description, price=self.price)

    @classmethod
    def from_product(cls, product: Product) -> "ProductPayload":
        return cls(id=product.id, name=product.name, description=product.description, price=product.price)


class ProductUpdatePayload(ProductPayload):
    """Full replacement of an existing product; id is required."""

    id: StoreId


def get_product_repository(request: Request) -> ProductRepository:
    """Resolve the repository created by the application factory."""
    return request.app.state.product_repository


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProductPayload)
def create_product(
    payload: ProductPayload,
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductPayload:
    """Create a product and echo it back with the store-assigned id."""
    created = repository.add(payload.to_product())
    return ProductPayload.from_product(created)


@router.get("", response_model=list[ProductPayload])
def list_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> list[ProductPayload]:
    """List all products. An empty store yields an empty array."""
    return [ProductPayload.from_product(product) for product in repository.get_all()]


@router.get("/{product_id}", response_model=ProductPayload)
def get_product(
    product_id: Annotated[int, Path(ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER)],
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductPayload:
    """Get a single product by id."""
    product = repository.get_by_id(product_id)
    if product is None:
        logger.warning(f"Product {product_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return ProductPayload.from_product(product)


@router.put("", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_product(
    payload: ProductUpdatePayload,
    repository: ProductRepository = Depends(get_product_repository),
) -> Response:
    """Overwrite a product. Unknown ids are a silent no-op."""
    repository.update(payload.to_product())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_product(
    product_id: Annotated[int, Path(ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER)],
    repository: ProductRepository = Depends(get_product_repository),
) -> Response:
    """Delete a product. Unknown ids are a silent no-op."""
    repository.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
