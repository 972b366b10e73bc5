"""HTTP controllers."""

from product_api.api.controller.product_controller import (
    ProductPayload,
    ProductUpdatePayload,
    get_product_repository,
)
from product_api.api.controller.product_controller import router as product_router

__all__ = [
    "ProductPayload",
    "ProductUpdatePayload",
    "get_product_repository",
    "product_router",
]
