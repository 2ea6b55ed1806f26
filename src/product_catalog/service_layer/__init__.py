"""Service layer for the product catalog."""

from .product_service import ProductService

__all__ = ["ProductService"]
