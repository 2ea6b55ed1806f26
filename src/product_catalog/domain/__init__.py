"""Domain layer for the product catalog."""

from .product import Product

__all__ = ["Product"]
