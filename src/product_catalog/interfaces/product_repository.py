"""Interface for the product repository.

The repository owns persistence of `Product` entities. The service layer only
ever talks to this contract, so any storage backend can be plugged in.
"""

from __future__ import annotations

import abc
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from product_catalog.domain.product import Product


# --- Errors ---


class RepositoryError(Exception):
    """Base class for all product repository errors."""


class RepositoryUnavailableError(RepositoryError):
    """Raised when the backing store cannot be reached or fails transiently."""


class InvalidProductError(RepositoryError):
    """Raised when a product is rejected by the backing store."""

    def __init__(self, product: Product, reason: str) -> None:
        super().__init__(f"Invalid product ({product.name!r}): {reason}")
        self.product = product
        self.reason = reason


def ensure_storable(product: Product) -> None:
    """Reject values no backend can store faithfully.

    Raises:
        InvalidProductError: If the price is NaN or infinite.
    """
    if not math.isfinite(product.price):
        raise InvalidProductError(product, f"price must be finite, got {product.price!r}")


# --- Interface ---


class ProductRepository(abc.ABC):
    """Persistence-access contract for products."""

    @abc.abstractmethod
    def find_all(self) -> list[Product]:
        """Return every stored product.

        Returns:
            All products in storage order. An empty list when none exist.
        """

    @abc.abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Look up a product by its identifier.

        Args:
            product_id: The unique product identifier.

        Returns:
            The product if found, otherwise None.
        """

    @abc.abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a product.

        If `product.id` is None, storage assigns one. If the id already exists,
        the stored product is replaced.

        Args:
            product: The product to persist. It is not mutated.

        Returns:
            The persisted product, carrying its assigned id.

        Raises:
            InvalidProductError: If the backing store rejects the product.
            RepositoryUnavailableError: If the backing store fails.
        """
