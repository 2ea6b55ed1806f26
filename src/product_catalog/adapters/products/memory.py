"""In-memory ProductRepository implementation for testing purposes."""

from __future__ import annotations

import dataclasses
import itertools

from product_catalog.domain.product import Product
from product_catalog.interfaces.product_repository import (
    ProductRepository,
    ensure_storable,
)


class InMemoryProductRepository(ProductRepository):
    """Dict-backed repository. Products are returned in insertion order.

    Stored products are copies, so callers mutating a returned or saved
    object never alter what the repository holds.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: dict[int, Product] = {}
        self._ids = itertools.count(1)
        for product in products or []:
            self.save(product)

    def find_all(self) -> list[Product]:
        return [dataclasses.replace(p) for p in self._products.values()]

    def find_by_id(self, product_id: int) -> Product | None:
        if (product := self._products.get(product_id)) is None:
            return None
        return dataclasses.replace(product)

    def save(self, product: Product) -> Product:
        ensure_storable(product)
        product_id = product.id if product.id is not None else self._next_id()
        stored = dataclasses.replace(product, id=product_id)
        self._products[product_id] = stored
        return dataclasses.replace(stored)

    def _next_id(self) -> int:
        while (candidate := next(self._ids)) in self._products:
            continue
        return candidate
