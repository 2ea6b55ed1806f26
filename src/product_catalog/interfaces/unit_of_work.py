"""Transaction boundary around a `ProductRepository`."""

from __future__ import annotations

import abc

from .product_repository import ProductRepository


class AbstractUnitOfWork(abc.ABC):
    """Groups repository calls into one transaction.

    Use as a context manager. `products` is only valid inside the block, and
    anything not committed before the block ends is rolled back.
    """

    products: ProductRepository

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *exc_info) -> None:
        self.rollback()

    @abc.abstractmethod
    def commit(self) -> None: ...

    @abc.abstractmethod
    def rollback(self) -> None: ...
