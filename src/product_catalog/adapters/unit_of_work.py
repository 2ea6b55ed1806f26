"""Unit of work over one SQLAlchemy connection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from product_catalog.adapters.products import SqlAlchemyProductRepository
from product_catalog.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """Checks a connection out of `engine` for the length of a ``with`` block.

    The connection is returned to the pool on exit even when the rollback
    itself fails.
    """

    connection: Connection

    def __init__(self, engine: Engine):
        self.engine = engine

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self.connection = self.engine.connect()
        self.products = SqlAlchemyProductRepository(self.connection)
        super().__enter__()
        return self

    def __exit__(self, *exc_info) -> None:
        try:
            super().__exit__(*exc_info)
        finally:
            self.connection.close()

    def commit(self) -> None:
        self.connection.commit()

    def rollback(self) -> None:
        self.connection.rollback()
