"""Wire the product service to its SQLite-backed unit of work."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import Engine

from product_catalog import config
from product_catalog.adapters.db.engine import make_engine
from product_catalog.adapters.unit_of_work import SqlAlchemyUnitOfWork
from product_catalog.interfaces.unit_of_work import AbstractUnitOfWork
from product_catalog.service_layer.product_service import ProductService


@dataclass(frozen=True)
class AppContainer:
    """The engine and the unit of work built on it.

    The container owns the engine; call `dispose()` once done with `uow`.
    """

    engine: Engine
    uow: AbstractUnitOfWork

    def dispose(self) -> None:
        self.engine.dispose()


def build_uow(engine: Engine) -> AbstractUnitOfWork:
    return SqlAlchemyUnitOfWork(engine)


def build_product_service(uow: AbstractUnitOfWork) -> ProductService:
    """Build a product service over the repository of an entered unit of work."""
    return ProductService(uow.products)


def bootstrap(url: str | None = None) -> AppContainer:
    """Build the application for `url`, or for the configured URL if omitted.

    Raises:
        DatabaseUrlNotSetError: If no URL is given or configured.
        UnsupportedDatabaseError: If the URL is not a SQLite URL.
    """
    engine = make_engine(url if url is not None else config.get_db_url())
    return AppContainer(engine=engine, uow=build_uow(engine))
