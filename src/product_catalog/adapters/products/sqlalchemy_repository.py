"""SQLAlchemy-backed ProductRepository adapter.

Products live in the ``products`` table (see adapters.products.schema) and are
read and written with SQLAlchemy Core on a `Connection` owned by the unit of
work. The adapter never commits.

Driver failures are translated: integrity/data problems and ids the backend
cannot represent become `InvalidProductError`, anything else from the DBAPI
becomes `RepositoryUnavailableError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from sqlalchemy import insert, select, update
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError

from product_catalog.domain.product import Product
from product_catalog.interfaces.product_repository import (
    InvalidProductError,
    ProductRepository,
    RepositoryUnavailableError,
    ensure_storable,
)

from .schema import products

if TYPE_CHECKING:
    from sqlalchemy import Executable, RowMapping
    from sqlalchemy.engine import Connection, Result


class SqlAlchemyProductRepository(ProductRepository):
    """Products stored in a relational table, listed by ascending id.

    `save` inserts when the id is new (or None) and updates the row otherwise.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    def find_all(self) -> list[Product]:
        result = self._run(select(products).order_by(products.c.id))
        return [_to_product(row) for row in result.mappings()]

    def find_by_id(self, product_id: int) -> Product | None:
        stmt = select(products).where(products.c.id == product_id)
        try:
            row = self._run(stmt).mappings().one_or_none()
        except OverflowError:
            # an id the column cannot hold cannot belong to a stored product
            return None
        return None if row is None else _to_product(row)

    def save(self, product: Product) -> Product:
        ensure_storable(product)
        fields: dict[str, Any] = {
            "name": product.name,
            "description": product.description,
            "price": product.price,
        }
        try:
            if product.id is None:
                stmt = insert(products).values(**fields)
            elif self.find_by_id(product.id) is None:
                stmt = insert(products).values(id=product.id, **fields)
            else:
                stmt = (
                    update(products)
                    .where(products.c.id == product.id)
                    .values(**fields)
                )
            row = self._run(stmt.returning(products)).mappings().one()
        except (IntegrityError, DataError) as e:
            _reject(product, str(e.orig or e), e)
        except OverflowError as e:
            _reject(product, f"id {product.id} is out of range", e)
        return _to_product(row)

    def _run(self, stmt: Executable) -> Result:
        try:
            return self.connection.execute(stmt)
        except (IntegrityError, DataError):
            raise
        except DBAPIError as e:
            raise RepositoryUnavailableError(str(e)) from e


def _to_product(row: RowMapping) -> Product:
    return Product(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        price=row["price"],
    )


def _reject(product: Product, reason: str, cause: Exception) -> NoReturn:
    raise InvalidProductError(product, reason) from cause
