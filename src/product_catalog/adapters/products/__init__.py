"""Product repository adapters."""

from .memory import InMemoryProductRepository
from .sqlalchemy_repository import SqlAlchemyProductRepository

__all__ = ["InMemoryProductRepository", "SqlAlchemyProductRepository"]
