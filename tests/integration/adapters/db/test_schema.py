"""Tests for the products table definition and its naming convention.

The migration and `metadata.create_all()` must agree, otherwise Alembic
autogenerate would report spurious diffs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import inspect

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def _describe(engine: Engine) -> tuple[set[str], str | None]:
    inspector = inspect(engine)
    columns = {col["name"] for col in inspector.get_columns("products")}
    pk_name = inspector.get_pk_constraint("products").get("name")
    return columns, pk_name


def test_metadata_creates_products_table(sqlite_engine_memory: Engine):
    """create_all() builds the products table with its columns."""
    columns, _ = _describe(sqlite_engine_memory)
    assert columns == {"id", "name", "description", "price"}


def test_migration_matches_metadata(
    sqlite_engine_memory: Engine, sqlite_engine_file: Engine
):
    """The Alembic migration yields the same columns and primary key name."""
    assert _describe(sqlite_engine_file) == _describe(sqlite_engine_memory)


def test_primary_key_uses_convention_name(sqlite_engine_file: Engine):
    """The primary key is named pk_<table> by convention."""
    _, pk_name = _describe(sqlite_engine_file)
    assert pk_name == "pk_products"
