"""The ``products`` table.

`id` is an INTEGER PRIMARY KEY, i.e. SQLite's rowid: rows inserted without an
id get max(id) + 1, so explicit and generated ids never collide.
"""

from __future__ import annotations

from sqlalchemy import Column, Float, Integer, String, Table, Text

from product_catalog.adapters.db.metadata import metadata

__all__ = ["products"]

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column("price", Float, nullable=False),
)
