"""Alembic environment for the catalog database.

The URL comes from ``-x url=...`` when given, else from the config's
``sqlalchemy.url`` (set by `product_catalog.config.build_alembic_config`).
"""

from alembic import context
from sqlalchemy import pool

import product_catalog.adapters.products.schema  # noqa: F401 # pylint: disable=unused-import
from product_catalog.adapters.db.engine import make_engine
from product_catalog.adapters.db.metadata import metadata

# pylint: disable=no-member


def _database_url() -> str:
    url = context.get_x_argument(as_dictionary=True).get("url")
    url = url or context.config.get_main_option("sqlalchemy.url")
    if not url:
        raise RuntimeError("No database URL configured for migrations.")
    return url


def _configure(**kwargs) -> None:
    # SQLite cannot ALTER most things in place; batch mode rebuilds the table.
    context.configure(
        target_metadata=metadata,
        compare_type=True,
        render_as_batch=True,
        **kwargs,
    )
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    _configure(url=_database_url(), literal_binds=True)
else:
    engine = make_engine(_database_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        _configure(connection=connection)
    engine.dispose()
