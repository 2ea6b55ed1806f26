"""Runtime configuration, taken from the environment."""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "PRODUCT_CATALOG_DB_URL"

#: Package holding env.py and the versions/ directory.
MIGRATIONS_PACKAGE = "product_catalog.adapters.db.alembic"


class DatabaseUrlNotSetError(Exception):
    """``PRODUCT_CATALOG_DB_URL`` is unset or empty."""


def get_db_url() -> str:
    """Return the catalog database URL.

    Raises:
        DatabaseUrlNotSetError: If ``PRODUCT_CATALOG_DB_URL`` is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError(DB_URL_ENV_VAR)
    return url


def build_alembic_config(db_url: str | None = None, stdout: TextIO = sys.stdout) -> Config:
    """An Alembic `Config` for the packaged migrations, with no ini file.

    `db_url` may be left out for commands that never connect (e.g. listing
    revisions); Alembic writes its report lines to `stdout`.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    if db_url is not None:
        # ConfigParser interpolation treats "%" specially
        cfg.set_main_option("sqlalchemy.url", db_url.replace("%", "%%"))
    return cfg
