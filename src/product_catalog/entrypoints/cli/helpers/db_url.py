"""Database URL handling shared by the CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import click
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, OperationalError

from product_catalog.adapters.db.engine import UnsupportedDatabaseError
from product_catalog.config import DB_URL_ENV_VAR, DatabaseUrlNotSetError

MISSING_DB_URL_MSG = (
    f"{DB_URL_ENV_VAR} is not set. Point it at the catalog database, e.g.\n"
    f"  export {DB_URL_ENV_VAR}='sqlite:///products.db'"
)
INVALID_URL_FORMAT_MSG = f"{DB_URL_ENV_VAR} is not a valid SQLAlchemy database URL."
UNSUPPORTED_BACKEND_MSG = (
    f"{DB_URL_ENV_VAR} must be a SQLite URL (sqlite:///path/to/catalog.db)."
)
CANNOT_CONNECT_MSG = (
    f"Could not open the database named by {DB_URL_ENV_VAR}. "
    "Check that the path exists and is readable."
)


def sanitize_url(url: str) -> str:
    """Render `url` with its password replaced by ``***``.

    >>> sanitize_url("sqlite+pysqlite:///tmp/products.db")
    'sqlite+pysqlite:///tmp/products.db'
    """
    return make_url(url).render_as_string(hide_password=True)


@contextmanager
def database_url_errors() -> Iterator[None]:
    """Turn configuration and connection failures into `click.ClickException`."""
    try:
        yield
    except DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    except UnsupportedDatabaseError as e:
        raise click.ClickException(UNSUPPORTED_BACKEND_MSG) from e
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
