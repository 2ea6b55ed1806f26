"""Engine factory for the catalog database.

The catalog runs on SQLite only: its id column relies on SQLite's rowid
assignment (the next id is always max(id) + 1), which stays correct when
callers supply their own ids. Other backends are refused up front instead of
failing later with diverging id sequences.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

SUPPORTED_BACKEND = "sqlite"


class UnsupportedDatabaseError(ValueError):
    """Raised for a database URL whose backend the catalog cannot run on."""

    def __init__(self, backend: str) -> None:
        super().__init__(
            f"Unsupported database backend {backend!r}; "
            f"only {SUPPORTED_BACKEND} URLs are accepted."
        )
        self.backend = backend


def make_engine(url: str | URL, **engine_options: Any) -> Engine:
    """Return an Engine for a SQLite `url`.

    `engine_options` are passed through to `sqlalchemy.create_engine`.

    Raises:
        sqlalchemy.exc.ArgumentError: If `url` cannot be parsed.
        UnsupportedDatabaseError: If `url` names another backend.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != SUPPORTED_BACKEND:
        raise UnsupportedDatabaseError(parsed.get_backend_name())
    return create_engine(parsed, **engine_options)
