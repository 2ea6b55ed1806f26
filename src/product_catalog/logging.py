"""Logging setup for the ``product-catalog`` CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr, filtered by the ``-v``/``-q`` level;
- an optional flight recorder: a `MemoryHandler` that keeps recent records at
  DEBUG and writes them to a file only once something at WARNING or above is
  logged, so a failed run leaves a full trace behind.
"""

from __future__ import annotations

import logging
import platform
import sys
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from pathlib import Path

PACKAGE_LOGGER = "product_catalog"
FLIGHT_RECORDER_CAPACITY = 1000

#: Libraries that are chatty at INFO; held at WARNING unless overridden.
QUIET_LIBRARIES = ("sqlalchemy", "alembic")


class LibraryTagFilter(logging.Filter):
    """Set ``record.tag`` to ``[top-level-name]`` for records from other packages."""

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.partition(".")[0]
        record.tag = "" if top == PACKAGE_LOGGER else f"[{top}]"
        return True


def console_handler(
    level: int, *, debug: bool = False, color: bool = True
) -> RichHandler:
    """Rich handler on stderr. `debug` shows everything with logger names and paths."""
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
    )
    if debug:
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler.addFilter(LibraryTagFilter())
        handler.setFormatter(logging.Formatter("%(tag)s %(message)s"))
    return handler


def flight_recorder(
    path: Path, *, capacity: int = FLIGHT_RECORDER_CAPACITY
) -> MemoryHandler:
    """Buffer up to `capacity` records and dump them to `path` on WARNING."""
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s"
        )
    )
    return MemoryHandler(
        capacity, flushLevel=logging.WARNING, target=target, flushOnClose=False
    )


def setup_logging(
    level: int,
    *,
    debug: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Replace the root logger's handlers and apply per-logger levels.

    The flight recorder is installed only when `log_path` is given. Returns
    the installed handlers.
    """
    handlers: list[logging.Handler] = [console_handler(level, debug=debug, color=color)]
    if log_path is not None:
        handlers.append(flight_recorder(log_path))
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name in QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
    for name, name_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(name_level)
    return handlers


def log_startup(
    logger: logging.Logger,
    version: str,
    *,
    level: int,
    log_path: Path | None,
    logger_levels: dict[str, int],
) -> None:
    logger.info(
        "product-catalog %s (console %s, flight recorder %s)",
        version,
        logging.getLevelName(level),
        log_path or "off",
    )
    logger.debug(
        "Python %s on %s; SQLAlchemy %s; Alembic %s",
        platform.python_version(),
        sys.platform,
        sqlalchemy.__version__,
        alembic.__version__,
    )
    if logger_levels:
        logger.debug(
            "Logger levels: %s",
            ", ".join(
                f"{name}={logging.getLevelName(lvl)}"
                for name, lvl in sorted(logger_levels.items())
            ),
        )
