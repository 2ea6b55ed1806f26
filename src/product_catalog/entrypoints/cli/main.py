"""The ``product-catalog`` command.

The root group only sets up logging; the work happens in its subgroups:

    $ product-catalog db upgrade
    $ product-catalog products add --name Laptop --price 1200
    $ product-catalog -v products list --json
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from product_catalog import __version__
from product_catalog.logging import log_startup, setup_logging

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .products import products as products_group

logger = logging.getLogger(__name__)


def _default_log_path() -> Path:
    log_dir = user_log_dir("product-catalog", appauthor=False, ensure_exists=True)
    return Path(log_dir) / "latest.log"


@clickx.extra_group(
    version=__version__,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option("-v", "--verbose", "verbose", count=True, help="More console output; repeatable.")
@click.option("-q", "--quiet", "quiet", count=True, help="Less console output; repeatable.")
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Show every record on the console, with logger names and source paths.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_default=True,
    help="Keep recent DEBUG records in memory and write them to --log-path on WARNING.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=_default_log_path,
    envvar="PRODUCT_CATALOG_LOG_PATH",
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="PRODUCT_CATALOG_LOGGER_LEVELS",
    show_envvar=True,
    metavar="NAME=LEVEL",
    help="Minimum level for one logger, e.g. -L sqlalchemy.engine=INFO. Repeatable.",
)
@clickx.pass_context
def product_catalog(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    flight_recorder: bool,
    log_path: Path,
    logger_levels: dict[str, int],
) -> None:
    """Manage a product catalog kept in a SQLite database."""
    level = logging.WARNING + 10 * (quiet - verbose)
    level = min(max(level, logging.DEBUG), logging.CRITICAL)
    recorder_path = log_path if flight_recorder else None
    setup_logging(
        level,
        debug=debug,
        color=ctx.color is not False,
        log_path=recorder_path,
        logger_levels=logger_levels,
    )
    log_startup(
        logger, __version__, level=level, log_path=recorder_path, logger_levels=logger_levels
    )
    ctx.call_on_close(logging.shutdown)


product_catalog.add_command(db_group)
product_catalog.add_command(products_group)
