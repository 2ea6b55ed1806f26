"""``product-catalog db``: bring the catalog schema up to date.

Only forward migrations are offered. Alembic's own output goes to stdout,
notices and prompts to stderr.
"""

from __future__ import annotations

import sys

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text

from product_catalog import config
from product_catalog.adapters.db.engine import make_engine

from .helpers import database_url_errors, sanitize_url, success, warn

UPGRADE_SCHEMA_WARNING = (
    "This will migrate the catalog database to the latest schema. "
    "Back it up first."
)
UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'product-catalog db upgrade' to create or update the schema."


def _reachable_url() -> str:
    """The configured URL, after checking it names a database we can open."""
    with database_url_errors():
        url = config.get_db_url()
        engine = make_engine(url)
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        finally:
            engine.dispose()
    return url


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Manage the catalog database schema."""


@db.command()
@click.option("--sql", is_flag=True, help="Print the migration SQL instead of running it.")
@click.option("--force", is_flag=True, help="Do not ask for confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Migrate the database to the latest schema."""
    url = _reachable_url()
    if not (sql or force):
        warn(UPGRADE_SCHEMA_WARNING)
        click.echo(f"Database: {sanitize_url(url)}", err=True)
        click.confirm("Continue?", abort=True, err=True)
    command.upgrade(config.build_alembic_config(url, stdout=sys.stdout), "head", sql=sql)
    if not sql:
        success("Upgrade complete!")


@db.command()
@click.option("-v", "--verbose", is_flag=True, help="Show revision details.")
def current(verbose: bool) -> None:
    """Print the schema revision the database is at."""
    cfg = config.build_alembic_config(_reachable_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
def status() -> None:
    """Report where the database is and whether its schema is current."""
    url = _reachable_url()
    head = ScriptDirectory.from_config(config.build_alembic_config(url)).get_current_head()
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            revision = MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()

    success("Database reachable")
    click.echo(f"URL     : {sanitize_url(url)}")
    if revision is None:
        click.echo("Schema  : uninitialized")
    elif revision == head:
        click.echo(f"Schema  : {revision} (up to date)")
    else:
        click.echo(f"Schema  : {revision} (behind {head})")
    if revision != head:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
