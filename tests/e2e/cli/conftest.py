"""Fixtures for end-to-end CLI tests.

`chatter` is a throwaway subcommand that logs one line per level from a
package logger and from a foreign one, for checking console filtering and
the flight recorder.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click
import pytest
from click.testing import CliRunner, Result

from product_catalog.entrypoints.cli.main import product_catalog

# pylint: disable=redefined-outer-name


@click.command()
def chatter():
    """Log at every level from two loggers."""
    ours = logging.getLogger("product_catalog.chatter")
    foreign = logging.getLogger("vendor.lib")
    for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
        name = logging.getLevelName(level).lower()
        ours.log(level, "ours %s", name)
        foreign.log(level, "foreign %s", name)


def _unregister(group: click.Group, name: str) -> None:
    # click-extra groups also list commands per help section
    sections = [getattr(group, "_default_section", None), *getattr(group, "_sections", [])]
    for registry in (group, *sections):
        getattr(registry, "commands", {}).pop(name, None)


@pytest.fixture
def with_chatter():
    product_catalog.add_command(chatter)
    try:
        yield
    finally:
        _unregister(product_catalog, "chatter")


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def invoke(runner, migrated_sqlite_url) -> Callable[..., Result]:
    """Invoke the CLI against a migrated database, flight recorder off.

    Extra environment variables may be passed through ``env=``.
    """

    def _invoke(*args: str, env: dict[str, str] | None = None, **kwargs) -> Result:
        return runner.invoke(
            product_catalog,
            ["--no-flight-recorder", *args],
            env={"PRODUCT_CATALOG_DB_URL": migrated_sqlite_url, **(env or {})},
            **kwargs,
        )

    return _invoke
