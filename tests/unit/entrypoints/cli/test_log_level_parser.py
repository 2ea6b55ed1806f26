"""Unit tests for the ``-L NAME=LEVEL`` parser."""

import logging

import click
import pytest

from product_catalog.entrypoints.cli.helpers.log_level_parser import parse_log_level


def parse(value):
    return parse_log_level(None, None, value)


def test_nothing_given():
    assert parse(()) == {}
    assert parse(None) == {}


def test_last_level_for_a_logger_wins():
    assert parse(("sqlalchemy.engine=INFO", "sqlalchemy.engine=ERROR")) == {
        "sqlalchemy.engine": logging.ERROR
    }


def test_env_string_split_on_commas_and_spaces():
    assert parse("alembic=debug, product_catalog=INFO  urllib3=warning") == {
        "alembic": logging.DEBUG,
        "product_catalog": logging.INFO,
        "urllib3": logging.WARNING,
    }


@pytest.mark.parametrize(
    ("value", "match"),
    [
        (("alembic",), "Expected NAME=LEVEL"),
        (("=INFO",), "Expected NAME=LEVEL"),
        (("alembic=CHATTY",), "Unknown log level 'CHATTY' for alembic"),
    ],
)
def test_bad_items(value, match):
    with pytest.raises(click.BadParameter, match=match):
        parse(value)
