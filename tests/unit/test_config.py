"""Unit tests for product_catalog.config."""

import io

import pytest

from product_catalog import config


def test_get_db_url_reads_env(monkeypatch):
    """The URL comes straight from PRODUCT_CATALOG_DB_URL."""
    monkeypatch.setenv("PRODUCT_CATALOG_DB_URL", "sqlite:///x.db")
    assert config.get_db_url() == "sqlite:///x.db"


@pytest.mark.parametrize("value", [None, ""])
def test_get_db_url_missing(monkeypatch, value):
    """Unset or empty URL raises DatabaseUrlNotSetError."""
    if value is None:
        monkeypatch.delenv("PRODUCT_CATALOG_DB_URL", raising=False)
    else:
        monkeypatch.setenv("PRODUCT_CATALOG_DB_URL", value)

    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()


def test_build_alembic_config_sets_url_and_scripts():
    """The Alembic config points at the packaged scripts and the given URL."""
    out = io.StringIO()
    cfg = config.build_alembic_config("sqlite:///x.db", stdout=out)

    assert cfg.get_main_option("sqlalchemy.url") == "sqlite:///x.db"
    assert cfg.get_main_option("script_location").endswith("alembic")
    assert cfg.stdout is out


def test_build_alembic_config_without_url():
    """No URL is set when none is given."""
    cfg = config.build_alembic_config()
    assert cfg.get_main_option("sqlalchemy.url") is None
