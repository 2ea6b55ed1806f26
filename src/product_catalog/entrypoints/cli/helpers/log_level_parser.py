"""Parsing of ``-L NAME=LEVEL`` options."""

import logging
import re

import click

_SEPARATORS = re.compile(r"[\s,]+")


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | tuple[str, ...] | None,
) -> dict[str, int]:
    """Turn ``NAME=LEVEL`` items into ``{name: numeric level}``.

    `value` is either the tuple of repeated options or a single string from
    the environment; items may also be separated by commas or spaces. When a
    logger is named twice the last level wins.
    """
    raw = (value,) if isinstance(value, str) else (value or ())
    known = logging.getLevelNamesMapping()
    levels: dict[str, int] = {}
    for item in (i for chunk in raw for i in _SEPARATORS.split(chunk) if i):
        name, sep, level_name = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        if (level := known.get(level_name.upper())) is None:
            raise click.BadParameter(f"Unknown log level {level_name!r} for {name}")
        levels[name] = level
    return levels
