"""One-line notices on stderr, so stdout stays machine-readable."""

import click

GLYPHS = {"warn": ("⚠️", "[!]"), "success": ("✅", "[OK]"), "error": ("❌", "[X]")}


def glyph(kind: str) -> str:
    """The emoji for `kind`, or its ASCII fallback when stderr cannot encode it."""
    emoji, fallback = GLYPHS[kind]
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def _notice(kind: str, msg: str, color: str) -> None:
    click.secho(f"{glyph(kind)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    _notice("warn", msg, "yellow")


def success(msg: str) -> None:
    _notice("success", msg, "green")


def error(msg: str) -> None:
    _notice("error", msg, "red")
