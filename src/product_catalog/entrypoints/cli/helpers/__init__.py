"""Helpers shared by the CLI command modules."""

from .db_url import database_url_errors, sanitize_url
from .messages import error, success, warn

__all__ = ["database_url_errors", "sanitize_url", "warn", "success", "error"]
