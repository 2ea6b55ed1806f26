"""Packaged Alembic migration environment for the product catalog."""
