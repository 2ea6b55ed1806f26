"""Integration tests.

Purpose
- Exercise real interactions with a SQLite database and Alembic migrations.

Guidelines
- Use realistic configuration and setup/teardown per test.
- Minimize mocking; prefer real file-backed databases under tmp_path.
"""
