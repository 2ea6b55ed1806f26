"""PRODUCT CATALOG test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with a SQLite database (and Alembic).
- e2e/          : The command-line interface driven through Click's CliRunner.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); use fakes or autospecced
  doubles at the repository boundary.
- Integration hits a real database with realistic setup/teardown.
- e2e asserts user-observable output and exit codes, not internals.
"""
