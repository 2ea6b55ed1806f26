"""Global pytest configuration for the product catalog tests.

Tests are marked ``unit``, ``integration`` or ``e2e`` after the top-level
directory they live in, unless they carry one of those marks already.
"""

from __future__ import annotations

from pathlib import Path

import pytest

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()
SUITES = ("unit", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        try:
            suite = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if suite in SUITES and not any(item.iter_markers(name=suite)):
            item.add_marker(getattr(pytest.mark, suite))
