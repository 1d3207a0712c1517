"""
Shared test fixtures for typeparse tests.

Package defaults are module-level state; every test starts and ends with
the built-in values so ``configure_defaults()`` calls cannot leak.
"""

import pytest

from typeparse.config import reset_defaults


@pytest.fixture(autouse=True)
def _builtin_defaults():
    reset_defaults()
    yield
    reset_defaults()


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (exercises several modules together)",
    )
