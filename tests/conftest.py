"""
Pytest configuration and shared fixtures for valobj tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Value object classes are declared inside the test that uses them unless
  they must be importable (pickling)
- Error messages are public contracts: assert on the full text
"""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog's default configuration after every test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from valobj import __version__

    return __version__
