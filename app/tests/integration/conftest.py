"""
Root-level conftest.py for integration tests.

Integration tests run the real routes, registry and tool handlers and mock
only at the Texterify HTTP boundary.
"""

import pytest

from api.dependencies.rate_limits import get_limiter


@pytest.fixture
def no_rate_limit():
    """Disable the shared slowapi limiter for the duration of a test."""
    limiter = get_limiter()
    limiter.enabled = False
    yield
    limiter.enabled = True
