"""
Pytest configuration and shared fixtures for verfmt tests.
"""

import pytest

from verfmt import VersionFormatter


@pytest.fixture
def formatter():
    """Formatter with default params (divisor 1000, radix 32, separator 'f')."""
    return VersionFormatter()
