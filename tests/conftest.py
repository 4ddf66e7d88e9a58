"""
Shared test fixtures for the moderare test suite.
"""

import pytest

from moderare import Engine


@pytest.fixture
def engine():
    """A fresh engine with default settings."""
    return Engine()


@pytest.fixture
def valid_post():
    return {
        "title": "Hello",
        "author": {"name": "Ada"},
        "comments": [
            {"body": "First!", "author": {"name": "Grace"}},
            {"body": "Nice post", "author": {"name": "Linus"}},
        ],
    }
