"""Shared BDD fixtures for the stockroom domain."""

import pytest


@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}
