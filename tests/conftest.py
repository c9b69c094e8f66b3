"""Shared fixtures for computil tests."""

import pytest

from computil.config import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the default configuration."""
    reset_config()
    yield
    reset_config()
