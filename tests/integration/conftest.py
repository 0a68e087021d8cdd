"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def api_key() -> str:
    """Access key for the live API, read from MARKETSTACK_API_KEY."""
    key = os.environ.get("MARKETSTACK_API_KEY")
    if not key:
        pytest.skip("MARKETSTACK_API_KEY is not set")
    return key
