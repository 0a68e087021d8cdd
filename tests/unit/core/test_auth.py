"""Unit tests for Auth."""

from __future__ import annotations

import pytest

from marketstack.core import Auth
from marketstack.runtime.rest import QueryParams


def test_apply_pushes_access_key_last():
    params = QueryParams().push("symbols", "AAPL")
    Auth("abc123").apply(params)
    assert params.render() == "symbols=AAPL&access_key=abc123"


def test_repr_hides_token():
    assert "abc123" not in repr(Auth("abc123"))


def test_empty_token_rejected():
    with pytest.raises(ValueError):
        Auth("")
