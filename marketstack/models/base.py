"""Shared base for Marketstack response models."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict

_COMPACT_OFFSET_RE = re.compile(r"([+-]\d{2})(\d{2})$")


def normalize_offset(value: Any) -> Any:
    """Rewrite a trailing ``+0000`` UTC offset as ``+00:00``.

    Marketstack timestamps look like ``2021-04-09T00:00:00+0000``; anything
    that is not such a string is returned untouched.
    """
    if isinstance(value, str) and "T" in value:
        return _COMPACT_OFFSET_RE.sub(r"\1:\2", value)
    return value


class MarketstackModel(BaseModel):
    """Immutable response model; fields unknown to the model are ignored."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")


class PaginationInfo(MarketstackModel):
    """The ``pagination`` block of a list response."""

    limit: int
    offset: int
    count: int
    total: int
