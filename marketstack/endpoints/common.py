"""Validation helpers shared by the endpoint definitions."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from urllib.parse import quote

from ..core.exceptions import EndpointValidationError
from ..runtime.paging.pagination import check_page_limit


def normalize_symbols(symbols: str | Iterable[str]) -> tuple[str, ...]:
    """De-duplicate and sort ticker symbols.

    A single string is one symbol, not an iterable of characters.
    """
    if isinstance(symbols, str):
        symbols = (symbols,)
    cleaned = {s.strip() for s in symbols}
    if "" in cleaned:
        raise EndpointValidationError("symbols must be non-empty strings")
    return tuple(sorted(cleaned))


def check_limit(limit: int | None) -> None:
    """Validate an optional ``limit`` parameter against the page-size bounds."""
    if limit is not None:
        check_page_limit(limit)


def check_offset(offset: int | None) -> None:
    if offset is not None and offset < 0:
        raise EndpointValidationError(f"offset must be >= 0, got {offset}")


def check_date_range(date_from: dt.date | None, date_to: dt.date | None) -> None:
    if date_from is not None and date_to is not None and date_from > date_to:
        raise EndpointValidationError(f"date_from {date_from} is after date_to {date_to}")


def check_latest_or_date(latest: bool, date: dt.date | None) -> None:
    """``latest`` and a specific ``date`` select different paths; pick one."""
    if latest and date is not None:
        raise EndpointValidationError("`latest` and `date` cannot be combined")


def dated_path(base: str, latest: bool, date: dt.date | None) -> str:
    """``base``, ``base/latest`` or ``base/YYYY-MM-DD``."""
    if latest:
        return f"{base}/latest"
    if date is not None:
        return f"{base}/{date.isoformat()}"
    return base


def path_segment(value: str) -> str:
    """Percent-encode one path segment, ``/``, ``?`` and ``#`` included."""
    return quote(value.strip(), safe="")
