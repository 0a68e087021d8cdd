"""Intraday prices: ``intraday``, ``intraday/latest`` and ``intraday/{date}``."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from ..core.enums import Interval, SortOrder
from ..runtime.rest.endpoint import Pageable
from ..runtime.rest.params import QueryParams
from .common import (
    check_date_range,
    check_latest_or_date,
    check_limit,
    check_offset,
    dated_path,
    normalize_symbols,
)


@dataclass(frozen=True)
class Intraday(Pageable):
    """Intraday bars at a fixed ``interval``.

    Same fields as ``Eod`` plus ``interval``; ``latest`` and ``date`` are
    mutually exclusive.
    """

    symbols: tuple[str, ...] = ()
    exchange: str | None = None
    interval: Interval | None = None
    sort: SortOrder | None = None
    date_from: dt.date | None = None
    date_to: dt.date | None = None
    limit: int | None = None
    offset: int | None = None
    latest: bool = False
    date: dt.date | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", normalize_symbols(self.symbols))
        check_latest_or_date(self.latest, self.date)
        check_date_range(self.date_from, self.date_to)
        check_limit(self.limit)
        check_offset(self.offset)

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return dated_path("intraday", self.latest, self.date)

    def parameters(self) -> QueryParams:
        params = QueryParams()
        params.extend(("symbols", s) for s in self.symbols)
        params.push_opt("exchange", self.exchange)
        params.push_opt("interval", self.interval)
        params.push_opt("sort", self.sort)
        params.push_opt("date_from", self.date_from)
        params.push_opt("date_to", self.date_to)
        params.push_opt("limit", self.limit)
        params.push_opt("offset", self.offset)
        return params
