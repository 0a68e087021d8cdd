"""End-of-day prices: ``eod``, ``eod/latest`` and ``eod/{date}``."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from ..core.enums import SortOrder
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
class Eod(Pageable):
    """End-of-day bars for one or more symbols.

    Attributes:
        symbols: Ticker symbols; stored de-duplicated and sorted
        exchange: Restrict to one exchange MIC (e.g. "XNAS")
        sort: Sort order by date
        date_from: First date to include
        date_to: Last date to include
        limit: Items per response, 1 to 1000
        offset: Items to skip
        latest: Fetch ``eod/latest`` instead
        date: Fetch ``eod/{date}`` instead

    Raises:
        EndpointValidationError: If ``latest`` and ``date`` are combined
        PaginationLimitExceededError: If ``limit`` is above 1000

    Examples:
        Eod(symbols=("AAPL", "MSFT"), sort=SortOrder.ASCENDING)
        Eod(symbols=("AAPL",), latest=True)
        Eod(symbols=("AAPL",), date=dt.date(2023, 9, 27))
    """

    symbols: tuple[str, ...] = ()
    exchange: str | None = None
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
        return dated_path("eod", self.latest, self.date)

    def parameters(self) -> QueryParams:
        params = QueryParams()
        params.extend(("symbols", s) for s in self.symbols)
        params.push_opt("exchange", self.exchange)
        params.push_opt("sort", self.sort)
        params.push_opt("date_from", self.date_from)
        params.push_opt("date_to", self.date_to)
        params.push_opt("limit", self.limit)
        params.push_opt("offset", self.offset)
        return params
