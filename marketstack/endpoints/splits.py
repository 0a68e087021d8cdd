"""Stock split history: ``splits``."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from ..core.enums import SortOrder
from ..runtime.rest.endpoint import Pageable
from ..runtime.rest.params import QueryParams
from .common import check_date_range, check_limit, check_offset, normalize_symbols


@dataclass(frozen=True)
class Splits(Pageable):
    symbols: tuple[str, ...] = ()
    sort: SortOrder | None = None
    date_from: dt.date | None = None
    date_to: dt.date | None = None
    limit: int | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", normalize_symbols(self.symbols))
        check_date_range(self.date_from, self.date_to)
        check_limit(self.limit)
        check_offset(self.offset)

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return "splits"

    def parameters(self) -> QueryParams:
        params = QueryParams()
        params.extend(("symbols", s) for s in self.symbols)
        params.push_opt("sort", self.sort)
        params.push_opt("date_from", self.date_from)
        params.push_opt("date_to", self.date_to)
        params.push_opt("limit", self.limit)
        params.push_opt("offset", self.offset)
        return params
