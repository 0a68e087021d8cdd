"""Supported currencies: ``currencies``."""

from __future__ import annotations

from dataclasses import dataclass

from ..runtime.rest.endpoint import Pageable
from ..runtime.rest.params import QueryParams
from .common import check_limit, check_offset


@dataclass(frozen=True)
class Currencies(Pageable):
    limit: int | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        check_limit(self.limit)
        check_offset(self.offset)

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return "currencies"

    def parameters(self) -> QueryParams:
        params = QueryParams()
        params.push_opt("limit", self.limit)
        params.push_opt("offset", self.offset)
        return params
