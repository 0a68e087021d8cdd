"""Ticker listings: ``tickers`` and ``tickers/{symbol}[/eod|/splits|/dividends]``."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import EndpointValidationError
from ..runtime.rest.endpoint import Pageable
from ..runtime.rest.params import QueryParams
from .common import check_limit, check_offset, path_segment
from .dividends import Dividends
from .eod import Eod
from .splits import Splits


@dataclass(frozen=True)
class Tickers(Pageable):
    """Ticker metadata, optionally scoped to one ticker and one sub-resource.

    With ``ticker`` set, at most one of ``eod``, ``splits`` or ``dividends``
    may be given; its path is appended below the ticker and its parameters
    come first in the query string.

    Examples:
        Tickers(search="apple")
        Tickers(ticker="AAPL")
        Tickers(ticker="AAPL", eod=Eod(latest=True))  # tickers/AAPL/eod/latest
    """

    ticker: str | None = None
    exchange: str | None = None
    search: str | None = None
    limit: int | None = None
    offset: int | None = None
    eod: Eod | None = None
    splits: Splits | None = None
    dividends: Dividends | None = None

    def __post_init__(self) -> None:
        nested = [n for n in (self.eod, self.splits, self.dividends) if n is not None]
        if len(nested) > 1:
            raise EndpointValidationError("Invalid combination of `eod`, `splits` or `dividends`")
        if nested and self.ticker is None:
            raise EndpointValidationError("a nested endpoint requires `ticker`")
        if self.ticker is not None and not self.ticker.strip():
            raise EndpointValidationError("ticker must be a non-empty string")
        check_limit(self.limit)
        check_offset(self.offset)

    @property
    def nested(self) -> Eod | Splits | Dividends | None:
        return self.eod or self.splits or self.dividends

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        if self.ticker is None:
            return "tickers"
        path = f"tickers/{path_segment(self.ticker)}"
        if self.nested is not None:
            path = f"{path}/{self.nested.endpoint()}"
        return path

    def parameters(self) -> QueryParams:
        params = self.nested.parameters() if self.nested is not None else QueryParams()
        params.push_opt("exchange", self.exchange)
        params.push_opt("search", self.search)
        params.push_opt("limit", self.limit)
        params.push_opt("offset", self.offset)
        return params
