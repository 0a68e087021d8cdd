"""Ticker models."""

from pydantic import Field

from .base import MarketstackModel, PaginationInfo
from .eod import EodDataItem


class StockExchange(MarketstackModel):
    """Exchange a ticker is listed on."""

    name: str
    acronym: str | None = None
    mic: str
    country: str | None = None
    country_code: str | None = None
    city: str | None = None
    website: str | None = None


class TickersDataItem(MarketstackModel):
    name: str
    symbol: str = Field(..., min_length=1)
    has_intraday: bool = False
    has_eod: bool = False
    country: str | None = None
    stock_exchange: StockExchange | None = None


class TickersData(MarketstackModel):
    pagination: PaginationInfo
    data: list[TickersDataItem]


class TickerEod(MarketstackModel):
    """A ticker together with its end-of-day bars."""

    name: str
    symbol: str = Field(..., min_length=1)
    has_intraday: bool = False
    has_eod: bool = False
    country: str | None = None
    eod: list[EodDataItem]


class TickersEodData(MarketstackModel):
    """Response of ``tickers/{symbol}/eod``."""

    pagination: PaginationInfo
    data: TickerEod
