"""Response models for the Marketstack REST API.

Architecture:
    One module per remote resource. Every ``*Data`` model mirrors a whole
    response (``pagination`` plus ``data``); every ``*DataItem`` model is one
    element of ``data`` and is what paged queries yield.

Design Decisions:
    - Pydantic v2: validation and coercion through ``TypeAdapter`` at dispatch
    - Frozen models: responses are read-only values
    - Decimal for prices: no float rounding on financial values
    - Unknown fields ignored: new server fields never break parsing
"""

from .base import MarketstackModel, PaginationInfo
from .currencies import CurrenciesData, CurrenciesDataItem
from .dividends import DividendsData, DividendsDataItem
from .eod import EodData, EodDataItem
from .exchanges import ExchangeEod, ExchangesData, ExchangesDataItem, ExchangesEodData
from .intraday import IntradayData, IntradayDataItem
from .splits import SplitsData, SplitsDataItem
from .tickers import StockExchange, TickerEod, TickersData, TickersDataItem, TickersEodData
from .timezones import TimezonesData, TimezonesDataItem

__all__ = [
    "MarketstackModel",
    "PaginationInfo",
    "CurrenciesData",
    "CurrenciesDataItem",
    "DividendsData",
    "DividendsDataItem",
    "EodData",
    "EodDataItem",
    "ExchangeEod",
    "ExchangesData",
    "ExchangesDataItem",
    "ExchangesEodData",
    "IntradayData",
    "IntradayDataItem",
    "SplitsData",
    "SplitsDataItem",
    "StockExchange",
    "TickerEod",
    "TickersData",
    "TickersDataItem",
    "TickersEodData",
    "TimezonesData",
    "TimezonesDataItem",
]
