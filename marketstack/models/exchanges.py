"""Exchange models.

Marketstack returns the exchange description fields at the top level of
each item, next to the nested ``timezone`` and ``currency`` objects. The
models keep that flat shape and expose the description as ``stock_exchange``.
"""

from .base import MarketstackModel, PaginationInfo
from .currencies import CurrenciesDataItem
from .eod import EodDataItem
from .tickers import StockExchange
from .timezones import TimezonesDataItem


class _ExchangeFields(MarketstackModel):
    name: str
    acronym: str | None = None
    mic: str
    country: str | None = None
    country_code: str | None = None
    city: str | None = None
    website: str | None = None

    @property
    def stock_exchange(self) -> StockExchange:
        return StockExchange(
            name=self.name,
            acronym=self.acronym,
            mic=self.mic,
            country=self.country,
            country_code=self.country_code,
            city=self.city,
            website=self.website,
        )


class ExchangesDataItem(_ExchangeFields):
    timezone: TimezonesDataItem | None = None
    currency: CurrenciesDataItem | None = None


class ExchangesData(MarketstackModel):
    pagination: PaginationInfo
    data: list[ExchangesDataItem]


class ExchangeEod(_ExchangeFields):
    """An exchange together with end-of-day bars of its listings."""

    eod: list[EodDataItem]


class ExchangesEodData(MarketstackModel):
    """Response of ``exchanges/{mic}/eod``."""

    pagination: PaginationInfo
    data: ExchangeEod
