"""Unit tests for response models."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

import pytest
from pydantic import ValidationError

from marketstack.models import (
    CurrenciesData,
    DividendsData,
    EodData,
    EodDataItem,
    ExchangesData,
    ExchangesEodData,
    IntradayData,
    SplitsData,
    StockExchange,
    TickersData,
    TickersEodData,
    TimezonesData,
)

PAGINATION = {"limit": 100, "offset": 0, "count": 1, "total": 9944}

EOD_ITEM = {
    "open": 129.8,
    "high": 133.04,
    "low": 129.47,
    "close": 132.995,
    "volume": 106686703.0,
    "adj_high": 133.04,
    "adj_low": 129.47,
    "adj_close": 132.995,
    "adj_open": 129.8,
    "adj_volume": 106686703.0,
    "split_factor": 1.0,
    "dividend": 0.0,
    "symbol": "AAPL",
    "exchange": "XNAS",
    "date": "2021-04-09T00:00:00+0000",
}

EXCHANGE = {
    "name": "NASDAQ Stock Exchange",
    "acronym": "NASDAQ",
    "mic": "XNAS",
    "country": "USA",
    "country_code": "US",
    "city": "New York",
    "website": "www.nasdaq.com",
}


class TestEod:
    def test_deserialize(self):
        data = EodData.model_validate({"pagination": PAGINATION, "data": [EOD_ITEM]})

        item = data.data[0]
        assert float(item.open) == 129.8
        assert item.symbol == "AAPL"
        assert item.date == dt.datetime(2021, 4, 9, tzinfo=dt.timezone.utc)
        assert data.pagination.limit == 100
        assert data.pagination.total == 9944

    def test_colon_offset_also_accepted(self):
        item = EodDataItem.model_validate({**EOD_ITEM, "date": "2021-04-09T00:00:00+00:00"})
        assert item.date.utcoffset() == dt.timedelta(0)

    def test_unknown_fields_ignored(self):
        item = EodDataItem.model_validate({**EOD_ITEM, "brand_new_field": 1})
        assert not hasattr(item, "brand_new_field")

    def test_missing_required_field(self):
        broken = {k: v for k, v in EOD_ITEM.items() if k != "close"}
        with pytest.raises(ValidationError):
            EodDataItem.model_validate(broken)

    def test_frozen(self):
        item = EodDataItem.model_validate(EOD_ITEM)
        with pytest.raises(ValidationError):
            item.close = Decimal("1")  # type: ignore[misc]


class TestIntraday:
    def test_null_prices_allowed(self):
        payload = {
            "pagination": PAGINATION,
            "data": [
                {
                    "open": None,
                    "high": None,
                    "low": None,
                    "close": None,
                    "last": 171.2,
                    "volume": None,
                    "date": "2023-09-27T15:00:00+0000",
                    "symbol": "AAPL",
                    "exchange": "IEXG",
                }
            ],
        }
        data = IntradayData.model_validate(payload)
        assert data.data[0].open is None
        assert float(data.data[0].last) == 171.2
        assert data.data[0].date.hour == 15


class TestSplitsAndDividends:
    def test_splits(self):
        payload = {
            "pagination": PAGINATION,
            "data": [
                {"date": "2020-08-31", "split_factor": 4, "symbol": "AAPL"},
                {"date": "1987-06-16", "split_factor": 2, "symbol": "AAPL"},
            ],
        }
        data = SplitsData.model_validate(payload)
        assert data.data[0].split_factor == Decimal(4)
        assert data.data[0].date == dt.date(2020, 8, 31)
        assert data.data[1].date == dt.date(1987, 6, 16)

    def test_dividends(self):
        payload = {
            "pagination": PAGINATION,
            "data": [{"date": "2023-08-11", "dividend": 0.24, "symbol": "AAPL"}],
        }
        data = DividendsData.model_validate(payload)
        assert float(data.data[0].dividend) == 0.24
        assert data.data[0].date == dt.date(2023, 8, 11)


class TestTickers:
    def test_list(self):
        payload = {
            "pagination": PAGINATION,
            "data": [
                {
                    "name": "Apple Inc",
                    "symbol": "AAPL",
                    "has_intraday": False,
                    "has_eod": True,
                    "country": None,
                    "stock_exchange": EXCHANGE,
                }
            ],
        }
        item = TickersData.model_validate(payload).data[0]
        assert item.has_eod
        assert item.stock_exchange == StockExchange(**EXCHANGE)

    def test_ticker_eod(self):
        payload = {
            "pagination": PAGINATION,
            "data": {
                "name": "Apple Inc",
                "symbol": "AAPL",
                "has_intraday": False,
                "has_eod": True,
                "eod": [EOD_ITEM],
            },
        }
        data = TickersEodData.model_validate(payload)
        assert data.data.symbol == "AAPL"
        assert float(data.data.eod[0].close) == 132.995


class TestExchanges:
    def test_flat_exchange_fields(self):
        payload = {
            "pagination": PAGINATION,
            "data": [
                {
                    **EXCHANGE,
                    "timezone": {"timezone": "America/New_York", "abbr": "EST", "abbr_dst": "EDT"},
                    "currency": {"code": "USD", "symbol": "$", "name": "US Dollar"},
                }
            ],
        }
        item = ExchangesData.model_validate(payload).data[0]
        assert item.mic == "XNAS"
        assert item.timezone.abbr_dst == "EDT"
        assert item.currency.code == "USD"
        assert item.stock_exchange == StockExchange(**EXCHANGE)

    def test_exchange_eod(self):
        payload = {"pagination": PAGINATION, "data": {**EXCHANGE, "eod": [EOD_ITEM]}}
        data = ExchangesEodData.model_validate(payload)
        assert data.data.stock_exchange.acronym == "NASDAQ"
        assert data.data.eod[0].exchange == "XNAS"


class TestReferenceData:
    def test_currencies(self):
        payload = {
            "pagination": PAGINATION,
            "data": [{"code": "USD", "symbol": "$", "name": "US Dollar"}],
        }
        assert CurrenciesData.model_validate(payload).data[0].name == "US Dollar"

    def test_timezones(self):
        payload = {
            "pagination": PAGINATION,
            "data": [{"timezone": "Europe/London", "abbr": "GMT", "abbr_dst": "BST"}],
        }
        assert TimezonesData.model_validate(payload).data[0].abbr == "GMT"
