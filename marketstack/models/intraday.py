"""Intraday price models."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from .base import MarketstackModel, PaginationInfo, normalize_offset


class IntradayDataItem(MarketstackModel):
    """One intraday bar.

    Outside trading hours Marketstack may return null prices, so only the
    identifying fields are required.
    """

    date: datetime
    symbol: str = Field(..., min_length=1)
    exchange: str
    open: Decimal | None = None
    high: Decimal | None = None
    low: Decimal | None = None
    close: Decimal | None = None
    last: Decimal | None = None
    volume: Decimal | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, v):
        return normalize_offset(v)


class IntradayData(MarketstackModel):
    pagination: PaginationInfo
    data: list[IntradayDataItem]
