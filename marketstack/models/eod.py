"""End-of-day price models."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from .base import MarketstackModel, PaginationInfo, normalize_offset


class EodDataItem(MarketstackModel):
    """One end-of-day bar, raw and split/dividend adjusted."""

    date: datetime
    symbol: str = Field(..., min_length=1)
    exchange: str
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal | None = None
    adj_open: Decimal | None = None
    adj_high: Decimal | None = None
    adj_low: Decimal | None = None
    adj_close: Decimal | None = None
    adj_volume: Decimal | None = None
    split_factor: Decimal = Decimal(1)
    dividend: Decimal = Decimal(0)

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, v):
        return normalize_offset(v)


class EodData(MarketstackModel):
    """Response of ``eod``, ``eod/latest`` and ``eod/{date}``."""

    pagination: PaginationInfo
    data: list[EodDataItem]
