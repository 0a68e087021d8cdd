"""Dividend models."""

from datetime import date
from decimal import Decimal

from pydantic import Field

from .base import MarketstackModel, PaginationInfo


class DividendsDataItem(MarketstackModel):
    date: date
    dividend: Decimal = Field(..., ge=0)
    symbol: str = Field(..., min_length=1)


class DividendsData(MarketstackModel):
    pagination: PaginationInfo
    data: list[DividendsDataItem]
