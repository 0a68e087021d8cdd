"""Stock split models."""

from datetime import date
from decimal import Decimal

from pydantic import Field

from .base import MarketstackModel, PaginationInfo


class SplitsDataItem(MarketstackModel):
    """A split; ``split_factor`` of 4 means one share became four."""

    date: date
    split_factor: Decimal = Field(..., gt=0)
    symbol: str = Field(..., min_length=1)


class SplitsData(MarketstackModel):
    pagination: PaginationInfo
    data: list[SplitsDataItem]
