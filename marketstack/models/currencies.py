"""Currency models."""

from .base import MarketstackModel, PaginationInfo


class CurrenciesDataItem(MarketstackModel):
    code: str
    name: str
    symbol: str | None = None


class CurrenciesData(MarketstackModel):
    pagination: PaginationInfo
    data: list[CurrenciesDataItem]
