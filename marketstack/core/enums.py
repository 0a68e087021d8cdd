"""Enumerations shared by Marketstack endpoints.

Architecture:
    String enums whose values are the exact wire strings expected by the
    Marketstack API. Query parameter coercion renders any ``Enum`` through its
    ``value``, so endpoints can push these members directly.

Key Types:
    - SortOrder: Ordering of date-sorted results
    - Interval: Bar interval for the ``intraday`` endpoint
"""

from enum import Enum


class SortOrder(str, Enum):
    """Orderings for sorted results, usually by date."""

    ASCENDING = "ASC"
    DESCENDING = "DESC"

    @classmethod
    def default(cls) -> "SortOrder":
        """Marketstack sorts newest first unless told otherwise."""
        return cls.DESCENDING

    def as_value(self) -> str:
        return self.value


class Interval(str, Enum):
    """Data interval for the ``intraday`` endpoint."""

    ONE_MINUTE = "1min"
    FIVE_MINUTES = "5min"
    TEN_MINUTES = "10min"
    FIFTEEN_MINUTES = "15min"
    THIRTY_MINUTES = "30min"
    ONE_HOUR = "1hour"
    THREE_HOURS = "3hour"
    SIX_HOURS = "6hour"
    TWELVE_HOURS = "12hour"
    TWENTY_FOUR_HOURS = "24hour"

    @classmethod
    def default(cls) -> "Interval":
        return cls.ONE_HOUR

    def as_value(self) -> str:
        return self.value
