"""Concrete Marketstack endpoints.

Every endpoint is an immutable dataclass validated on construction, so an
invalid combination fails before any request is built.
"""

from .basic import BasicEndpoint
from .currencies import Currencies
from .dividends import Dividends
from .eod import Eod
from .exchanges import Exchanges
from .intraday import Intraday
from .splits import Splits
from .tickers import Tickers
from .timezones import Timezones

__all__ = [
    "BasicEndpoint",
    "Currencies",
    "Dividends",
    "Eod",
    "Exchanges",
    "Intraday",
    "Splits",
    "Tickers",
    "Timezones",
]
