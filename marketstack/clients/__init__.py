"""Transport bindings implementing the runtime client protocols."""

from .async_marketstack import AsyncMarketstack
from .base import MarketstackBase, merge_headers
from .marketstack import Marketstack

__all__ = ["AsyncMarketstack", "Marketstack", "MarketstackBase", "merge_headers"]
