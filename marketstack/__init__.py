"""Marketstack - typed client for the Marketstack stock market data REST API."""

from .clients import AsyncMarketstack, Marketstack
from .core import (
    ApiError,
    Auth,
    AuthMissingError,
    BodyEncodingError,
    DataTypeError,
    EndpointValidationError,
    Interval,
    LinkHeaderError,
    PaginationError,
    PaginationLimitExceededError,
    RemoteError,
    RemoteMessageError,
    RemoteObjectError,
    RemoteUnrecognizedError,
    ServiceError,
    SortOrder,
    TransportError,
    UrlResolutionError,
)
from .endpoints import (
    BasicEndpoint,
    Currencies,
    Dividends,
    Eod,
    Exchanges,
    Intraday,
    Splits,
    Tickers,
    Timezones,
)
from .runtime import Paged, Pagination, ignore, paged, query, query_async, raw

__version__ = "0.1.0"

__all__ = [
    "AsyncMarketstack",
    "Marketstack",
    "ApiError",
    "Auth",
    "AuthMissingError",
    "BodyEncodingError",
    "DataTypeError",
    "EndpointValidationError",
    "Interval",
    "LinkHeaderError",
    "PaginationError",
    "PaginationLimitExceededError",
    "RemoteError",
    "RemoteMessageError",
    "RemoteObjectError",
    "RemoteUnrecognizedError",
    "ServiceError",
    "SortOrder",
    "TransportError",
    "UrlResolutionError",
    "BasicEndpoint",
    "Currencies",
    "Dividends",
    "Eod",
    "Exchanges",
    "Intraday",
    "Splits",
    "Tickers",
    "Timezones",
    "Paged",
    "Pagination",
    "ignore",
    "paged",
    "query",
    "query_async",
    "raw",
]
