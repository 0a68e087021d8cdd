"""Core components."""

from .auth import Auth
from .enums import Interval, SortOrder
from .exceptions import (
    ApiError,
    AuthMissingError,
    BodyEncodingError,
    DataTypeError,
    EndpointValidationError,
    LinkHeaderError,
    PaginationError,
    PaginationLimitExceededError,
    RemoteError,
    RemoteMessageError,
    RemoteObjectError,
    RemoteUnrecognizedError,
    ServiceError,
    TransportError,
    UrlResolutionError,
    error_from_payload,
)

__all__ = [
    "Auth",
    "SortOrder",
    "Interval",
    "ApiError",
    "AuthMissingError",
    "UrlResolutionError",
    "BodyEncodingError",
    "TransportError",
    "ServiceError",
    "RemoteError",
    "RemoteMessageError",
    "RemoteObjectError",
    "RemoteUnrecognizedError",
    "DataTypeError",
    "PaginationError",
    "PaginationLimitExceededError",
    "LinkHeaderError",
    "EndpointValidationError",
    "error_from_payload",
]
