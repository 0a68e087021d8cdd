"""Custom exception hierarchy.

Every failure surfaced by the library is an ``ApiError`` subclass, so callers
can catch one type while still distinguishing:

- caller-fixable problems (``AuthMissingError``, ``PaginationLimitExceededError``,
  ``EndpointValidationError``, ``UrlResolutionError``, ``BodyEncodingError``)
- transport problems (``TransportError``)
- remote-service problems (``ServiceError`` and the ``RemoteError`` family)
- local declaration mismatches (``DataTypeError``)
"""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """Base exception for all library errors."""

    pass


class AuthMissingError(ApiError):
    """Dispatch attempted without a configured access key."""

    def __init__(self, message: str = "no access key configured on the client") -> None:
        super().__init__(message)


class UrlResolutionError(ApiError):
    """Base URL join failed or an endpoint path is malformed."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class BodyEncodingError(ApiError):
    """A request body could not be serialized."""

    def __init__(self, message: str, source: BaseException | None = None) -> None:
        super().__init__(message)
        self.source = source


class TransportError(ApiError):
    """The underlying HTTP stack failed to send the request.

    Wraps the transport's own exception (``requests.RequestException``,
    ``aiohttp.ClientError``, ...) so the runtime stays transport-agnostic.
    """

    def __init__(self, source: BaseException, message: str | None = None) -> None:
        super().__init__(message or f"client error: {source}")
        self.source = source


class ServiceError(ApiError):
    """Marketstack answered with a body that is not JSON at all."""

    def __init__(self, status_code: int, data: bytes) -> None:
        super().__init__(f"marketstack internal server error: {status_code}")
        self.status_code = status_code
        self.data = data


class RemoteError(ApiError):
    """Marketstack answered a non-success status with a JSON error payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteMessageError(RemoteError):
    """Error payload with a string ``message`` or ``error`` field."""

    def __init__(self, msg: str, status_code: int | None = None) -> None:
        super().__init__(f"marketstack server error: {msg}", status_code)
        self.msg = msg


class RemoteObjectError(RemoteError):
    """Error payload whose ``message``/``error`` field is not a string."""

    def __init__(self, obj: Any, status_code: int | None = None) -> None:
        super().__init__(f"marketstack server error: {obj!r}", status_code)
        self.obj = obj


class RemoteUnrecognizedError(RemoteError):
    """Error payload with none of the recognized fields."""

    def __init__(self, obj: Any, status_code: int | None = None) -> None:
        super().__init__(f"marketstack server error: {obj!r}", status_code)
        self.obj = obj


class DataTypeError(ApiError):
    """A JSON response did not coerce into the requested type."""

    def __init__(self, typename: str, source: BaseException) -> None:
        super().__init__(f"could not parse {typename} data from JSON: {source}")
        self.typename = typename
        self.source = source


class PaginationError(ApiError):
    """Base class for pagination failures."""

    pass


class PaginationLimitExceededError(PaginationError):
    """Requested page size is above the hard ceiling."""

    def __init__(self, limit: int, ceiling: int) -> None:
        super().__init__(f"pagination exceeds limit: {limit} > {ceiling}")
        self.limit = limit
        self.ceiling = ceiling


class LinkHeaderError(PaginationError):
    """A ``Link`` header (or the URL inside it) failed to parse."""

    def __init__(self, message: str, header: str | None = None) -> None:
        super().__init__(f"failed to parse a Link HTTP header: {message}")
        self.header = header


class EndpointValidationError(ApiError, ValueError):
    """An endpoint was constructed with an invalid field combination."""

    pass


def error_from_payload(value: Any, status_code: int | None = None) -> RemoteError:
    """Classify a JSON error payload returned with a non-success status.

    Looks for a ``message`` field, then an ``error`` field. A string value
    becomes ``RemoteMessageError``; any other value ``RemoteObjectError``.
    Payloads with neither field become ``RemoteUnrecognizedError``.

    Args:
        value: Decoded JSON body
        status_code: HTTP status of the response, kept for diagnostics

    Returns:
        The matching ``RemoteError`` (returned, not raised)
    """
    if isinstance(value, dict):
        for field in ("message", "error"):
            if field in value:
                error_value = value[field]
                if isinstance(error_value, str):
                    return RemoteMessageError(error_value, status_code)
                return RemoteObjectError(error_value, status_code)
    return RemoteUnrecognizedError(value, status_code)
