"""Behavior shared by the blocking and async Marketstack clients."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urljoin, urlsplit

from ..config import DEFAULT_HOST, DEFAULT_PROTOCOL, DEFAULT_TIMEOUT, get_rest_url
from ..core.auth import Auth
from ..core.exceptions import UrlResolutionError


def merge_headers(items: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Collapse repeated header fields into one comma-separated value.

    Keys keep the spelling of their first occurrence; matching is
    case-insensitive.
    """
    merged: dict[str, str] = {}
    spelling: dict[str, str] = {}
    for key, value in items:
        lowered = key.lower()
        if lowered in spelling:
            first = spelling[lowered]
            merged[first] = f"{merged[first]}, {value}"
        else:
            spelling[lowered] = key
            merged[key] = value
    return merged


class MarketstackBase:
    """Base URL resolution and credentials.

    Args:
        host: Hostname, optionally with a port
        token: Access key; requests fail with ``AuthMissingError`` without one
        protocol: "https" or "http"
        timeout: Total request timeout in seconds
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        token: str | None = None,
        *,
        protocol: str = DEFAULT_PROTOCOL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if protocol not in ("https", "http"):
            raise UrlResolutionError(f"unsupported protocol {protocol!r}")
        self.host = host
        self.protocol = protocol
        self.timeout = timeout
        self.rest_url = get_rest_url(host, protocol)
        self._auth = Auth(token) if token else None

    def rest_endpoint(self, endpoint: str) -> str:
        """Resolve ``endpoint`` below the versioned base URL.

        Raises:
            UrlResolutionError: For absolute URLs or paths that would escape
                the base URL
        """
        parts = urlsplit(endpoint)
        if parts.scheme or parts.netloc:
            raise UrlResolutionError(f"endpoint must be a relative path: {endpoint!r}", endpoint)
        if endpoint.startswith("/") or ".." in endpoint.split("/"):
            raise UrlResolutionError(f"endpoint escapes the API base URL: {endpoint!r}", endpoint)
        return urljoin(self.rest_url, endpoint)

    def get_auth(self) -> Auth | None:
        return self._auth

    def __repr__(self) -> str:
        auth = "set" if self._auth is not None else "none"
        return f"{type(self).__name__}(url={self.rest_url!r}, auth={auth})"
