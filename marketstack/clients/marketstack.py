"""Blocking Marketstack client over ``requests``."""

from __future__ import annotations

import requests

from ..config import DEFAULT_HOST, DEFAULT_PROTOCOL, DEFAULT_TIMEOUT
from ..core.exceptions import TransportError
from ..runtime.rest.client import HttpRequest, HttpResponse
from .base import MarketstackBase


class Marketstack(MarketstackBase):
    """Blocking client.

    Examples:
        >>> with Marketstack(token="...") as client:
        ...     data = query(Eod(symbols=("AAPL",)), client, EodData)
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        token: str | None = None,
        *,
        protocol: str = DEFAULT_PROTOCOL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(host, token, protocol=protocol, timeout=timeout)
        self._session = session
        self._owns_session = session is None

    @classmethod
    def insecure(cls, host: str, token: str | None = None, **kwargs) -> Marketstack:
        """Client talking plain HTTP, e.g. to a local test server."""
        return cls(host, token, protocol="http", **kwargs)

    @property
    def session(self) -> requests.Session:
        """Get or create session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def rest(self, request: HttpRequest) -> HttpResponse:
        try:
            response = self.session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body or None,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(e) from e
        # requests already folds repeated fields into one value
        return HttpResponse(
            status=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        """Close session."""
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    def __enter__(self) -> Marketstack:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
