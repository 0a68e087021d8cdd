"""Async Marketstack client over ``aiohttp``."""

from __future__ import annotations

import asyncio

import aiohttp
from yarl import URL

from ..config import DEFAULT_HOST, DEFAULT_PROTOCOL, DEFAULT_TIMEOUT
from ..core.exceptions import TransportError
from ..runtime.rest.client import HttpRequest, HttpResponse
from .base import MarketstackBase, merge_headers


class AsyncMarketstack(MarketstackBase):
    """Async client.

    The ``aiohttp`` session is created on first use and closed by ``close``
    or on leaving ``async with``. A session passed in by the caller is never
    closed by the client.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        token: str | None = None,
        *,
        protocol: str = DEFAULT_PROTOCOL,
        timeout: float = DEFAULT_TIMEOUT,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        super().__init__(host, token, protocol=protocol, timeout=timeout)
        self.client_timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    @classmethod
    def insecure(cls, host: str, token: str | None = None, **kwargs) -> AsyncMarketstack:
        """Client talking plain HTTP, e.g. to a local test server."""
        return cls(host, token, protocol="http", **kwargs)

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.client_timeout)
            self._owns_session = True
        return self._session

    async def rest_async(self, request: HttpRequest) -> HttpResponse:
        # encoded=True keeps server-formed continuation URLs byte-for-byte
        url = URL(request.url, encoded=True)
        try:
            async with self.session.request(
                request.method,
                url,
                headers=dict(request.headers),
                data=request.body or None,
            ) as response:
                body = await response.read()
                return HttpResponse(
                    status=response.status,
                    body=body,
                    headers=merge_headers(response.headers.items()),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(e) from e

    async def close(self) -> None:
        """Close session."""
        if self._session is not None and not self._session.closed and self._owns_session:
            await self._session.close()

    async def __aenter__(self) -> AsyncMarketstack:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
