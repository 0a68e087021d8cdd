"""Transport capabilities consumed by the runtime.

The runtime never imports an HTTP library. It builds an ``HttpRequest``, hands
it to something implementing ``Client`` (blocking) or ``AsyncClient``
(non-blocking), and classifies the ``HttpResponse`` it gets back. Concrete
bindings live in ``marketstack.clients``; tests use scripted fakes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...core.auth import Auth


@dataclass(frozen=True)
class HttpRequest:
    """A fully prepared request, ready to be sent as-is."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class HttpResponse:
    """Status, headers and raw body of a response."""

    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None


@runtime_checkable
class RestClient(Protocol):
    """A client which knows where the Marketstack instance lives."""

    def rest_endpoint(self, endpoint: str) -> str:
        """Resolve a relative endpoint path against the client's base URL.

        Raises:
            UrlResolutionError: If the path cannot be joined below the base URL
        """
        ...

    def get_auth(self) -> Auth | None:
        """The configured access key, if any."""
        ...


@runtime_checkable
class Client(RestClient, Protocol):
    """A client which sends requests synchronously."""

    def rest(self, request: HttpRequest) -> HttpResponse:
        """Send a request.

        Raises:
            TransportError: If the underlying HTTP stack fails
        """
        ...


@runtime_checkable
class AsyncClient(RestClient, Protocol):
    """A client which sends requests asynchronously."""

    async def rest_async(self, request: HttpRequest) -> HttpResponse:
        """Send a request.

        Raises:
            TransportError: If the underlying HTTP stack fails
        """
        ...
