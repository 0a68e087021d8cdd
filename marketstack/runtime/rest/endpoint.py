"""Endpoint capabilities.

Architecture:
    An endpoint is anything that can describe one remote operation: its HTTP
    method, relative path, query parameters and optional body. Dispatch,
    modifiers and paging only ever talk to this protocol, so concrete
    endpoints stay plain data holders.

Design Decision:
    Protocol chosen over an abstract base class. Concrete endpoints may
    inherit from ``Endpoint``/``Pageable`` to pick up the default
    ``parameters``/``body``/paging answers, but the protocols carry no state.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .params import QueryParams


@runtime_checkable
class Endpoint(Protocol):
    """A description of one remote operation."""

    def method(self) -> str:
        """HTTP method to use for the endpoint (e.g. "GET")."""
        ...

    def endpoint(self) -> str:
        """Path of the endpoint, relative to the API base URL.

        Must be a pure function of the endpoint's validated state.
        """
        ...

    def parameters(self) -> QueryParams:
        """Query parameters for the endpoint. Returns a fresh container."""
        return QueryParams()

    def body(self) -> tuple[str, bytes] | None:
        """Request body as ``(content_type, data)``, or None.

        Raises:
            BodyEncodingError: If the body could not be serialized
        """
        return None


@runtime_checkable
class Pageable(Endpoint, Protocol):
    """An endpoint that can be driven by the pagination runtime."""

    def use_keyset_pagination(self) -> bool:
        """Whether the server continues pages through a ``Link`` header URL."""
        return False

    def page_size_ceiling(self) -> int | None:
        """Endpoint-specific page size ceiling, or None for the global one."""
        return None
