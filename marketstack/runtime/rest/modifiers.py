"""Query modifiers that change how a successful response is consumed."""

from __future__ import annotations

from dataclasses import dataclass

from .client import AsyncClient, Client
from .endpoint import Endpoint
from .runner import build_request, check_status, send, send_async


@dataclass(frozen=True)
class Ignore:
    """Send the endpoint's request and discard a successful body.

    The request is identical to the one ``query`` would send. Error responses
    are still classified, so failures are not lost.
    """

    endpoint: Endpoint

    def query(self, client: Client) -> None:
        check_status(send(client, build_request(self.endpoint, client)))

    async def query_async(self, client: AsyncClient) -> None:
        check_status(await send_async(client, build_request(self.endpoint, client)))


@dataclass(frozen=True)
class Raw:
    """Send the endpoint's request and return a successful body unparsed."""

    endpoint: Endpoint

    def query(self, client: Client) -> bytes:
        rsp = send(client, build_request(self.endpoint, client))
        check_status(rsp)
        return rsp.body

    async def query_async(self, client: AsyncClient) -> bytes:
        rsp = await send_async(client, build_request(self.endpoint, client))
        check_status(rsp)
        return rsp.body


def ignore(endpoint: Endpoint) -> Ignore:
    """Ignore the result of an endpoint."""
    return Ignore(endpoint)


def raw(endpoint: Endpoint) -> Raw:
    """Return the raw bytes of an endpoint's response."""
    return Raw(endpoint)
