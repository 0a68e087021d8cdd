"""Scripted clients for exercising the runtime without a network."""

from __future__ import annotations

import json
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any
from urllib.parse import parse_qsl, urlsplit

from marketstack.clients.base import MarketstackBase
from marketstack.runtime.rest.client import HttpRequest, HttpResponse

TEST_HOST = "marketstack.test"
TEST_TOKEN = "secret-token"
BASE_URL = f"https://{TEST_HOST}/v1/"

Responder = Callable[[HttpRequest], HttpResponse]


def json_response(payload: Any, status: int = 200, headers: dict[str, str] | None = None) -> HttpResponse:
    return HttpResponse(status=status, body=json.dumps(payload).encode(), headers=headers or {})


def raw_response(body: bytes, status: int = 200, headers: dict[str, str] | None = None) -> HttpResponse:
    return HttpResponse(status=status, body=body, headers=headers or {})


def make_items(count: int, start: int = 0) -> list[dict[str, Any]]:
    return [{"symbol": "AAPL", "n": i} for i in range(start, start + count)]


def page_body(items: list[dict[str, Any]], total: int = 0) -> dict[str, Any]:
    """Marketstack list envelope."""
    return {
        "pagination": {"limit": len(items), "offset": 0, "count": len(items), "total": total},
        "data": items,
    }


def query_of(request: HttpRequest) -> list[tuple[str, str]]:
    return parse_qsl(urlsplit(request.url).query, keep_blank_values=True)


def path_of(request: HttpRequest) -> str:
    return urlsplit(request.url).path


class MockClient(MarketstackBase):
    """Client that records requests and answers from a script.

    Responses come from ``responder`` when given, else from ``responses`` in
    order. A scripted exception instance is raised instead of returned.
    """

    def __init__(
        self,
        responses: Iterable[HttpResponse | BaseException] = (),
        *,
        responder: Responder | None = None,
        token: str | None = TEST_TOKEN,
    ) -> None:
        super().__init__(TEST_HOST, token)
        self.responses: deque[HttpResponse | BaseException] = deque(responses)
        self.responder = responder
        self.requests: list[HttpRequest] = []

    def rest(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if self.responder is not None:
            return self.responder(request)
        if not self.responses:
            raise AssertionError(f"unexpected request: {request.url}")
        item = self.responses.popleft()
        if isinstance(item, BaseException):
            raise item
        return item

    async def rest_async(self, request: HttpRequest) -> HttpResponse:
        return self.rest(request)
