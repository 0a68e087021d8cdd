"""Page cursor and the page step shared by every pagination driver.

Architecture:
    ``PageState`` owns the cursor of one paged query. A driver asks it for
    the next request, sends that request however it sends requests, and
    hands the response back. Request shaping, response classification and
    the termination rule live here once; the blocking and async drivers only
    differ in how they send.

Cursor transitions:
    - start: ``KeysetPage()`` for keyset endpoints, else ``NumberPage(1)``
    - after a page that ends the query: ``DONE``
    - offset mode: ``NumberPage(k)`` -> ``NumberPage(k + 1)``
    - keyset mode: ``KeysetPage(url)`` from the ``Link`` header, or ``DONE``
      when the server sent no continuation
    - any failure, cancellation included: ``DONE``; a failed query cannot
      be resumed
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ...config import KEYSET_MODE, PAGE_PARAM, PAGE_SIZE_PARAM, PAGINATION_MODE_PARAM
from ...core.exceptions import error_from_payload
from ..rest.client import AsyncClient, Client, HttpRequest, HttpResponse, RestClient
from ..rest.endpoint import Pageable
from ..rest.params import QueryParams
from ..rest.runner import (
    build_request,
    coerce,
    decode_json,
    prepare_request,
    send,
    send_async,
)
from ..telemetry import log_page_fetched, log_pagination_complete, log_pagination_error
from .link_header import next_page_from_headers
from .pagination import Pagination

T = TypeVar("T")


@dataclass(frozen=True)
class NumberPage:
    """Offset pagination; the next request asks for page ``number``."""

    number: int = 1


@dataclass(frozen=True)
class KeysetPage:
    """Keyset pagination; ``next_url`` is None before the first request."""

    next_url: str | None = None


@dataclass(frozen=True)
class DonePage:
    """Terminal cursor; no more requests are made."""


DONE = DonePage()

Page = NumberPage | KeysetPage | DonePage


def describe_page(page: Page) -> str:
    if isinstance(page, NumberPage):
        return f"page {page.number}"
    if isinstance(page, KeysetPage):
        return "keyset first" if page.next_url is None else "keyset next"
    return "done"


def unwrap_page(value: Any) -> Any:
    """Return the item list of a page body.

    Marketstack wraps list results as ``{"pagination": {...}, "data": [...]}``;
    bare lists are passed through.
    """
    if isinstance(value, dict) and isinstance(value.get("data"), list):
        return value["data"]
    return value


class PageState(Generic[T]):
    """Cursor and running totals of one paged query."""

    def __init__(self, endpoint: Pageable, pagination: Pagination, model: Any = Any) -> None:
        self.endpoint = endpoint
        self.pagination = pagination
        self.page_model = list[model]  # type: ignore[valid-type]
        self.page_size = pagination.page_limit(endpoint.page_size_ceiling())
        self.keyset = endpoint.use_keyset_pagination()
        self.page: Page = KeysetPage() if self.keyset else NumberPage(1)
        self.total_results = 0
        self.requests_sent = 0

    @property
    def done(self) -> bool:
        return isinstance(self.page, DonePage)

    def next_request(self, client: RestClient) -> HttpRequest | None:
        """Build the request for the current cursor.

        Returns:
            The request to send, or None once the query is done
        """
        page = self.page
        if isinstance(page, DonePage):
            return None
        try:
            if isinstance(page, KeysetPage) and page.next_url is not None:
                # Server-formed URL, re-issued verbatim
                request = prepare_request(self.endpoint, page.next_url)
            else:
                extra = QueryParams().push(PAGE_SIZE_PARAM, self.page_size)
                if isinstance(page, KeysetPage):
                    extra.push(PAGINATION_MODE_PARAM, KEYSET_MODE)
                else:
                    extra.push(PAGE_PARAM, page.number)
                request = build_request(self.endpoint, client, extra)
        except BaseException as e:
            self.fail(e)
            raise
        self.requests_sent += 1
        return request

    def process_response(self, rsp: HttpResponse) -> list[T]:
        """Classify a page response and advance the cursor.

        Returns:
            The page's items, in server order

        Raises:
            ServiceError: Body is not JSON
            RemoteError: Non-success status with a JSON error body
            DataTypeError: The page does not fit ``list[model]``
            LinkHeaderError: Keyset continuation header is malformed
        """
        fetched = self.page
        try:
            value = decode_json(rsp)
            if not rsp.is_success:
                raise error_from_payload(value, rsp.status)
            items: list[T] = coerce(unwrap_page(value), self.page_model)
            next_url = next_page_from_headers(rsp) if self.keyset else None
        except BaseException as e:
            self.fail(e)
            raise

        self.total_results += len(items)
        log_page_fetched(
            endpoint=self.endpoint.endpoint(),
            page=describe_page(fetched),
            page_size=len(items),
            total_results=self.total_results,
            has_next_url=next_url is not None,
        )

        if self.pagination.is_last_page(len(items), self.total_results, self.page_size):
            self._finish()
        elif isinstance(fetched, NumberPage):
            self.page = NumberPage(fetched.number + 1)
        elif next_url is not None:
            self.page = KeysetPage(next_url)
        else:
            # Full page without a continuation; stop rather than loop
            self._finish()
        return items

    def fail(self, error: BaseException) -> None:
        """Record a failure and end the query."""
        log_pagination_error(
            endpoint=self.endpoint.endpoint(),
            page=describe_page(self.page),
            error_type=type(error).__name__,
            error_message=str(error),
        )
        self.page = DONE

    def fetch(self, client: Client) -> list[T]:
        """Fetch and process the next page with a blocking client.

        Returns:
            The page's items, or an empty list without any request once done
        """
        request = self.next_request(client)
        if request is None:
            return []
        try:
            rsp = send(client, request)
        except BaseException as e:
            self.fail(e)
            raise
        return self.process_response(rsp)

    async def fetch_async(self, client: AsyncClient) -> list[T]:
        """Async counterpart of ``fetch``."""
        request = self.next_request(client)
        if request is None:
            return []
        try:
            rsp = await send_async(client, request)
        except BaseException as e:
            self.fail(e)
            raise
        return self.process_response(rsp)

    def _finish(self) -> None:
        self.page = DONE
        log_pagination_complete(
            endpoint=self.endpoint.endpoint(),
            pages=self.requests_sent,
            total_results=self.total_results,
        )
