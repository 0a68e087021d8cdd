"""Paged queries.

Usage:
    >>> endpoint = Eod(symbols=("AAPL",))
    >>> items = paged(endpoint, Pagination.limited(500)).query(client, EodDataItem)
    >>> for item in paged(endpoint).iter(client, EodDataItem):
    ...     print(item.close)

``Pagination.limited(n)`` caps the number of requests, not the number of
returned items: the page that reaches ``n`` is returned whole, so a query may
yield more than ``n`` items. Slice the result if an exact count is needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

from ...config import MAX_PAGE_SIZE
from ..rest.client import AsyncClient, Client
from ..rest.endpoint import Pageable
from .lazy import AsyncLazilyPagedIter, LazilyPagedIter
from .pagination import Pagination, check_page_limit
from .state import PageState

T = TypeVar("T")


@dataclass(frozen=True)
class Paged:
    """A pageable endpoint together with a pagination policy."""

    endpoint: Pageable
    pagination: Pagination = field(default_factory=Pagination.all)

    def __post_init__(self) -> None:
        ceiling = self.endpoint.page_size_ceiling()
        if ceiling is not None:
            check_page_limit(ceiling, MAX_PAGE_SIZE)

    def state(self, model: type[T] | Any = Any) -> PageState[T]:
        """Fresh cursor state for one run of this query."""
        return PageState(self.endpoint, self.pagination, model)

    def query(self, client: Client, model: type[T] | Any = Any) -> list[T]:
        """Fetch every page up front with a blocking client.

        Args:
            client: Blocking client
            model: Item type each page is coerced into

        Returns:
            All collected items, in server order
        """
        return list(self.iter(client, model))

    async def query_async(self, client: AsyncClient, model: type[T] | Any = Any) -> list[T]:
        """Fetch every page up front with an async client."""
        state = self.state(model)
        results: list[T] = []
        while not state.done:
            results.extend(await state.fetch_async(client))
        return results

    def iter(self, client: Client, model: type[T] | Any = Any) -> LazilyPagedIter[T]:
        """Iterate items lazily with a blocking client."""
        return LazilyPagedIter(self.state(model), client)

    def iter_async(self, client: AsyncClient, model: type[T] | Any = Any) -> AsyncLazilyPagedIter[T]:
        """Iterate items lazily with an async client."""
        return AsyncLazilyPagedIter(self.state(model), client)


def paged(endpoint: Pageable, pagination: Pagination | None = None) -> Paged:
    """Page an endpoint, fetching everything unless a pagination is given."""
    return Paged(endpoint, pagination if pagination is not None else Pagination.all())
