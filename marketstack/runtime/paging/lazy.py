"""Lazy pagination: items are yielded one at a time, pages fetched on demand."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from typing import Generic, TypeVar

from ..rest.client import AsyncClient, Client
from .state import PageState

T = TypeVar("T")


class LazilyPagedIter(Iterator[T], Generic[T]):
    """Blocking iterator over the items of a paged query.

    A page is requested only when the previous one has been consumed, so
    stopping early never costs extra requests. An error raised from
    ``__next__`` ends the iteration for good.
    """

    def __init__(self, state: PageState[T], client: Client) -> None:
        self._state = state
        self._client = client
        # Reversed so items pop off the end in server order
        self._buffer: list[T] = []

    @property
    def state(self) -> PageState[T]:
        return self._state

    def __iter__(self) -> LazilyPagedIter[T]:
        return self

    def __next__(self) -> T:
        while not self._buffer:
            if self._state.done:
                raise StopIteration
            page = self._state.fetch(self._client)
            self._buffer = page[::-1]
        return self._buffer.pop()


class AsyncLazilyPagedIter(AsyncIterator[T], Generic[T]):
    """Async counterpart of ``LazilyPagedIter``."""

    def __init__(self, state: PageState[T], client: AsyncClient) -> None:
        self._state = state
        self._client = client
        self._buffer: list[T] = []

    @property
    def state(self) -> PageState[T]:
        return self._state

    def __aiter__(self) -> AsyncLazilyPagedIter[T]:
        return self

    async def __anext__(self) -> T:
        while not self._buffer:
            if self._state.done:
                raise StopAsyncIteration
            page = await self._state.fetch_async(self._client)
            self._buffer = page[::-1]
        return self._buffer.pop()
