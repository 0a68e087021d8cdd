"""Pagination policy and page-size bounds."""

from __future__ import annotations

from dataclasses import dataclass

from ...config import MAX_PAGE_SIZE
from ...core.exceptions import PaginationError, PaginationLimitExceededError


def check_page_limit(limit: int, ceiling: int = MAX_PAGE_SIZE) -> int:
    """Validate a requested page size.

    Args:
        limit: Requested number of items per page
        ceiling: Largest accepted value

    Returns:
        ``limit`` unchanged

    Raises:
        PaginationLimitExceededError: If ``limit`` is above ``ceiling``
        PaginationError: If ``limit`` is not positive
    """
    if limit > ceiling:
        raise PaginationLimitExceededError(limit, ceiling)
    if limit < 1:
        raise PaginationError(f"page size must be positive, got {limit}")
    return limit


@dataclass(frozen=True)
class Pagination:
    """How many results a paged query should fetch.

    Attributes:
        limit: None to fetch everything, otherwise stop once at least this
            many items have been collected
        max_page_size: Per-request page size cap, at most ``MAX_PAGE_SIZE``

    Examples:
        Pagination.all()
        Pagination.limited(250)
        Pagination(limit=None, max_page_size=100)
    """

    limit: int | None = None
    max_page_size: int = MAX_PAGE_SIZE

    def __post_init__(self) -> None:
        """Reject sizes outside the hard bounds before any request is made."""
        check_page_limit(self.max_page_size)
        if self.limit is not None and self.limit < 1:
            raise PaginationError(f"pagination limit must be positive, got {self.limit}")

    @classmethod
    def all(cls) -> Pagination:
        return cls()

    @classmethod
    def limited(cls, limit: int) -> Pagination:
        return cls(limit=limit)

    def page_limit(self, ceiling: int | None = None) -> int:
        """Effective page size for a request.

        Args:
            ceiling: Endpoint-specific ceiling, if any

        Returns:
            The smallest of the policy limit, ``max_page_size`` and ``ceiling``
        """
        size = self.max_page_size
        if ceiling is not None:
            size = min(size, ceiling)
        if self.limit is not None:
            size = min(size, self.limit)
        return size

    def is_last_page(self, page_len: int, total_results: int, page_size: int) -> bool:
        """Termination rule applied after every page.

        A short page means the server is exhausted. Under a limit, reaching it
        also ends the query; the page that crosses it is kept whole.
        """
        if page_len < page_size:
            return True
        if self.limit is not None:
            return total_results >= self.limit
        return False
