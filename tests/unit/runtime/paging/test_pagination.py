"""Unit tests for the pagination policy."""

from __future__ import annotations

import pytest

from marketstack.config import MAX_PAGE_SIZE
from marketstack.core import PaginationError, PaginationLimitExceededError
from marketstack.runtime.paging import Pagination, check_page_limit


class TestCheckPageLimit:
    @pytest.mark.parametrize("size", [1, 20, 999, MAX_PAGE_SIZE])
    def test_within_ceiling(self, size):
        assert check_page_limit(size) == size

    @pytest.mark.parametrize("size", [MAX_PAGE_SIZE + 1, 5000])
    def test_above_ceiling(self, size):
        with pytest.raises(PaginationLimitExceededError) as exc_info:
            check_page_limit(size)
        assert exc_info.value.limit == size
        assert exc_info.value.ceiling == MAX_PAGE_SIZE

    def test_not_positive(self):
        with pytest.raises(PaginationError):
            check_page_limit(0)


class TestPagination:
    """Test Pagination construction and page sizing."""

    def test_default_is_all(self):
        assert Pagination() == Pagination.all()
        assert Pagination.all().limit is None

    def test_max_page_size_above_ceiling_rejected(self):
        with pytest.raises(PaginationLimitExceededError):
            Pagination(max_page_size=MAX_PAGE_SIZE + 1)

    def test_non_positive_limit_rejected(self):
        with pytest.raises(PaginationError):
            Pagination.limited(0)

    def test_page_limit_all(self):
        assert Pagination.all().page_limit() == MAX_PAGE_SIZE

    def test_page_limit_clamped_by_limit(self):
        assert Pagination.limited(45).page_limit() == 45

    def test_page_limit_clamped_by_endpoint_ceiling(self):
        assert Pagination.limited(45).page_limit(20) == 20
        assert Pagination.all().page_limit(100) == 100

    def test_page_limit_clamped_by_max_page_size(self):
        assert Pagination(max_page_size=20).page_limit(500) == 20

    def test_short_page_is_last(self):
        assert Pagination.all().is_last_page(7, 47, 20)

    def test_full_page_is_not_last(self):
        assert not Pagination.all().is_last_page(20, 40, 20)

    def test_limit_reached_is_last(self):
        policy = Pagination.limited(45)
        assert not policy.is_last_page(20, 40, 20)
        assert policy.is_last_page(20, 60, 20)
        assert policy.is_last_page(20, 45, 20)
