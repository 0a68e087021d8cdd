"""Pagination runtime."""

from .lazy import AsyncLazilyPagedIter, LazilyPagedIter
from .link_header import next_page_from_headers, parse_link_header
from .paged import Paged, paged
from .pagination import Pagination, check_page_limit
from .state import DONE, DonePage, KeysetPage, NumberPage, Page, PageState, unwrap_page

__all__ = [
    "AsyncLazilyPagedIter",
    "LazilyPagedIter",
    "next_page_from_headers",
    "parse_link_header",
    "Paged",
    "paged",
    "Pagination",
    "check_page_limit",
    "DONE",
    "DonePage",
    "KeysetPage",
    "NumberPage",
    "Page",
    "PageState",
    "unwrap_page",
]
