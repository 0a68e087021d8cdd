"""Structured logging for request dispatch and pagination.

This module provides telemetry hooks for the runtime, emitting structured
logs with stable event names and ``extra`` fields for observability. The
library installs no handlers; applications configure logging as they like.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_ACCESS_KEY_RE = re.compile(r"(access_key=)[^&#]*")


def redact_url(url: str) -> str:
    """Mask the access key value in ``url`` so it never reaches log output."""
    return _ACCESS_KEY_RE.sub(r"\1***", url)


def log_request_sent(*, method: str, url: str, has_body: bool) -> None:
    """Log an outgoing request.

    Args:
        method: HTTP method
        url: Full request URL (redacted before logging)
        has_body: Whether a request body is attached
    """
    logger.debug(
        "rest_request_sent",
        extra={"method": method, "url": redact_url(url), "has_body": has_body},
    )


def log_response_received(*, url: str, status: int, size: int) -> None:
    """Log a received response.

    Args:
        url: Request URL (redacted before logging)
        status: HTTP status code
        size: Body size in bytes
    """
    logger.debug(
        "rest_response_received",
        extra={"url": redact_url(url), "status": status, "size": size},
    )


def log_page_fetched(
    *,
    endpoint: str,
    page: str,
    page_size: int,
    total_results: int,
    has_next_url: bool,
) -> None:
    """Log completion of a single page.

    Args:
        endpoint: Endpoint path
        page: Cursor description of the page that was fetched
        page_size: Number of items on this page
        total_results: Running total across pages
        has_next_url: Whether the server supplied a continuation URL
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint": endpoint,
            "page": page,
            "page_size": page_size,
            "total_results": total_results,
            "has_next_url": has_next_url,
        },
    )


def log_pagination_complete(*, endpoint: str, pages: int, total_results: int) -> None:
    """Log the end of a paginated query.

    Args:
        endpoint: Endpoint path
        pages: Number of requests sent
        total_results: Items collected across all pages
    """
    logger.info(
        "pagination_complete",
        extra={"endpoint": endpoint, "pages": pages, "total_results": total_results},
    )


def log_pagination_error(
    *,
    endpoint: str,
    page: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page fetch failure that aborts a paginated query.

    Args:
        endpoint: Endpoint path
        page: Cursor description of the page that failed
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "pagination_error",
        extra={
            "endpoint": endpoint,
            "page": page,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
