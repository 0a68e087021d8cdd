"""Shared Marketstack client constants.

This module centralizes hosts, reserved query parameter names and paging
limits used by the runtime and the transport bindings so the rest of the
library can stay free of magic strings.
"""

from __future__ import annotations

DEFAULT_HOST = "api.marketstack.com"
DEFAULT_PROTOCOL = "https"
API_VERSION = "v1"

# Seconds; applied by the transport bindings, not by the runtime
DEFAULT_TIMEOUT = 30.0

# Hard per-page ceiling enforced for every paged request
MAX_PAGE_SIZE = 1000

# Reserved query parameter names
AUTH_PARAM = "access_key"
PAGE_SIZE_PARAM = "per_page"
PAGE_PARAM = "page"
PAGINATION_MODE_PARAM = "pagination"
KEYSET_MODE = "keyset"

LINK_HEADER = "Link"


def get_rest_url(host: str = DEFAULT_HOST, protocol: str = DEFAULT_PROTOCOL) -> str:
    """Get the versioned REST base URL for a host.

    Args:
        host: Hostname (optionally with port) of the Marketstack instance
        protocol: URL scheme, "https" or "http"

    Returns:
        Base URL ending with a slash so relative endpoint paths join below it

    Examples:
        >>> get_rest_url()
        'https://api.marketstack.com/v1/'
        >>> get_rest_url("localhost:8080", "http")
        'http://localhost:8080/v1/'
    """
    return f"{protocol}://{host}/{API_VERSION}/"
