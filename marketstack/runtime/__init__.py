"""Protocol layer: request dispatch and pagination."""

from .paging import Paged, Pagination, paged
from .rest import (
    AsyncClient,
    Client,
    Endpoint,
    FormParams,
    HttpRequest,
    HttpResponse,
    Pageable,
    QueryParams,
    RestClient,
    ignore,
    query,
    query_async,
    raw,
)

__all__ = [
    "Paged",
    "Pagination",
    "paged",
    "AsyncClient",
    "Client",
    "Endpoint",
    "FormParams",
    "HttpRequest",
    "HttpResponse",
    "Pageable",
    "QueryParams",
    "RestClient",
    "ignore",
    "query",
    "query_async",
    "raw",
]
