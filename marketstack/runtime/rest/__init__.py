"""REST dispatch runtime."""

from .client import AsyncClient, Client, HttpRequest, HttpResponse, RestClient
from .endpoint import Endpoint, Pageable
from .modifiers import Ignore, Raw, ignore, raw
from .params import FormParams, QueryParams, json_body, param_value
from .runner import (
    build_request,
    check_status,
    classify_response,
    coerce,
    decode_json,
    prepare_request,
    query,
    query_async,
)

__all__ = [
    "AsyncClient",
    "Client",
    "HttpRequest",
    "HttpResponse",
    "RestClient",
    "Endpoint",
    "Pageable",
    "Ignore",
    "Raw",
    "ignore",
    "raw",
    "FormParams",
    "QueryParams",
    "json_body",
    "param_value",
    "build_request",
    "check_status",
    "classify_response",
    "coerce",
    "decode_json",
    "prepare_request",
    "query",
    "query_async",
]
