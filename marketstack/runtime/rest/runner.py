"""Single-request dispatch.

Architecture:
    ``build_request`` turns an endpoint into an ``HttpRequest``; the client
    sends it; ``classify_response`` turns the ``HttpResponse`` into either a
    typed value or an exception. The blocking and async entry points share
    everything except the send itself.

Design Decisions:
    - Responses are coerced with ``pydantic.TypeAdapter`` so any annotation
      (a model, ``list[Model]``, ``dict[str, Any]``, ``Any``) can be requested
    - Adapters are cached per type; building one is not free
    - Errors are raised, never returned
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, TypeVar, get_origin

from pydantic import TypeAdapter, ValidationError

from ...core.exceptions import AuthMissingError, DataTypeError, ServiceError, error_from_payload
from ..telemetry import log_request_sent, log_response_received
from .client import AsyncClient, Client, HttpRequest, HttpResponse, RestClient
from .endpoint import Endpoint
from .params import QueryParams

T = TypeVar("T")


def prepare_request(endpoint: Endpoint, url: str) -> HttpRequest:
    """Attach the endpoint's method and body to an already complete URL."""
    headers: dict[str, str] = {}
    data = b""
    body = endpoint.body()
    if body is not None:
        content_type, data = body
        headers["Content-Type"] = content_type
    return HttpRequest(method=endpoint.method(), url=url, headers=headers, body=data)


def build_request(
    endpoint: Endpoint,
    client: RestClient,
    extra: QueryParams | None = None,
) -> HttpRequest:
    """Build the request for ``endpoint``.

    Parameters are rendered in a fixed order: the endpoint's own, then
    ``extra`` (paging), then the access key.

    Args:
        endpoint: Endpoint to call
        client: Client providing the base URL and credentials
        extra: Additional query parameters, e.g. pagination

    Returns:
        The prepared request

    Raises:
        UrlResolutionError: If the endpoint path cannot be resolved
        AuthMissingError: If the client has no access key
        BodyEncodingError: If the endpoint body cannot be encoded
    """
    url = client.rest_endpoint(endpoint.endpoint())

    params = endpoint.parameters()
    if extra is not None:
        params.extend(extra)

    auth = client.get_auth()
    if auth is None:
        raise AuthMissingError()
    auth.apply(params)

    return prepare_request(endpoint, params.add_to_url(url))


def send(client: Client, request: HttpRequest) -> HttpResponse:
    log_request_sent(method=request.method, url=request.url, has_body=bool(request.body))
    rsp = client.rest(request)
    log_response_received(url=request.url, status=rsp.status, size=len(rsp.body))
    return rsp


async def send_async(client: AsyncClient, request: HttpRequest) -> HttpResponse:
    log_request_sent(method=request.method, url=request.url, has_body=bool(request.body))
    rsp = await client.rest_async(request)
    log_response_received(url=request.url, status=rsp.status, size=len(rsp.body))
    return rsp


def decode_json(rsp: HttpResponse) -> Any:
    """Decode a response body as JSON.

    Raises:
        ServiceError: If the body is not JSON, whatever the status
    """
    try:
        return json.loads(rsp.body)
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise ServiceError(rsp.status, rsp.body) from None


def check_status(rsp: HttpResponse) -> None:
    """Raise the classified remote error for a non-success response.

    Raises:
        ServiceError: If the error body is not JSON
        RemoteError: The ``error_from_payload`` classification of the body
    """
    if rsp.is_success:
        return
    raise error_from_payload(decode_json(rsp), rsp.status)


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def typename(model: Any) -> str:
    """Human readable name of a requested type."""
    if get_origin(model) is None and isinstance(model, type):
        return model.__name__
    return repr(model)


def coerce(value: Any, model: type[T] | Any) -> T:
    """Coerce decoded JSON into ``model``.

    Raises:
        DataTypeError: If the value does not fit the model
    """
    try:
        return _adapter(model).validate_python(value)
    except ValidationError as e:
        raise DataTypeError(typename(model), e) from e


def classify_response(rsp: HttpResponse, model: type[T] | Any = Any) -> T:
    """Turn a response into a typed value.

    Raises:
        ServiceError: Body is not JSON
        RemoteError: Non-success status with a JSON error body
        DataTypeError: Success status, but the body does not fit ``model``
    """
    value = decode_json(rsp)
    if not rsp.is_success:
        raise error_from_payload(value, rsp.status)
    return coerce(value, model)


def query(endpoint: Endpoint, client: Client, model: type[T] | Any = Any) -> T:
    """Perform one blocking request and return the typed result.

    Args:
        endpoint: Endpoint to call
        client: Blocking client
        model: Type to coerce the JSON body into (defaults to plain JSON)

    Returns:
        The response body coerced into ``model``
    """
    request = build_request(endpoint, client)
    return classify_response(send(client, request), model)


async def query_async(endpoint: Endpoint, client: AsyncClient, model: type[T] | Any = Any) -> T:
    """Perform one async request and return the typed result."""
    request = build_request(endpoint, client)
    return classify_response(await send_async(client, request), model)
