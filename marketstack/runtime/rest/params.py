"""Query-string and form parameter containers.

Both containers keep ``(key, value)`` pairs in insertion order and allow
repeated keys, so multi-valued filters render as ``symbols=A&symbols=B`` and
rendering is deterministic. Values are coerced to wire strings when pushed.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from datetime import date, datetime
from enum import Enum
from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit

from ...core.exceptions import BodyEncodingError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def param_value(value: Any) -> str:
    """Coerce a typed value into its wire string.

    Args:
        value: str, bool, int, float, date, datetime, Enum, or an object
            exposing ``as_value()``

    Returns:
        The string sent on the wire
    """
    # str-mixin enums are str instances too; unwrap them first
    if hasattr(value, "as_value"):
        return str(value.as_value())
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


class _Params:
    def __init__(self, pairs: Iterable[tuple[str, Any]] | None = None) -> None:
        self._pairs: list[tuple[str, str]] = []
        if pairs is not None:
            self.extend(pairs)

    def push(self, key: str, value: Any) -> _Params:
        """Push a parameter; always inserts, even for a repeated key."""
        self._pairs.append((key, param_value(value)))
        return self

    def push_opt(self, key: str, value: Any | None) -> _Params:
        """Push a parameter only if the value is not None."""
        if value is not None:
            self.push(key, value)
        return self

    def extend(self, pairs: Iterable[tuple[str, Any]]) -> _Params:
        for key, value in pairs:
            self.push(key, value)
        return self

    def pairs(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def render(self) -> str:
        """Render as an URL-encoded ``key=value&...`` string."""
        return urlencode(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Params):
            return NotImplemented
        return type(self) is type(other) and self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pairs!r})"


class QueryParams(_Params):
    """Ordered multi-map of URL query parameters."""

    def copy(self) -> QueryParams:
        return QueryParams(self._pairs)

    def add_to_url(self, url: str) -> str:
        """Append the parameters to ``url``, keeping any query it already has."""
        if not self._pairs:
            return url
        scheme, netloc, path, query, fragment = urlsplit(url)
        query = f"{query}&{self.render()}" if query else self.render()
        return urlunsplit((scheme, netloc, path, query, fragment))


class FormParams(_Params):
    """Ordered multi-map of ``application/x-www-form-urlencoded`` body fields."""

    def copy(self) -> FormParams:
        return FormParams(self._pairs)

    def into_body(self) -> tuple[str, bytes] | None:
        """Encode as a request body.

        Returns:
            ``(content_type, data)``, or None when there are no fields

        Raises:
            BodyEncodingError: If a value cannot be encoded as UTF-8
        """
        if not self._pairs:
            return None
        try:
            data = self.render().encode("utf-8")
        except UnicodeEncodeError as e:
            raise BodyEncodingError("failed to URL encode form parameters", e) from e
        return FORM_CONTENT_TYPE, data


def json_body(obj: Any) -> tuple[str, bytes]:
    """Encode ``obj`` as a JSON request body.

    Raises:
        BodyEncodingError: If ``obj`` is not JSON serializable
    """
    try:
        data = json.dumps(obj, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise BodyEncodingError("failed to serialize JSON body", e) from e
    return JSON_CONTENT_TYPE, data
