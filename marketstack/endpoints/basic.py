"""The API root, useful as a connectivity and credentials check."""

from __future__ import annotations

from dataclasses import dataclass

from ..runtime.rest.endpoint import Endpoint


@dataclass(frozen=True)
class BasicEndpoint(Endpoint):
    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return ""
