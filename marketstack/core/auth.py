"""Marketstack authentication token."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..config import AUTH_PARAM

if TYPE_CHECKING:
    from ..runtime.rest.params import QueryParams


@dataclass(frozen=True)
class Auth:
    """A personal access key obtained through the Marketstack dashboard.

    Marketstack only supports one kind of credential, passed as the reserved
    ``access_key`` query parameter on every request.
    """

    token: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("Auth token must be a non-empty string")

    def apply(self, params: QueryParams) -> QueryParams:
        """Push the token onto outgoing query parameters."""
        return params.push(AUTH_PARAM, self.token)
