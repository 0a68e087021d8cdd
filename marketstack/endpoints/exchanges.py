"""Stock exchanges: ``exchanges`` and ``exchanges/{mic}[/eod...]``."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import EndpointValidationError
from ..runtime.rest.endpoint import Pageable
from ..runtime.rest.params import QueryParams
from .common import check_limit, check_offset, path_segment
from .eod import Eod


@dataclass(frozen=True)
class Exchanges(Pageable):
    """Exchange metadata, optionally one exchange and its end-of-day data.

    Examples:
        Exchanges(search="nasdaq")
        Exchanges(mic="XNAS", eod=Eod(symbols=("AAPL",)))  # exchanges/XNAS/eod
    """

    mic: str | None = None
    search: str | None = None
    limit: int | None = None
    offset: int | None = None
    eod: Eod | None = None

    def __post_init__(self) -> None:
        if self.eod is not None and self.mic is None:
            raise EndpointValidationError("`eod` requires `mic`")
        if self.mic is not None and not self.mic.strip():
            raise EndpointValidationError("mic must be a non-empty string")
        check_limit(self.limit)
        check_offset(self.offset)

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        if self.mic is None:
            return "exchanges"
        path = f"exchanges/{path_segment(self.mic)}"
        if self.eod is not None:
            path = f"{path}/{self.eod.endpoint()}"
        return path

    def parameters(self) -> QueryParams:
        params = self.eod.parameters() if self.eod is not None else QueryParams()
        params.push_opt("search", self.search)
        params.push_opt("limit", self.limit)
        params.push_opt("offset", self.offset)
        return params
