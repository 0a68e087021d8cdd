"""Timezone models."""

from .base import MarketstackModel, PaginationInfo


class TimezonesDataItem(MarketstackModel):
    """An IANA timezone with its standard and daylight-saving abbreviations."""

    timezone: str
    abbr: str | None = None
    abbr_dst: str | None = None


class TimezonesData(MarketstackModel):
    pagination: PaginationInfo
    data: list[TimezonesDataItem]
