"""Shared data structures for the meetings service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .errors import DateParseError

if TYPE_CHECKING:  # pragma: no cover
    from core.config import Settings


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class MeetingType(IntEnum):
    INSTANT = 1
    SCHEDULED = 2
    RECURRING = 3
    FIXED_RECURRING = 8

    @property
    def label(self) -> str:
        return {
            MeetingType.INSTANT: "INSTANT",
            MeetingType.SCHEDULED: "SCHEDULE",
            MeetingType.RECURRING: "RECURRING",
            MeetingType.FIXED_RECURRING: "FIXED_RECURRING",
        }[self]

    @classmethod
    def label_for(cls, value: Any) -> str:
        try:
            return cls(int(value)).label
        except (TypeError, ValueError):
            return ""


@dataclass(frozen=True)
class Credentials:
    """Provider credentials, read once at start-up and never mutated."""

    api_key: str
    api_secret: str
    base_url: str

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Credentials":
        return cls(
            api_key=settings.API_KEY,
            api_secret=settings.API_SECRET,
            base_url=settings.API_BASE_URL,
        )


@dataclass(frozen=True)
class DateParseResult:
    """Either a parsed datetime or the reason it could not be parsed."""

    value: Optional[datetime] = None
    error: Optional[DateParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None

    def unwrap(self) -> datetime:
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ValueError("DateParseResult holds no value")
        return self.value


# ----------------------------------------------------------------------
# API payloads
# ----------------------------------------------------------------------
def _check_start_time(value: Optional[str]) -> Optional[str]:
    # Imported lazily: timefmt depends on this module.
    from .timefmt import parse_local_datetime

    if value is None:
        return value
    result = parse_local_datetime(value)
    if not result.ok:
        raise ValueError("start_time must be a valid date-time")
    return value


class MeetingCreateRequest(BaseModel):
    topic: str = Field(..., min_length=1, max_length=200)
    start_time: str = Field(..., description="Local date-time, e.g. 2024-01-02T03:04")
    agenda: Optional[str] = Field(None, max_length=2000)

    @field_validator("topic")
    @classmethod
    def _topic_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("topic must not be blank")
        return value

    @field_validator("start_time")
    @classmethod
    def _start_time_is_date(cls, value: str) -> str:
        return _check_start_time(value)


class MeetingUpdateRequest(BaseModel):
    topic: Optional[str] = Field(None, min_length=1, max_length=200)
    start_time: Optional[str] = None
    agenda: Optional[str] = Field(None, max_length=2000)
    duration: Optional[int] = Field(None, ge=1)

    @field_validator("start_time")
    @classmethod
    def _start_time_is_date(cls, value: Optional[str]) -> Optional[str]:
        return _check_start_time(value)


class MeetingListResponse(BaseModel):
    total_records: Optional[int] = None
    next_page_token: Optional[str] = None
    meetings: List[Dict[str, Any]] = Field(default_factory=list)


__all__ = [
    "Credentials",
    "DateParseResult",
    "HTTPMethod",
    "MeetingCreateRequest",
    "MeetingListResponse",
    "MeetingType",
    "MeetingUpdateRequest",
]
