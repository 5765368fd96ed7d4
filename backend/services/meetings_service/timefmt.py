"""Date-time conversions between user input and the provider's wire format."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import DateParseError
from .schemas import DateParseResult

logger = logging.getLogger(__name__)

# strftime("%Y") does not zero-pad years below 1000 on glibc.
_TIME_TEMPLATE = "{year:04d}{sep}{dt:%m}{sep}{dt:%d}{mid}{dt:%H:%M:%S}"


def _render(dt: datetime, sep: str, mid: str) -> str:
    return _TIME_TEMPLATE.format(year=dt.year, sep=sep, mid=mid, dt=dt)

# Tried after ISO 8601 parsing fails.
_FALLBACK_FORMATS = (
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
)


def _log_parse_failure(helper: str, error: DateParseError) -> None:
    logger.error(
        "%s: cannot parse date-time %r (%s): %s",
        helper,
        error.raw,
        type(error.__cause__ or error).__name__,
        error.reason,
    )


def parse_local_datetime(value: str) -> DateParseResult:
    """Parse ``value`` as written by a user or returned by the provider.

    Accepts ISO 8601 (``2024-01-02 03:04:05``, ``2024-01-02T03:04``, a trailing
    ``Z`` or offset) and slash-separated dates. Naive input stays naive.
    """

    if not isinstance(value, str):
        return DateParseResult(error=DateParseError(repr(value), "expected a string"))
    candidate = value.strip()
    if not candidate:
        return DateParseResult(error=DateParseError(value, "empty value"))
    if candidate.endswith(("Z", "z")):
        candidate = candidate[:-1] + "+00:00"

    try:
        return DateParseResult(value=datetime.fromisoformat(candidate))
    except ValueError as exc:
        iso_error = exc

    for fmt in _FALLBACK_FORMATS:
        try:
            return DateParseResult(value=datetime.strptime(candidate, fmt))
        except ValueError:
            continue

    error = DateParseError(value, str(iso_error))
    error.__cause__ = iso_error
    return DateParseResult(error=error)


def parse_zoned_datetime(value: str, timezone_name: str) -> DateParseResult:
    """Parse ``value`` and attach ``timezone_name`` when it carries no offset."""

    try:
        zone = ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
        error = DateParseError(value, f"unknown timezone {timezone_name!r}")
        error.__cause__ = exc
        return DateParseResult(error=error)

    result = parse_local_datetime(value)
    if not result.ok:
        return result
    parsed = result.unwrap()
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone)
    return DateParseResult(value=parsed)


def to_provider_time_format(value: str) -> str:
    """Render ``value`` as ``YYYY-MM-DDThh:mm:ss``; ``""`` when it cannot be parsed.

    Callers must treat the empty string as "omit the field".
    """

    result = parse_local_datetime(value)
    if not result.ok:
        _log_parse_failure("to_provider_time_format", result.error)
        return ""
    return _render(result.unwrap(), "-", "T")


def to_unix_timestamp(value: str, timezone_name: str) -> Optional[int]:
    """Return epoch seconds for ``value`` in ``timezone_name``; ``None`` on failure."""

    result = parse_zoned_datetime(value, timezone_name)
    if not result.ok:
        _log_parse_failure("to_unix_timestamp", result.error)
        return None
    return int(result.unwrap().timestamp())


def to_display_format(value: Optional[str]) -> Optional[str]:
    # Provider timestamps shown on the index page; unparseable values pass through.
    if not value:
        return value
    result = parse_local_datetime(value)
    if not result.ok:
        return value
    return _render(result.unwrap(), "/", " ")


__all__ = [
    "parse_local_datetime",
    "parse_zoned_datetime",
    "to_display_format",
    "to_provider_time_format",
    "to_unix_timestamp",
]
