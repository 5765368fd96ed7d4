"""Request and response shaping for provider meeting resources."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .schemas import MeetingType
from .timefmt import to_display_format, to_provider_time_format

MEETINGS_PATH = "users/me/meetings"
DEFAULT_DURATION_MINUTES = 30


def meeting_path(meeting_id: str) -> str:
    return f"meetings/{meeting_id}"


def build_create_payload(topic: str, start_time: str, agenda: Optional[str] = None) -> Dict[str, Any]:
    """Body for a scheduled meeting with video off and the waiting room on."""

    payload: Dict[str, Any] = {
        "topic": topic,
        "type": int(MeetingType.SCHEDULED),
        "duration": DEFAULT_DURATION_MINUTES,
        "agenda": agenda,
        "settings": {
            "host_video": False,
            "participant_video": False,
            "waiting_room": True,
        },
    }
    provider_start = to_provider_time_format(start_time)
    if provider_start:
        payload["start_time"] = provider_start
    return payload


def build_update_payload(changes: Dict[str, Any]) -> Dict[str, Any]:
    payload = {key: value for key, value in changes.items() if value is not None}
    if "start_time" in payload:
        provider_start = to_provider_time_format(payload["start_time"])
        if provider_start:
            payload["start_time"] = provider_start
        else:
            payload.pop("start_time")
    return payload


def shape_meeting_list(data: Dict[str, Any]) -> Dict[str, Any]:
    """Pull the pagination fields and meeting rows out of a list response.

    ``start_time`` and ``created_at`` are reformatted for display; the rest of
    each row is left untouched.
    """

    meetings = []
    for meeting in data.get("meetings") or []:
        row = dict(meeting)
        row["start_time"] = to_display_format(row.get("start_time"))
        row["created_at"] = to_display_format(row.get("created_at"))
        meetings.append(row)
    return {
        "total_records": data.get("total_records"),
        "next_page_token": data.get("next_page_token"),
        "meetings": meetings,
    }


__all__ = [
    "DEFAULT_DURATION_MINUTES",
    "MEETINGS_PATH",
    "build_create_payload",
    "build_update_payload",
    "meeting_path",
    "shape_meeting_list",
]
