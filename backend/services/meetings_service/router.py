"""FastAPI router exposing the meetings REST API."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import requests
from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response
from fastapi import status as http_status

from .client import SignedAPIClient
from .deps import get_api_client
from .errors import ConfigError, TransportError
from .functions import MEETINGS_PATH, build_create_payload, build_update_payload, meeting_path
from .schemas import MeetingCreateRequest, MeetingListResponse, MeetingUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["meetings"])


def _error(status_code: int, code: str, message: str, details: Optional[dict] = None) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"error": {"code": code, "message": message, "details": details or {}}},
    )


def call_provider(fn: Callable[..., requests.Response], *args: Any, **kwargs: Any) -> requests.Response:
    """Run a client call, translating client failures into HTTP errors."""

    try:
        return fn(*args, **kwargs)
    except ConfigError as exc:
        logger.error("Meeting provider is not configured: %s", exc)
        raise _error(500, "PROVIDER_NOT_CONFIGURED", str(exc))
    except TransportError as exc:
        logger.exception("Meeting provider unreachable")
        raise _error(502, "PROVIDER_UNREACHABLE", str(exc))


def provider_json(response: requests.Response) -> Dict[str, Any]:
    """Return the JSON body of a successful response or raise the provider's error."""

    try:
        payload = response.json() if response.content else {}
    except ValueError:
        payload = None

    if not response.ok:
        message = "Meeting provider rejected the request"
        if isinstance(payload, dict) and payload.get("message"):
            message = str(payload["message"])
        details = payload if isinstance(payload, dict) else {"body": response.text[:500]}
        raise _error(response.status_code, "PROVIDER_ERROR", message, details)

    if not isinstance(payload, dict):
        raise _error(502, "PROVIDER_BAD_RESPONSE", "Meeting provider returned a non-JSON body")
    return payload


@router.get("/meetings", response_model=MeetingListResponse)
def list_meetings(
    page_size: Optional[int] = Query(None, ge=1, le=300),
    next_page_token: Optional[str] = Query(None),
    client: SignedAPIClient = Depends(get_api_client),
) -> MeetingListResponse:
    query = {"page_size": page_size, "next_page_token": next_page_token}
    query = {key: value for key, value in query.items() if value is not None}
    data = provider_json(call_provider(client.get, MEETINGS_PATH, query))
    return MeetingListResponse(
        total_records=data.get("total_records"),
        next_page_token=data.get("next_page_token") or None,
        meetings=data.get("meetings") or [],
    )


@router.post("/meetings", status_code=http_status.HTTP_201_CREATED)
def create_meeting(
    payload: MeetingCreateRequest,
    client: SignedAPIClient = Depends(get_api_client),
) -> Dict[str, Any]:
    body = build_create_payload(payload.topic, payload.start_time, payload.agenda)
    return provider_json(call_provider(client.post, MEETINGS_PATH, body))


@router.get("/meetings/{meeting_id}")
def get_meeting(
    meeting_id: str = Path(..., pattern=r"^[0-9]+$"),
    client: SignedAPIClient = Depends(get_api_client),
) -> Dict[str, Any]:
    return provider_json(call_provider(client.get, meeting_path(meeting_id)))


@router.patch("/meetings/{meeting_id}")
def update_meeting(
    payload: MeetingUpdateRequest,
    meeting_id: str = Path(..., pattern=r"^[0-9]+$"),
    client: SignedAPIClient = Depends(get_api_client),
):
    body = build_update_payload(payload.model_dump(exclude_unset=True))
    if not body:
        raise _error(422, "INVALID_INPUT", "No updatable fields provided")
    response = call_provider(client.patch, meeting_path(meeting_id), body)
    if response.status_code == http_status.HTTP_204_NO_CONTENT:
        return Response(status_code=http_status.HTTP_204_NO_CONTENT)
    return provider_json(response)


@router.delete("/meetings/{meeting_id}", status_code=http_status.HTTP_204_NO_CONTENT)
def delete_meeting(
    meeting_id: str = Path(..., pattern=r"^[0-9]+$"),
    client: SignedAPIClient = Depends(get_api_client),
) -> Response:
    response = call_provider(client.delete, meeting_path(meeting_id))
    if response.status_code != http_status.HTTP_204_NO_CONTENT:
        provider_json(response)
    return Response(status_code=http_status.HTTP_204_NO_CONTENT)
