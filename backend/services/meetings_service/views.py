"""Server-rendered index page: meeting table plus a create form."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi import status as http_status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from .client import SignedAPIClient
from .deps import get_api_client
from .functions import MEETINGS_PATH, build_create_payload, shape_meeting_list
from .router import call_provider, provider_json
from .schemas import MeetingCreateRequest, MeetingType

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))
templates.env.filters["meeting_type_label"] = MeetingType.label_for

router = APIRouter(tags=["meetings-ui"], include_in_schema=False)


def _render_index(
    request: Request,
    client: SignedAPIClient,
    *,
    errors: Optional[Dict[str, str]] = None,
    old: Optional[Dict[str, Any]] = None,
    status_code: int = http_status.HTTP_200_OK,
) -> HTMLResponse:
    data = provider_json(call_provider(client.get, MEETINGS_PATH))
    context = shape_meeting_list(data)
    context.update(errors=errors or {}, old=old or {})
    return templates.TemplateResponse(request, "index.html", context, status_code=status_code)


@router.get("/", response_class=HTMLResponse, name="index")
def index(request: Request, client: SignedAPIClient = Depends(get_api_client)) -> HTMLResponse:
    return _render_index(request, client)


@router.post("/create", name="create")
def create(
    request: Request,
    topic: str = Form(""),
    start_time: str = Form(""),
    agenda: Optional[str] = Form(None),
    client: SignedAPIClient = Depends(get_api_client),
):
    old = {"topic": topic, "start_time": start_time, "agenda": agenda or ""}
    try:
        data = MeetingCreateRequest(topic=topic, start_time=start_time, agenda=agenda or None)
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for err in exc.errors():
            field = str(err["loc"][0]) if err.get("loc") else "form"
            errors.setdefault(field, err["msg"])
        logger.info("Rejected meeting form: %s", sorted(errors))
        return _render_index(
            request,
            client,
            errors=errors,
            old=old,
            status_code=422,
        )

    body = build_create_payload(data.topic, data.start_time, data.agenda)
    try:
        provider_json(call_provider(client.post, MEETINGS_PATH, body))
    except HTTPException as exc:
        error = exc.detail.get("error", {}) if isinstance(exc.detail, dict) else {}
        message = error.get("message") or "Meeting could not be created"
        logger.warning("Provider refused meeting form (%s): %s", exc.status_code, message)
        return _render_index(
            request,
            client,
            errors={"form": message},
            old=old,
            status_code=exc.status_code,
        )
    return RedirectResponse(request.url_for("index"), status_code=http_status.HTTP_303_SEE_OTHER)
