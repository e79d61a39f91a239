"""Endpoints de eventos do Google Calendar do principal configurado.

Endpoints:
- POST /calendar/events: cria evento
- GET /calendar/events: lista eventos (timeMin, timeMax, maxResults)
- DELETE /calendar/events/{event_id}: remove evento

Erros: 400 validação, 401 sem token armazenado, 500 falha da API do Google.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from api.routes._responses import error_response, error_response_for, status_for
from app.domain.calendar_event import CalendarEventInput
from app.services.calendar_operations import DEFAULT_MAX_RESULTS, REQUIRED_FIELDS_MESSAGE
from config.settings import get_assistant_settings

if TYPE_CHECKING:
    from app.services.calendar_operations import CalendarOperations

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_MAX_RESULTS_MESSAGE = "maxResults must be a positive integer"
INVALID_EVENT_FIELDS_MESSAGE = "Invalid event fields"

REQUIRED_EVENT_FIELDS = ("summary", "start", "end")


def _get_calendar_operations() -> CalendarOperations:
    from app.bootstrap import get_calendar_operations

    return get_calendar_operations()


def _get_principal_id() -> str:
    return get_assistant_settings().default_principal_id


def _log_failure(action: str, exc: Exception) -> None:
    if status_for(exc) >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.exception("calendar_request_failed", extra={"action": action})
        return
    logger.warning(
        "calendar_request_rejected",
        extra={"action": action, "error_type": type(exc).__name__},
    )


def parse_max_results(raw: str | None) -> int | None:
    """maxResults da query string; None quando inválido."""
    if raw is None or raw == "":
        return DEFAULT_MAX_RESULTS
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


@router.post("/events")
async def create_event(request: Request) -> JSONResponse:
    try:
        body = json.loads(await request.body() or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return error_response("Invalid JSON body", status.HTTP_400_BAD_REQUEST)
    if not isinstance(body, dict):
        return error_response(REQUIRED_FIELDS_MESSAGE, status.HTTP_400_BAD_REQUEST)

    try:
        event_input = CalendarEventInput.model_validate(body)
    except PydanticValidationError as exc:
        if any(not body.get(name) for name in REQUIRED_EVENT_FIELDS):
            return error_response(REQUIRED_FIELDS_MESSAGE, status.HTTP_400_BAD_REQUEST)
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        logger.warning("calendar_request_rejected", extra={"action": "create_event", "fields": fields})
        return error_response(
            f"{INVALID_EVENT_FIELDS_MESSAGE}: {', '.join(fields)}",
            status.HTTP_400_BAD_REQUEST,
        )

    try:
        event = await _get_calendar_operations().create_event(_get_principal_id(), event_input)
    except Exception as exc:
        _log_failure("create_event", exc)
        return error_response_for(exc, "Failed to create calendar event")
    return JSONResponse(content={"success": True, "event": event})


@router.get("/events")
async def list_events(request: Request) -> JSONResponse:
    params = request.query_params
    max_results = parse_max_results(params.get("maxResults"))
    if max_results is None:
        return error_response(INVALID_MAX_RESULTS_MESSAGE, status.HTTP_400_BAD_REQUEST)

    try:
        events = await _get_calendar_operations().list_events(
            _get_principal_id(),
            time_min=params.get("timeMin") or None,
            time_max=params.get("timeMax") or None,
            max_results=max_results,
        )
    except Exception as exc:
        _log_failure("list_events", exc)
        return error_response_for(exc, "Failed to list calendar events")
    return JSONResponse(content={"success": True, "events": events})


@router.delete("/events/{event_id}")
async def delete_event(event_id: str) -> JSONResponse:
    try:
        await _get_calendar_operations().delete_event(_get_principal_id(), event_id)
    except Exception as exc:
        _log_failure("delete_event", exc)
        return error_response_for(exc, "Failed to delete calendar event")
    return JSONResponse(content={"success": True, "message": "Event deleted successfully"})
