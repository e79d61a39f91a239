"""Operações de calendário do principal (create/list/delete).

Toda operação ativa as credenciais antes e falha com
NotAuthenticatedError quando não há token. Erros do cliente do
calendário sobem sem tradução.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from app.domain.calendar_event import CalendarEventInput, EventTime
from app.services.token_lifecycle import get_active_credentials
from utils.errors import NotAuthenticatedError, ValidationError

if TYPE_CHECKING:
    from google.auth.credentials import Credentials

    from app.protocols.calendar_service import CalendarServiceProtocol
    from app.services.token_lifecycle import TokenLifecycleManager

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Summary, start, and end are required"
DEFAULT_MAX_RESULTS = 10

EMAIL_REMINDER_MINUTES = 24 * 60
POPUP_REMINDER_MINUTES = 10


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def build_event_time(value: str | EventTime, default_timezone: str) -> dict[str, Any]:
    if isinstance(value, str):
        return {"dateTime": value, "timeZone": default_timezone}
    return value.model_dump(by_alias=True, exclude_none=True)


def build_attendees(attendees: list[str | dict[str, Any]] | None) -> list[dict[str, Any]]:
    result: list[dict[str, Any]] = []
    for attendee in attendees or []:
        if isinstance(attendee, str):
            if attendee:
                result.append({"email": attendee})
        elif attendee.get("email"):
            result.append(dict(attendee))
    return result


def build_event_body(request: CalendarEventInput, default_timezone: str) -> dict[str, Any]:
    """Corpo de events.insert com lembretes fixos (email 24h, popup 10 min).

    Raises:
        ValidationError: summary, start ou end ausente
    """
    if request.missing_required() or request.start is None or request.end is None:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    body: dict[str, Any] = {
        "summary": request.summary,
        "start": build_event_time(request.start, default_timezone),
        "end": build_event_time(request.end, default_timezone),
        "reminders": {
            "useDefault": False,
            "overrides": [
                {"method": "email", "minutes": EMAIL_REMINDER_MINUTES},
                {"method": "popup", "minutes": POPUP_REMINDER_MINUTES},
            ],
        },
    }
    if request.description is not None:
        body["description"] = request.description
    attendees = build_attendees(request.attendees)
    if attendees:
        body["attendees"] = attendees
    return body


class CalendarOperations:
    """Fachada das rotas de calendário."""

    __slots__ = ("_calendar", "_default_timezone", "_tokens")

    def __init__(
        self,
        *,
        token_lifecycle: TokenLifecycleManager,
        calendar_client: CalendarServiceProtocol,
        default_timezone: str = "America/New_York",
    ) -> None:
        self._tokens = token_lifecycle
        self._calendar = calendar_client
        self._default_timezone = default_timezone

    async def _require_credentials(self, principal_id: str) -> Credentials:
        if not await self._tokens.activate_credentials(principal_id):
            raise NotAuthenticatedError()
        credentials = get_active_credentials()
        if credentials is None:
            raise NotAuthenticatedError()
        return credentials

    async def create_event(self, principal_id: str, request: CalendarEventInput) -> dict[str, Any]:
        body = build_event_body(request, self._default_timezone)
        credentials = await self._require_credentials(principal_id)
        event = await self._calendar.create_event(credentials, body)
        logger.info(
            "calendar_event_created",
            extra={"principal_id": principal_id, "event_id": event.get("id")},
        )
        return event

    async def list_events(
        self,
        principal_id: str,
        *,
        time_min: str | None = None,
        time_max: str | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> list[dict[str, Any]]:
        credentials = await self._require_credentials(principal_id)
        return await self._calendar.list_events(
            credentials,
            time_min=time_min or utc_now_iso(),
            time_max=time_max,
            max_results=max_results,
        )

    async def delete_event(self, principal_id: str, event_id: str) -> None:
        if not event_id or not event_id.strip():
            raise ValidationError("Event ID is required")
        credentials = await self._require_credentials(principal_id)
        await self._calendar.delete_event(credentials, event_id)
        logger.info(
            "calendar_event_deleted",
            extra={"principal_id": principal_id, "event_id": event_id},
        )
