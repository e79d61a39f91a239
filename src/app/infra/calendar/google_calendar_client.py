"""Client concreto de Google Calendar (API v3) com credenciais de usuário."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_parsers import extract_items, http_status
from app.observability import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Callable

    from google.auth.credentials import Credentials

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_client"


def build_calendar_service(credentials: Credentials) -> Any:
    """Resource da Calendar API v3 para as credenciais dadas."""
    return build("calendar", "v3", credentials=credentials, cache_discovery=False)


class GoogleCalendarClient:
    """Implementação de CalendarServiceProtocol sobre googleapiclient.

    As chamadas da biblioteca são bloqueantes e rodam em thread
    (asyncio.to_thread). Erros HTTP são logados com status e relançados
    sem tradução.
    """

    __slots__ = ("_calendar_id", "_service_factory")

    def __init__(
        self,
        *,
        calendar_id: str = "primary",
        service_factory: Callable[[Credentials], Any] | None = None,
    ) -> None:
        self._calendar_id = calendar_id
        self._service_factory = service_factory or build_calendar_service

    async def create_event(self, credentials: Credentials, body: dict[str, Any]) -> dict[str, Any]:
        try:
            return await asyncio.to_thread(self._insert_event_sync, credentials, body)
        except HttpError as exc:
            self._log_error(action="create_event", exc=exc)
            raise
        except Exception:
            self._log_error(action="create_event")
            raise

    async def list_events(
        self,
        credentials: Credentials,
        *,
        time_min: str,
        time_max: str | None = None,
        max_results: int = 10,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "calendarId": self._calendar_id,
            "timeMin": time_min,
            "maxResults": max_results,
            "singleEvents": True,
            "orderBy": "startTime",
        }
        if time_max:
            params["timeMax"] = time_max
        try:
            response = await asyncio.to_thread(self._list_events_sync, credentials, params)
        except HttpError as exc:
            self._log_error(action="list_events", exc=exc)
            raise
        except Exception:
            self._log_error(action="list_events")
            raise
        return extract_items(response)

    async def delete_event(self, credentials: Credentials, event_id: str) -> None:
        try:
            await asyncio.to_thread(self._delete_event_sync, credentials, event_id)
        except HttpError as exc:
            self._log_error(action="delete_event", exc=exc)
            raise
        except Exception:
            self._log_error(action="delete_event")
            raise

    def _insert_event_sync(self, credentials: Credentials, body: dict[str, Any]) -> dict[str, Any]:
        service = self._service_factory(credentials)
        return service.events().insert(calendarId=self._calendar_id, body=body).execute()

    def _list_events_sync(self, credentials: Credentials, params: dict[str, Any]) -> dict[str, Any]:
        service = self._service_factory(credentials)
        return service.events().list(**params).execute()

    def _delete_event_sync(self, credentials: Credentials, event_id: str) -> None:
        service = self._service_factory(credentials)
        service.events().delete(calendarId=self._calendar_id, eventId=event_id).execute()

    def _log_error(self, *, action: str, exc: HttpError | None = None) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": "error",
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_calendar_http_error", extra=extra)
            return
        logger.exception("google_calendar_unexpected_error", extra=extra)
