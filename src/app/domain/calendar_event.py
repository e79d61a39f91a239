"""Entrada para criação de eventos no calendário."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EventTime(BaseModel):
    """Início/fim no formato da API v3 (`{dateTime, timeZone}`)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    date_time: str | None = Field(default=None, alias="dateTime")
    time_zone: str | None = Field(default=None, alias="timeZone")
    date: str | None = None


class CalendarEventInput(BaseModel):
    """Corpo de POST /calendar/events.

    `start`/`end` aceitam string ISO (recebe o timezone padrão) ou objeto
    `{dateTime, timeZone}` repassado como está. `attendees` é
    opcional (null equivale a nenhum) e aceita emails ou objetos `{email}`.
    """

    model_config = ConfigDict(extra="ignore")

    summary: str | None = None
    description: str | None = None
    start: str | EventTime | None = None
    end: str | EventTime | None = None
    attendees: list[str | dict[str, Any]] | None = None

    def missing_required(self) -> list[str]:
        return [
            name
            for name, value in (("summary", self.summary), ("start", self.start), ("end", self.end))
            if not value
        ]


__all__ = ["CalendarEventInput", "EventTime"]
