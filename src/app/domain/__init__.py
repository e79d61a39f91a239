"""Modelos de domínio compartilhados entre rotas, serviços e infra."""

from app.domain.calendar_event import CalendarEventInput, EventTime
from app.domain.call_event import (
    UNKNOWN_CALL_ID,
    UNKNOWN_CALLER_NAME,
    CallerInfo,
    CallEvent,
    CallStatus,
)
from app.domain.token_record import TokenRecord

__all__ = [
    "UNKNOWN_CALLER_NAME",
    "UNKNOWN_CALL_ID",
    "CalendarEventInput",
    "CallEvent",
    "CallStatus",
    "CallerInfo",
    "EventTime",
    "TokenRecord",
]
