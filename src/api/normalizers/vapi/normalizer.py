"""Normalizer Vapi: decide se a entrega é uma chamada processável.

A ordem das etapas importa: entregas parciais (progresso em tempo real)
precisam sair antes de qualquer resumo ou email.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.domain.call_event import (
    UNKNOWN_CALL_ID,
    UNKNOWN_CALLER_NAME,
    CallerInfo,
    CallEvent,
    CallStatus,
)

from .extractor import extract_working_record, reconstruct_transcript

if TYPE_CHECKING:
    from .extractor import WorkingRecord

DEFAULT_COMPLETION_THRESHOLD_SECONDS = 30.0

SKIP_AWAITING_COMPLETION = "awaiting completion"
SKIP_NO_TRANSCRIPT = "no transcript, call not complete"

_COMPLETED_STATUSES = frozenset({"completed", "ended"})
_HANGUP_REASONS = frozenset({"user-hangup", "assistant-hangup"})
_IN_PROGRESS_STATUSES = frozenset({"in-progress", "in_progress", "ringing", "queued"})

# "This is <nome>" dentro do mesmo turno marcado com "User:"
_SELF_INTRODUCTION = re.compile(r"User:[^\n]*?\bThis is (\w+)")


@dataclass(frozen=True, slots=True)
class SkippedDelivery:
    """Entrega ignorada sem efeitos colaterais."""

    reason: str
    call_id: str


def is_call_complete(record: WorkingRecord, threshold_seconds: float) -> bool:
    """Heurística de término: status, motivo de encerramento ou duração."""
    if record.call_status in _COMPLETED_STATUSES:
        return True
    if record.ended_reason in _HANGUP_REASONS:
        return True
    return record.duration is not None and record.duration > threshold_seconds


def map_status(vendor_status: str | None) -> CallStatus:
    if vendor_status in _IN_PROGRESS_STATUSES:
        return "in_progress"
    return "unknown"


def recover_caller_name(transcript: str) -> str | None:
    """Tenta extrair o nome de uma autoapresentação do chamador."""
    match = _SELF_INTRODUCTION.search(transcript)
    return match.group(1) if match else None


def normalize(
    payload: dict[str, Any],
    *,
    assistant_name: str,
    completion_threshold_seconds: float = DEFAULT_COMPLETION_THRESHOLD_SECONDS,
) -> CallEvent | SkippedDelivery:
    """Normaliza payload do webhook em CallEvent ou SkippedDelivery.

    Args:
        payload: Objeto JSON recebido do vendor
        assistant_name: Nome da persona, usado como rótulo dos turnos do bot
        completion_threshold_seconds: Duração acima da qual a chamada é
            considerada encerrada

    Returns:
        CallEvent processável ou SkippedDelivery com o motivo
    """
    record = extract_working_record(payload)
    complete = is_call_complete(record, completion_threshold_seconds)
    call_id = record.call_id or UNKNOWN_CALL_ID

    if record.transcript is None and record.summary is None and not complete:
        return SkippedDelivery(reason=SKIP_AWAITING_COMPLETION, call_id=call_id)

    transcript = record.transcript or reconstruct_transcript(record.turns, assistant_name)
    if transcript is None and not complete:
        return SkippedDelivery(reason=SKIP_NO_TRANSCRIPT, call_id=call_id)

    number = record.customer_number or record.caller_number
    name = record.caller_name or UNKNOWN_CALLER_NAME
    if name == UNKNOWN_CALLER_NAME and transcript:
        name = recover_caller_name(transcript) or name

    duration_seconds = record.duration
    if duration_seconds is None and record.duration_ms is not None:
        duration_seconds = record.duration_ms / 1000

    return CallEvent(
        id=call_id,
        status="completed" if complete else map_status(record.call_status),
        vendor_status=record.call_status,
        is_complete=complete,
        caller=CallerInfo(name=name, number=number),
        transcript=transcript,
        summary=record.summary,
        duration_seconds=duration_seconds,
        recording_url=record.recording_url,
        ended_reason=record.ended_reason,
        cost=record.cost,
        created_at=record.created_at,
    )
