"""Extrator de payloads de webhook do Vapi.

O vendor entrega o mesmo evento em formatos diferentes:
- message_envelope: evento dentro de `message` (server messages)
- nested_call: dados da chamada em `call` no topo do payload
- flat: campos soltos no topo (formato legado / testes manuais)

O formato é classificado uma única vez e os campos brutos são copiados
para um WorkingRecord; nenhuma regra de negócio é aplicada aqui.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

PayloadShape = Literal["message_envelope", "nested_call", "flat"]

CALLER_LABEL = "Caller"
_TRANSCRIPT_ROLES = frozenset({"user", "bot"})


@dataclass(frozen=True, slots=True)
class TranscriptTurn:
    role: str
    message: str


@dataclass(frozen=True, slots=True)
class WorkingRecord:
    """Campos brutos do evento, já resolvidos entre os formatos do vendor."""

    shape: PayloadShape
    call_id: str | None = None
    call_status: str | None = None
    ended_reason: str | None = None
    duration: float | None = None
    duration_ms: float | None = None
    transcript: str | None = None
    turns: tuple[TranscriptTurn, ...] = ()
    summary: str | None = None
    caller_name: str | None = None
    caller_number: str | None = None
    customer_number: str | None = None
    recording_url: str | None = None
    cost: float | None = None
    created_at: str | None = None


def classify_payload(payload: dict[str, Any]) -> PayloadShape:
    """Identifica o formato do payload."""
    if isinstance(payload.get("message"), dict):
        return "message_envelope"
    if isinstance(payload.get("call"), dict):
        return "nested_call"
    return "flat"


def extract_working_record(payload: dict[str, Any]) -> WorkingRecord:
    """Mapeia o payload bruto para WorkingRecord (função pura)."""
    shape = classify_payload(payload)
    record = payload["message"] if shape == "message_envelope" else payload
    call = _as_dict(record.get("call"))
    caller = _as_dict(record.get("caller"))
    customer = _as_dict(record.get("customer"))

    duration = _as_number(record.get("durationSeconds"))
    if duration is None:
        duration = _as_number(record.get("duration"))

    return WorkingRecord(
        shape=shape,
        call_id=_as_str(call.get("id")) or _as_str(record.get("id")),
        call_status=_as_str(call.get("status")) or _as_str(record.get("status")),
        ended_reason=_as_str(record.get("endedReason")),
        duration=duration,
        duration_ms=_as_number(record.get("durationMs")),
        transcript=_as_str(record.get("transcript")),
        turns=_extract_turns(record.get("messages")),
        summary=_as_str(record.get("summary")),
        caller_name=_as_str(caller.get("name")),
        caller_number=_as_str(caller.get("number")),
        customer_number=_as_str(customer.get("number")),
        recording_url=_as_str(record.get("recordingUrl")) or _as_str(record.get("recording_url")),
        cost=_as_number(record.get("cost")),
        created_at=_as_str(record.get("created_at")) or _as_str(call.get("createdAt")),
    )


def reconstruct_transcript(turns: tuple[TranscriptTurn, ...], persona_name: str) -> str | None:
    """Monta transcrição `"<rótulo>: <mensagem>"` a partir dos turnos.

    Apenas turnos `user` (rotulado "Caller") e `bot` (rotulado com o nome
    da persona) entram. Retorna None quando não há turnos aproveitáveis.
    """
    lines: list[str] = []
    for turn in turns:
        if turn.role not in _TRANSCRIPT_ROLES:
            continue
        label = CALLER_LABEL if turn.role == "user" else persona_name
        lines.append(f"{label}: {turn.message}")
    if not lines:
        return None
    return "\n".join(lines)


def _extract_turns(raw: Any) -> tuple[TranscriptTurn, ...]:
    if not isinstance(raw, list):
        return ()
    turns: list[TranscriptTurn] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        role = item.get("role")
        message = item.get("message")
        if isinstance(role, str) and isinstance(message, str):
            turns.append(TranscriptTurn(role=role, message=message))
    return tuple(turns)


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _as_number(value: Any) -> float | None:
    # bool é subclasse de int
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None
