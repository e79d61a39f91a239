"""Modelo canônico de uma chamada de voz recebida por webhook.

Construído a cada entrega do webhook e descartado após o envio do email;
nunca é persistido.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CallStatus = Literal["unknown", "in_progress", "completed"]

UNKNOWN_CALL_ID = "unknown"
UNKNOWN_CALLER_NAME = "Unknown"


class CallerInfo(BaseModel):
    """Identidade de quem ligou, como informada pelo vendor."""

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Nome do chamador.")
    number: str | None = Field(default=None, description="Telefone do chamador.")

    @property
    def has_known_name(self) -> bool:
        return bool(self.name) and self.name != UNKNOWN_CALLER_NAME

    def describe(self) -> str:
        """Texto de identificação enviado ao resumidor.

        `"{nome} ({numero})"` quando o nome é conhecido, senão o número puro,
        senão `"Unknown caller"`.
        """
        if self.has_known_name:
            return f"{self.name} ({self.number})" if self.number else str(self.name)
        return self.number or "Unknown caller"


class CallEvent(BaseModel):
    """Chamada normalizada, pronta para resumo e email."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identificador da chamada no vendor.")
    status: CallStatus = Field(..., description="Status derivado da heurística de término.")
    vendor_status: str | None = Field(default=None, description="Status bruto do vendor.")
    is_complete: bool = Field(default=False, description="Resultado da heurística de término.")
    caller: CallerInfo = Field(default_factory=CallerInfo)
    transcript: str | None = None
    summary: str | None = Field(default=None, description="Resumo enviado pelo vendor.")
    duration_seconds: float | None = None
    recording_url: str | None = None
    ended_reason: str | None = None
    cost: float | None = None
    created_at: str | None = None


__all__ = [
    "UNKNOWN_CALLER_NAME",
    "UNKNOWN_CALL_ID",
    "CallEvent",
    "CallStatus",
    "CallerInfo",
]
