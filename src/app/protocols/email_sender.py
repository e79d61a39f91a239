"""Protocolo do transporte de email."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class EmailContent:
    """Email já renderizado."""

    subject: str
    html: str
    text: str


@dataclass(frozen=True, slots=True)
class EmailDispatchResult:
    """Confirmação do transporte."""

    message_id: str | None = None
    status_code: int | None = None


class EmailSenderProtocol(Protocol):
    """Envia um email para o destinatário configurado."""

    async def send(self, content: EmailContent) -> EmailDispatchResult:
        """Envia o email.

        Raises:
            UpstreamError: quando o transporte rejeita ou falha.
        """
        ...
