"""Protocolo do resumidor de transcrições."""

from __future__ import annotations

from typing import Protocol


class CallSummarizerProtocol(Protocol):
    """Gera resumo textual a partir da transcrição de uma chamada."""

    async def summarize(self, transcript: str, caller_info: str) -> str:
        """Retorna o resumo.

        Raises:
            UpstreamError: quando o provedor do modelo falha.
        """
        ...
