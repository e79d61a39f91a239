"""Contrato do cliente de calendário.

Cada chamada recebe as credenciais já ativadas para o principal; o
cliente não conhece tokens nem armazenamento.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from google.auth.credentials import Credentials


@runtime_checkable
class CalendarServiceProtocol(Protocol):
    """Operações de eventos repassadas à API do provedor."""

    async def create_event(self, credentials: Credentials, body: dict[str, Any]) -> dict[str, Any]:
        """Cria evento e retorna o recurso criado."""
        ...

    async def list_events(
        self,
        credentials: Credentials,
        *,
        time_min: str,
        time_max: str | None = None,
        max_results: int = 10,
    ) -> list[dict[str, Any]]:
        """Lista ocorrências únicas ordenadas por início."""
        ...

    async def delete_event(self, credentials: Credentials, event_id: str) -> None:
        """Remove o evento."""
        ...
