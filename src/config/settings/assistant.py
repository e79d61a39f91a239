"""Settings da assistente de voz (persona, principal e heurística de término)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class AssistantSettings:
    """Configurações da assistente.

    Attributes:
        assistant_name: Nome da persona (rótulo das falas do bot e do email)
        default_principal_id: Principal fixo usado pelas rotas de calendário
        completion_duration_seconds: Duração acima da qual a chamada é
            considerada encerrada mesmo sem status explícito
    """

    assistant_name: str = "Priya"
    default_principal_id: str = "demo-user"
    completion_duration_seconds: float = 30.0

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.assistant_name:
            errors.append("ASSISTANT_NAME não pode ser vazio")

        if not self.default_principal_id:
            errors.append("DEFAULT_PRINCIPAL_ID não pode ser vazio")

        if self.completion_duration_seconds < 0:
            errors.append("CALL_COMPLETION_DURATION_SECONDS deve ser >= 0")

        return errors


def _load_assistant_from_env() -> AssistantSettings:
    return AssistantSettings(
        assistant_name=os.getenv("ASSISTANT_NAME", "Priya"),
        default_principal_id=os.getenv("DEFAULT_PRINCIPAL_ID", "demo-user"),
        completion_duration_seconds=float(os.getenv("CALL_COMPLETION_DURATION_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_assistant_settings() -> AssistantSettings:
    """Retorna instância cacheada de AssistantSettings."""
    return _load_assistant_from_env()
