"""Settings de OpenAI usadas pelo resumo de chamadas."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class OpenAISettings:
    """Configurações do OpenAI.

    Attributes:
        api_key: Chave da API OpenAI
        model: Modelo usado no resumo
        timeout_seconds: Timeout por chamada
        max_tokens: Limite de tokens da resposta
        temperature: Temperatura do resumo (baixa para manter fidelidade)
    """

    api_key: str = ""
    model: str = "gpt-3.5-turbo"
    timeout_seconds: float = 30.0
    max_tokens: int = 400
    temperature: float = 0.3

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.api_key:
            errors.append("OPENAI_API_KEY não configurado")

        if self.timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser > 0")

        if self.max_tokens < 1:
            errors.append("OPENAI_MAX_TOKENS deve ser >= 1")

        if not 0.0 <= self.temperature <= 2.0:
            errors.append("OPENAI_TEMPERATURE deve estar entre 0 e 2")

        return errors


def _load_openai_from_env() -> OpenAISettings:
    return OpenAISettings(
        api_key=os.getenv("OPENAI_API_KEY", ""),
        model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
        timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30")),
        max_tokens=int(os.getenv("OPENAI_MAX_TOKENS", "400")),
        temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.3")),
    )


@lru_cache(maxsize=1)
def get_openai_settings() -> OpenAISettings:
    """Retorna instância cacheada de OpenAISettings."""
    return _load_openai_from_env()
