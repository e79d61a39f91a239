"""Settings de Email (SendGrid v3)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SENDGRID_API_BASE_URL = "https://api.sendgrid.com/v3"


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do envio de resumo por email.

    Attributes:
        sendgrid_api_key: API key do SendGrid
        from_email: Remetente verificado no SendGrid
        to_email: Destinatário dos resumos de chamada
        api_base_url: URL base da API v3
        timeout_seconds: Timeout da requisição HTTP
    """

    sendgrid_api_key: str = ""
    from_email: str = ""
    to_email: str = ""
    api_base_url: str = SENDGRID_API_BASE_URL
    timeout_seconds: float = 10.0

    @property
    def send_endpoint(self) -> str:
        return f"{self.api_base_url}/mail/send"

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.sendgrid_api_key:
            errors.append("SENDGRID_API_KEY não configurado")
        if not self.from_email:
            errors.append("SENDGRID_FROM_EMAIL não configurado")
        if not self.to_email:
            errors.append("SENDGRID_TO_EMAIL não configurado")
        if self.timeout_seconds <= 0:
            errors.append("SENDGRID_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_email_from_env() -> EmailSettings:
    return EmailSettings(
        sendgrid_api_key=os.getenv("SENDGRID_API_KEY", ""),
        from_email=os.getenv("SENDGRID_FROM_EMAIL", ""),
        to_email=os.getenv("SENDGRID_TO_EMAIL", ""),
        api_base_url=os.getenv("SENDGRID_API_BASE_URL", SENDGRID_API_BASE_URL),
        timeout_seconds=float(os.getenv("SENDGRID_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_email_from_env()
