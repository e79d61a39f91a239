"""Settings de Google Calendar (OAuth2 authorization-code + API v3)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

GOOGLE_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

CALENDAR_SCOPES: tuple[str, ...] = (
    "https://www.googleapis.com/auth/calendar",
    "https://www.googleapis.com/auth/calendar.events",
)


@dataclass(frozen=True)
class GoogleCalendarSettings:
    """Configurações do Google Calendar.

    Attributes:
        client_id: Client ID do app OAuth
        client_secret: Client Secret do app OAuth
        redirect_uri: URL de callback registrada (GET /auth/callback)
        token_storage_path: Arquivo JSON com os refresh tokens
        calendar_id: Calendário alvo (geralmente 'primary')
        default_timezone: Timezone aplicado quando start/end chegam como string
        scopes: Escopos pedidos no consentimento
    """

    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    token_storage_path: str = "./refresh_tokens.json"
    calendar_id: str = "primary"
    default_timezone: str = "America/New_York"
    scopes: tuple[str, ...] = field(default=CALENDAR_SCOPES)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.client_id:
            errors.append("GOOGLE_CLIENT_ID não configurado")
        if not self.client_secret:
            errors.append("GOOGLE_CLIENT_SECRET não configurado")
        if not self.redirect_uri:
            errors.append("GOOGLE_REDIRECT_URI não configurado")
        if not self.token_storage_path:
            errors.append("REFRESH_TOKEN_STORAGE_PATH não pode ser vazio")
        return errors


def _load_google_calendar_from_env() -> GoogleCalendarSettings:
    return GoogleCalendarSettings(
        client_id=os.getenv("GOOGLE_CLIENT_ID", ""),
        client_secret=os.getenv("GOOGLE_CLIENT_SECRET", ""),
        redirect_uri=os.getenv("GOOGLE_REDIRECT_URI", ""),
        token_storage_path=os.getenv("REFRESH_TOKEN_STORAGE_PATH", "./refresh_tokens.json"),
        calendar_id=os.getenv("GOOGLE_CALENDAR_ID", "primary"),
        default_timezone=os.getenv("GOOGLE_CALENDAR_TIMEZONE", "America/New_York"),
    )


@lru_cache(maxsize=1)
def get_google_calendar_settings() -> GoogleCalendarSettings:
    """Retorna instância cacheada de GoogleCalendarSettings."""
    return _load_google_calendar_from_env()
