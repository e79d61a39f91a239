"""Agregador de settings do serviço.

Re-exporta as settings de cada domínio; cada módulo carrega do ambiente
e guarda a instância em cache (lru_cache).
"""

from __future__ import annotations

from config.settings.ai import (
    OpenAISettings,
    get_openai_settings,
)
from config.settings.assistant import (
    AssistantSettings,
    get_assistant_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.email import (
    SENDGRID_API_BASE_URL,
    EmailSettings,
    get_email_settings,
)
from config.settings.google_calendar import (
    CALENDAR_SCOPES,
    GOOGLE_AUTH_URI,
    GOOGLE_TOKEN_URI,
    GoogleCalendarSettings,
    get_google_calendar_settings,
)

__all__ = [
    "CALENDAR_SCOPES",
    "GOOGLE_AUTH_URI",
    "GOOGLE_TOKEN_URI",
    "SENDGRID_API_BASE_URL",
    "AssistantSettings",
    "BaseSettings",
    "EmailSettings",
    "Environment",
    "GoogleCalendarSettings",
    "OpenAISettings",
    "get_assistant_settings",
    "get_base_settings",
    "get_email_settings",
    "get_google_calendar_settings",
    "get_openai_settings",
]
