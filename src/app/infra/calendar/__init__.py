"""Integrações com Google (OAuth2 e Calendar API v3)."""

from app.infra.calendar.google_calendar_client import GoogleCalendarClient
from app.infra.calendar.google_oauth import GoogleOAuthClient

__all__ = ["GoogleCalendarClient", "GoogleOAuthClient"]
