"""Cliente OAuth2 (authorization-code) do Google via google-auth-oauthlib."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from google_auth_oauthlib.flow import Flow

from app.protocols.oauth_client import OAuthClientConfig, OAuthTokens
from config.settings.google_calendar import (
    GOOGLE_AUTH_URI,
    GOOGLE_TOKEN_URI,
    GoogleCalendarSettings,
    get_google_calendar_settings,
)
from utils.errors import AuthError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

MISSING_REFRESH_TOKEN_MESSAGE = "No refresh token received"
EXCHANGE_FAILED_MESSAGE = "Failed to exchange authorization code"

# Estado fixo: a URL de consentimento é determinística (sem PKCE nem CSRF state).
_CONSENT_STATE = "calendar-consent"


def build_client_config(settings: GoogleCalendarSettings) -> dict[str, Any]:
    """client_config no formato `web` esperado por Flow.from_client_config."""
    return {
        "web": {
            "client_id": settings.client_id,
            "client_secret": settings.client_secret,
            "auth_uri": GOOGLE_AUTH_URI,
            "token_uri": GOOGLE_TOKEN_URI,
            "redirect_uris": [settings.redirect_uri],
        }
    }


def _expiry_to_epoch_ms(expiry: datetime | None) -> int | None:
    if expiry is None:
        return None
    # google-auth guarda expiry como datetime naive em UTC
    if expiry.tzinfo is None:
        expiry = expiry.replace(tzinfo=timezone.utc)
    return int(expiry.timestamp() * 1000)


class GoogleOAuthClient:
    """Implementa OAuthClientProtocol.

    Cada operação cria um Flow novo; o objeto Flow guarda estado da sessão
    OAuth e não deve ser compartilhado entre requisições.
    """

    __slots__ = ("_flow_factory", "_settings")

    def __init__(
        self,
        *,
        settings: GoogleCalendarSettings | None = None,
        flow_factory: Callable[[], Flow] | None = None,
    ) -> None:
        self._settings = settings or get_google_calendar_settings()
        self._flow_factory = flow_factory or self._new_flow

    @property
    def config(self) -> OAuthClientConfig:
        return OAuthClientConfig(
            client_id=self._settings.client_id,
            client_secret=self._settings.client_secret,
            token_uri=GOOGLE_TOKEN_URI,
            scopes=self._settings.scopes,
        )

    def _new_flow(self) -> Flow:
        return Flow.from_client_config(
            build_client_config(self._settings),
            scopes=list(self._settings.scopes),
            redirect_uri=self._settings.redirect_uri,
            autogenerate_code_verifier=False,
        )

    def build_authorization_url(self) -> str:
        flow = self._flow_factory()
        auth_url, _ = flow.authorization_url(
            access_type="offline",
            prompt="consent",
            state=_CONSENT_STATE,
        )
        return auth_url

    async def exchange_code(self, code: str) -> OAuthTokens:
        flow = self._flow_factory()
        try:
            await asyncio.to_thread(flow.fetch_token, code=code)
        except Exception as exc:
            logger.warning(
                "google_oauth_exchange_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise AuthError(EXCHANGE_FAILED_MESSAGE) from exc

        credentials = flow.credentials
        if not credentials.refresh_token:
            logger.warning("google_oauth_missing_refresh_token")
            raise AuthError(MISSING_REFRESH_TOKEN_MESSAGE)

        return OAuthTokens(
            access_token=credentials.token,
            refresh_token=credentials.refresh_token,
            expiry_date=_expiry_to_epoch_ms(credentials.expiry),
        )
