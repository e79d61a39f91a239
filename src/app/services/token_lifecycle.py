"""Ciclo de vida do token OAuth2 do calendário.

Consentimento, troca do authorization code, persistência do refresh
token por principal e ativação de credenciais para a requisição atual.

`principal_id` é opaco: hoje as rotas passam um principal fixo
(DEFAULT_PRINCIPAL_ID), mas nenhum contrato daqui depende disso.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import TYPE_CHECKING

from google.oauth2.credentials import Credentials

from app.domain.token_record import TokenRecord

if TYPE_CHECKING:
    from app.protocols.oauth_client import OAuthClientProtocol, OAuthTokens
    from app.protocols.token_store import TokenStoreProtocol

logger = logging.getLogger(__name__)

_active_credentials: ContextVar[Credentials | None] = ContextVar(
    "active_calendar_credentials", default=None
)


def get_active_credentials() -> Credentials | None:
    """Credenciais ativadas no contexto atual (None se nenhuma)."""
    return _active_credentials.get()


class TokenLifecycleManager:
    """Orquestra OAuthClient e TokenStore."""

    __slots__ = ("_oauth_client", "_token_store")

    def __init__(
        self,
        *,
        oauth_client: OAuthClientProtocol,
        token_store: TokenStoreProtocol,
    ) -> None:
        self._oauth_client = oauth_client
        self._token_store = token_store

    def build_authorization_url(self) -> str:
        return self._oauth_client.build_authorization_url()

    async def exchange_code(self, code: str) -> OAuthTokens:
        """Troca o code por tokens.

        Raises:
            AuthError: falha do provedor ou refresh token ausente
        """
        return await self._oauth_client.exchange_code(code)

    async def store_token(
        self,
        principal_id: str,
        refresh_token: str,
        *,
        access_token: str | None = None,
        expiry_date: int | None = None,
    ) -> None:
        """Upsert do registro do principal (substitui o anterior)."""
        record = TokenRecord(
            principal_id=principal_id,
            refresh_token=refresh_token,
            access_token=access_token,
            expiry_date=expiry_date,
        )
        await self._token_store.upsert(record)
        logger.info("calendar_token_stored", extra={"principal_id": principal_id})

    async def activate_credentials(self, principal_id: str) -> bool:
        """Ativa as credenciais do principal para o contexto atual.

        Returns:
            False (sem exceção) quando não há token armazenado.
        """
        record = await self._token_store.get(principal_id)
        if record is None:
            logger.info("calendar_credentials_missing", extra={"principal_id": principal_id})
            return False

        config = self._oauth_client.config
        # Sem access token: a biblioteca renova a partir do refresh token na primeira chamada.
        credentials = Credentials(
            token=None,
            refresh_token=record.refresh_token,
            token_uri=config.token_uri,
            client_id=config.client_id,
            client_secret=config.client_secret,
            scopes=list(config.scopes),
        )
        _active_credentials.set(credentials)
        return True
