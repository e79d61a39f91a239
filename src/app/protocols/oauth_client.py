"""Protocolo do provedor OAuth2 (authorization-code)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class OAuthTokens:
    """Tokens devolvidos na troca do authorization code."""

    access_token: str | None
    refresh_token: str
    expiry_date: int | None = None


@dataclass(frozen=True, slots=True)
class OAuthClientConfig:
    """Dados do app OAuth necessários para montar credenciais de usuário."""

    client_id: str
    client_secret: str
    token_uri: str
    scopes: tuple[str, ...]


class OAuthClientProtocol(Protocol):
    """Consentimento e troca de código junto ao provedor."""

    @property
    def config(self) -> OAuthClientConfig: ...

    def build_authorization_url(self) -> str:
        """URL de consentimento (offline + consent forçado)."""
        ...

    async def exchange_code(self, code: str) -> OAuthTokens:
        """Troca o authorization code por tokens.

        Raises:
            AuthError: falha do provedor ou refresh token ausente.
        """
        ...
