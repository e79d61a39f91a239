"""Taxonomia de erros do serviço.

Cada exceção carrega a mensagem que pode ser devolvida ao cliente HTTP
no envelope `{success: false, error: <mensagem>}`. O mapeamento para status
HTTP fica nas rotas (api/routes/_responses.py).
"""

from __future__ import annotations


class ServiceError(RuntimeError):
    """Base para erros conhecidos do serviço."""


class ValidationError(ServiceError):
    """Campos obrigatórios ausentes ou inválidos na requisição."""


class MalformedPayloadError(ServiceError):
    """Corpo do webhook não pôde ser interpretado como objeto JSON."""


class NotAuthenticatedError(ServiceError):
    """Nenhum refresh token armazenado para o principal."""

    def __init__(self, message: str = "User not authenticated. Please authenticate first.") -> None:
        super().__init__(message)


class AuthError(ServiceError):
    """Falha na troca do authorization code junto ao provedor OAuth2."""


class UpstreamError(ServiceError):
    """Falha em dependência externa (calendário, LLM ou transporte de email)."""
