"""Protocolos e contratos do core da aplicação."""

from .calendar_service import CalendarServiceProtocol
from .email_sender import EmailContent, EmailDispatchResult, EmailSenderProtocol
from .oauth_client import OAuthClientConfig, OAuthClientProtocol, OAuthTokens
from .summarizer import CallSummarizerProtocol
from .token_store import TokenStoreProtocol

__all__ = [
    "CalendarServiceProtocol",
    "CallSummarizerProtocol",
    "EmailContent",
    "EmailDispatchResult",
    "EmailSenderProtocol",
    "OAuthClientConfig",
    "OAuthClientProtocol",
    "OAuthTokens",
    "TokenStoreProtocol",
]
