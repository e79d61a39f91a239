"""Factories de dependências: criação de implementações concretas.

Centraliza a escolha das implementações a partir das settings de
ambiente. Os getters cacheados ficam em app/bootstrap/__init__.py.
"""

from __future__ import annotations

import logging
import os

from app.infra.ai import OpenAICallSummarizer
from app.infra.calendar import GoogleCalendarClient, GoogleOAuthClient
from app.infra.email import SendGridEmailSender
from app.infra.stores import JsonFileTokenStore, MemoryTokenStore
from app.protocols.email_sender import EmailSenderProtocol
from app.protocols.token_store import TokenStoreProtocol
from app.services.calendar_operations import CalendarOperations
from app.services.token_lifecycle import TokenLifecycleManager
from app.use_cases.vapi import ProcessCallWebhookUseCase
from config.settings import (
    get_assistant_settings,
    get_email_settings,
    get_google_calendar_settings,
    get_openai_settings,
)

logger = logging.getLogger(__name__)


def create_token_store() -> TokenStoreProtocol:
    """Cria store de refresh tokens.

    Lê TOKEN_STORE_BACKEND da env:
    - "json": JsonFileTokenStore em REFRESH_TOKEN_STORAGE_PATH (padrão)
    - "memory": MemoryTokenStore (dev/test)
    """
    backend = os.getenv("TOKEN_STORE_BACKEND", "json").lower()

    if backend == "json":
        path = get_google_calendar_settings().token_storage_path
        logger.info("token_store_created", extra={"backend": "json"})
        return JsonFileTokenStore(path)

    if backend == "memory":
        environment = os.getenv("ENVIRONMENT", "development")
        if environment not in ("development", "test"):
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("token_store_created", extra={"backend": "memory"})
        return MemoryTokenStore()

    msg = f"TOKEN_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_token_lifecycle(token_store: TokenStoreProtocol | None = None) -> TokenLifecycleManager:
    return TokenLifecycleManager(
        oauth_client=GoogleOAuthClient(settings=get_google_calendar_settings()),
        token_store=token_store or create_token_store(),
    )


def create_calendar_operations(token_lifecycle: TokenLifecycleManager) -> CalendarOperations:
    settings = get_google_calendar_settings()
    return CalendarOperations(
        token_lifecycle=token_lifecycle,
        calendar_client=GoogleCalendarClient(calendar_id=settings.calendar_id),
        default_timezone=settings.default_timezone,
    )


def create_email_sender() -> SendGridEmailSender:
    return SendGridEmailSender(settings=get_email_settings())


def create_call_webhook_use_case(
    email_sender: EmailSenderProtocol | None = None,
) -> ProcessCallWebhookUseCase:
    assistant = get_assistant_settings()
    return ProcessCallWebhookUseCase(
        summarizer=OpenAICallSummarizer(
            assistant_name=assistant.assistant_name,
            settings=get_openai_settings(),
        ),
        email_sender=email_sender or create_email_sender(),
        assistant_name=assistant.assistant_name,
        completion_threshold_seconds=assistant.completion_duration_seconds,
    )
