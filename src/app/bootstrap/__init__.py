"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_calendar_operations

    # Na inicialização do serviço
    initialize_app()

    # Obter serviços
    operations = get_calendar_operations()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_assistant_settings,
    get_base_settings,
    get_email_settings,
    get_google_calendar_settings,
    get_openai_settings,
)

if TYPE_CHECKING:
    from app.infra.email import SendGridEmailSender
    from app.services.calendar_operations import CalendarOperations
    from app.services.token_lifecycle import TokenLifecycleManager
    from app.use_cases.vapi import ProcessCallWebhookUseCase

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação.

    Deve ser chamada uma vez no início do serviço. Configura logging
    estruturado JSON com correlation_id; o campo `service` vem de
    SERVICE_NAME (BaseSettings).
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=get_base_settings().service_name,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Erros de todas as settings, prefixados pelo domínio."""
    errors: list[str] = []
    sources = (
        ("base", get_base_settings()),
        ("assistant", get_assistant_settings()),
        ("openai", get_openai_settings()),
        ("google_calendar", get_google_calendar_settings()),
        ("email", get_email_settings()),
    )
    for prefix, settings in sources:
        errors.extend(f"{prefix}: {error}" for error in settings.validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_token_lifecycle() -> TokenLifecycleManager:
    """Obtém o gerenciador de tokens OAuth (singleton)."""
    from app.bootstrap.dependencies import create_token_lifecycle

    return create_token_lifecycle()


@lru_cache(maxsize=1)
def get_calendar_operations() -> CalendarOperations:
    """Obtém as operações de calendário (singleton)."""
    from app.bootstrap.dependencies import create_calendar_operations

    return create_calendar_operations(get_token_lifecycle())


@lru_cache(maxsize=1)
def get_call_webhook_use_case() -> ProcessCallWebhookUseCase:
    """Obtém o use case do webhook de chamadas (singleton)."""
    from app.bootstrap.dependencies import create_call_webhook_use_case

    return create_call_webhook_use_case(get_email_sender())


@lru_cache(maxsize=1)
def get_email_sender() -> SendGridEmailSender:
    """Obtém o transporte de email (singleton, dono do cliente HTTP)."""
    from app.bootstrap.dependencies import create_email_sender

    return create_email_sender()


async def close_resources() -> None:
    """Fecha clientes HTTP criados pelos getters."""
    if get_email_sender.cache_info().currsize:
        await get_email_sender().aclose()
