"""Formatter JSON com os campos obrigatórios de todo log do serviço."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa para que as linhas fiquem estáveis entre execuções
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter padrão.

    Exemplo de saída:
        {"asctime": "2026-03-19 10:30:00,120", "level": "INFO",
         "logger": "api.routes.vapi.webhook", "message": "call_webhook_received",
         "correlation_id": "abc-123", "service": "priya-assistant"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
