"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.calendar_operations import CalendarOperations
from app.services.call_summary_email import build_call_summary_email
from app.services.token_lifecycle import TokenLifecycleManager, get_active_credentials

__all__ = [
    "CalendarOperations",
    "TokenLifecycleManager",
    "build_call_summary_email",
    "get_active_credentials",
]
