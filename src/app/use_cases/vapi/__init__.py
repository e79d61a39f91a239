"""Use cases do webhook de chamadas Vapi."""

from .process_call_webhook import CallWebhookResult, ProcessCallWebhookUseCase

__all__ = ["CallWebhookResult", "ProcessCallWebhookUseCase"]
