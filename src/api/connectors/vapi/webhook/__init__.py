"""Recepção do webhook do Vapi."""

from .receive import is_vendor_user_agent, parse_webhook_request

__all__ = ["is_vendor_user_agent", "parse_webhook_request"]
