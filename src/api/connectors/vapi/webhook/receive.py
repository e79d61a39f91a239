"""Parse inicial do webhook do Vapi (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from utils.errors import MalformedPayloadError

if TYPE_CHECKING:
    from collections.abc import Mapping

VENDOR_USER_AGENT_MARKER = "Vapi"


def parse_webhook_request(raw_body: bytes) -> dict[str, object]:
    """Parseia o corpo do webhook como objeto JSON.

    Raises:
        MalformedPayloadError: Se o JSON estiver inválido ou não for objeto
    """
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayloadError("Invalid JSON payload") from exc

    if not isinstance(payload, dict):
        raise MalformedPayloadError("Payload must be a JSON object")

    return payload


def is_vendor_user_agent(headers: Mapping[str, str]) -> bool:
    """True quando o User-Agent está ausente ou identifica o vendor.

    Não é autenticação: só sinaliza chamadas suspeitas para o log.
    """
    user_agent = headers.get("user-agent")
    if not user_agent:
        return True
    return VENDOR_USER_AGENT_MARKER in user_agent
