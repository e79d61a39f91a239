"""Endpoints de webhook do Vapi.

Endpoints:
- GET /webhook/vapi: eco de liveness
- POST /webhook/vapi: processa a entrega (resumo + email)

Segurança:
- Sem verificação de assinatura; User-Agent fora do padrão só gera alerta
- Entregas ignoradas respondem 200; só JSON inválido (400) e falha de
  dependência (500) respondem erro
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.vapi.webhook import is_vendor_user_agent, parse_webhook_request
from api.routes._responses import error_response, error_response_for
from config.settings import get_assistant_settings
from utils.errors import MalformedPayloadError, ServiceError

if TYPE_CHECKING:
    from app.use_cases.vapi import ProcessCallWebhookUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_call_webhook_use_case() -> ProcessCallWebhookUseCase:
    """Obtém o use case do webhook (lazy-loading)."""
    from app.bootstrap import get_call_webhook_use_case

    return get_call_webhook_use_case()


@router.get("")
async def webhook_status() -> dict[str, str]:
    assistant = get_assistant_settings().assistant_name
    return {
        "message": f"{assistant} webhook endpoint is active",
        "assistant": assistant,
        "timestamp": datetime.now(UTC).isoformat(),
    }


@router.post("")
async def receive_webhook(request: Request) -> JSONResponse:
    if not is_vendor_user_agent(request.headers):
        logger.warning(
            "vapi_webhook_unexpected_user_agent",
            extra={"user_agent": request.headers.get("user-agent")},
        )

    raw_body = await request.body()
    try:
        payload = parse_webhook_request(raw_body)
    except MalformedPayloadError as exc:
        logger.warning("vapi_webhook_invalid_payload", extra={"error": str(exc)})
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    try:
        result = await _get_call_webhook_use_case().execute(payload)
    except ServiceError as exc:
        logger.warning(
            "vapi_webhook_processing_failed",
            extra={"error_type": type(exc).__name__, "error": str(exc)},
        )
        return error_response_for(exc, "Unknown error occurred")
    except Exception as exc:
        logger.exception("vapi_webhook_unexpected_error")
        return error_response(
            str(exc) or "Unknown error occurred",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return JSONResponse(content=result.to_response())
