"""Endpoints do consentimento OAuth2 do Google Calendar.

Endpoints:
- GET /auth: devolve a URL de consentimento
- GET /auth/callback: troca o code, guarda o refresh token e redireciona
  para `/?success=true` ou `/?error=<mensagem>`
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from api.routes._responses import error_response
from config.settings import get_assistant_settings
from utils.errors import AuthError

if TYPE_CHECKING:
    from app.services.token_lifecycle import TokenLifecycleManager

logger = logging.getLogger(__name__)

router = APIRouter()

AUTH_URL_FAILED_MESSAGE = "Failed to generate authorization URL"
MISSING_CODE_MESSAGE = "No authorization code received"
AUTH_FAILED_MESSAGE = "Failed to authenticate"


def _get_token_lifecycle() -> TokenLifecycleManager:
    from app.bootstrap import get_token_lifecycle

    return get_token_lifecycle()


def _get_principal_id() -> str:
    return get_assistant_settings().default_principal_id


def _redirect(query: str) -> RedirectResponse:
    return RedirectResponse(url=f"/?{query}", status_code=status.HTTP_307_TEMPORARY_REDIRECT)


def _redirect_error(message: str) -> RedirectResponse:
    return _redirect(f"error={quote(message)}")


@router.get("")
async def start_authorization() -> JSONResponse:
    """Retorna a URL de consentimento do Google."""
    try:
        auth_url = _get_token_lifecycle().build_authorization_url()
    except Exception:
        logger.exception("auth_url_generation_failed")
        return error_response(AUTH_URL_FAILED_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(content={"success": True, "authUrl": auth_url})


@router.get("/callback")
async def authorization_callback(request: Request) -> RedirectResponse:
    """Callback do provedor OAuth."""
    provider_error = request.query_params.get("error")
    if provider_error:
        logger.warning("auth_callback_provider_error", extra={"error": provider_error})
        return _redirect_error(provider_error)

    code = request.query_params.get("code")
    if not code:
        logger.warning("auth_callback_missing_code")
        return _redirect_error(MISSING_CODE_MESSAGE)

    lifecycle = _get_token_lifecycle()
    principal_id = _get_principal_id()
    try:
        tokens = await lifecycle.exchange_code(code)
        await lifecycle.store_token(
            principal_id,
            tokens.refresh_token,
            access_token=tokens.access_token,
            expiry_date=tokens.expiry_date,
        )
    except AuthError as exc:
        logger.warning("auth_callback_exchange_failed", extra={"error": str(exc)})
        return _redirect_error(AUTH_FAILED_MESSAGE)
    except Exception:
        logger.exception("auth_callback_failed")
        return _redirect_error(AUTH_FAILED_MESSAGE)

    logger.info("auth_callback_completed", extra={"principal_id": principal_id})
    return _redirect("success=true")
