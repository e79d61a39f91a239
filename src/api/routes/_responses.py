"""Envelope de erro `{success: false, error}` e mapeamento para status HTTP."""

from __future__ import annotations

from fastapi import status
from fastapi.responses import JSONResponse

from utils.errors import (
    MalformedPayloadError,
    NotAuthenticatedError,
    ServiceError,
    ValidationError,
)

_STATUS_BY_ERROR: tuple[tuple[type[ServiceError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (MalformedPayloadError, status.HTTP_400_BAD_REQUEST),
    (NotAuthenticatedError, status.HTTP_401_UNAUTHORIZED),
)


def status_for(exc: Exception) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_message(exc: Exception, default: str) -> str:
    """Mensagem repassada ao cliente (a do erro, ou `default` se vazia)."""
    # HttpError do googleapiclient expõe `reason` mais legível que str(exc)
    reason = getattr(exc, "reason", None)
    if isinstance(reason, str) and reason:
        return reason
    return str(exc) or default


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        content={"success": False, "error": message},
        status_code=status_code,
    )


def error_response_for(exc: Exception, default: str) -> JSONResponse:
    return error_response(error_message(exc, default), status_for(exc))
