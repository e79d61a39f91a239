"""Transporte de email via SendGrid v3 (POST /mail/send)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.protocols.email_sender import EmailContent, EmailDispatchResult
from config.settings.email import EmailSettings, get_email_settings
from utils.errors import UpstreamError

logger = logging.getLogger(__name__)

SEND_FAILED_MESSAGE = "Failed to send email"


def build_sendgrid_payload(content: EmailContent, *, from_email: str, to_email: str) -> dict[str, Any]:
    """Corpo do mail/send com partes text/plain e text/html (nesta ordem)."""
    return {
        "personalizations": [{"to": [{"email": to_email}]}],
        "from": {"email": from_email},
        "subject": content.subject,
        "content": [
            {"type": "text/plain", "value": content.text},
            {"type": "text/html", "value": content.html},
        ],
    }


class SendGridEmailSender:
    """Implementa EmailSenderProtocol sobre a API HTTP do SendGrid."""

    __slots__ = ("_http_client", "_settings")

    def __init__(
        self,
        *,
        settings: EmailSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_email_settings()
        self._http_client = http_client

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._settings.timeout_seconds)
        return self._http_client

    async def send(self, content: EmailContent) -> EmailDispatchResult:
        payload = build_sendgrid_payload(
            content,
            from_email=self._settings.from_email,
            to_email=self._settings.to_email,
        )
        headers = {
            "Authorization": f"Bearer {self._settings.sendgrid_api_key}",
            "Content-Type": "application/json",
        }
        client = self._get_http_client()
        try:
            response = await client.post(self._settings.send_endpoint, headers=headers, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "sendgrid_http_error",
                extra={"status_code": exc.response.status_code},
            )
            raise UpstreamError(SEND_FAILED_MESSAGE) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "sendgrid_transport_error",
                extra={"error_type": type(exc).__name__},
            )
            raise UpstreamError(SEND_FAILED_MESSAGE) from exc

        message_id = response.headers.get("x-message-id")
        logger.info(
            "sendgrid_email_sent",
            extra={"status_code": response.status_code, "message_id": message_id},
        )
        return EmailDispatchResult(message_id=message_id, status_code=response.status_code)

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
