"""Testes do SendGridEmailSender com httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from app.infra.email import SendGridEmailSender
from app.protocols.email_sender import EmailContent
from config.settings.email import EmailSettings
from utils.errors import UpstreamError

SETTINGS = EmailSettings(
    sendgrid_api_key="SG.test",
    from_email="priya@example.com",
    to_email="owner@example.com",
)
CONTENT = EmailContent(subject="📞 Call Summary", html="<p>Hi</p>", text="Hi")


def _sender(handler) -> SendGridEmailSender:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SendGridEmailSender(settings=SETTINGS, http_client=client)


@pytest.mark.asyncio
async def test_send_posts_v3_payload() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(202, headers={"x-message-id": "msg-42"})

    result = await _sender(handler).send(CONTENT)

    assert result.message_id == "msg-42"
    assert result.status_code == 202
    request = captured[0]
    assert str(request.url) == "https://api.sendgrid.com/v3/mail/send"
    assert request.headers["authorization"] == "Bearer SG.test"
    body = json.loads(request.content)
    assert body["personalizations"] == [{"to": [{"email": "owner@example.com"}]}]
    assert body["from"] == {"email": "priya@example.com"}
    assert body["subject"] == "📞 Call Summary"
    assert body["content"] == [
        {"type": "text/plain", "value": "Hi"},
        {"type": "text/html", "value": "<p>Hi</p>"},
    ]


@pytest.mark.asyncio
async def test_non_2xx_raises_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"errors": [{"message": "bad key"}]})

    with pytest.raises(UpstreamError, match="Failed to send email"):
        await _sender(handler).send(CONTENT)


@pytest.mark.asyncio
async def test_transport_error_raises_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamError, match="Failed to send email"):
        await _sender(handler).send(CONTENT)
