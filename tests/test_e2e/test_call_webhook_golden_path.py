"""Teste E2E do webhook de chamadas pela aplicação ASGI completa."""

from __future__ import annotations

import httpx
import pytest

from api.routes.vapi import webhook as webhook_module
from app.app import app
from app.use_cases.vapi import ProcessCallWebhookUseCase
from tests.fakes.fake_call_collaborators import FakeEmailSender, FakeSummarizer


@pytest.fixture
def collaborators(monkeypatch: pytest.MonkeyPatch) -> tuple[FakeSummarizer, FakeEmailSender]:
    summarizer = FakeSummarizer(summary="John wants a meeting next Tuesday at 2pm.")
    sender = FakeEmailSender()
    use_case = ProcessCallWebhookUseCase(
        summarizer=summarizer,
        email_sender=sender,
        assistant_name="Priya",
    )
    monkeypatch.setattr(webhook_module, "_get_call_webhook_use_case", lambda: use_case)
    return summarizer, sender


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")


@pytest.mark.asyncio
async def test_completed_call_generates_summary_and_single_email(collaborators) -> None:
    summarizer, sender = collaborators
    payload = {
        "id": "call_e2e_1",
        "status": "completed",
        "transcript": "User: Hi, I'd like to schedule a meeting.\nPriya: Sure!",
        "caller": {"name": "John", "number": "+15551234567"},
        "duration": 95,
    }

    async with _client() as client:
        response = await client.post(
            "/webhook/vapi",
            json=payload,
            headers={"user-agent": "Vapi/1.0", "x-correlation-id": "corr-e2e"},
        )

    body = response.json()
    assert response.status_code == 200
    assert response.headers["x-correlation-id"] == "corr-e2e"
    assert body["success"] is True
    assert body["summaryGenerated"] is True
    assert body["emailSent"] is True
    assert summarizer.calls == [
        (payload["transcript"], "John (+15551234567)"),
    ]
    assert len(sender.sent) == 1
    email = sender.sent[0]
    assert email.subject == "📞 Call Summary from Priya - John"
    assert "John wants a meeting next Tuesday at 2pm." in email.text
    assert "2 minutes" in email.text


@pytest.mark.asyncio
async def test_in_progress_call_is_acknowledged_without_side_effects(collaborators) -> None:
    summarizer, sender = collaborators

    async with _client() as client:
        response = await client.post(
            "/webhook/vapi",
            json={"status": "in-progress"},
            headers={"user-agent": "Vapi/1.0"},
        )

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert "summaryGenerated" not in body
    assert summarizer.calls == []
    assert sender.sent == []


@pytest.mark.asyncio
async def test_health_is_served_at_root() -> None:
    async with _client() as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["x-correlation-id"]
