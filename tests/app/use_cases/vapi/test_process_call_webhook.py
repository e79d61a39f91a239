"""Testes do use case ProcessCallWebhookUseCase."""

from __future__ import annotations

import pytest

from app.use_cases.vapi import ProcessCallWebhookUseCase
from tests.fakes.fake_call_collaborators import FakeEmailSender, FakeSummarizer
from tests.fakes.payloads import completed_flat_payload, end_of_call_envelope, in_progress_payload
from utils.errors import UpstreamError


@pytest.fixture
def summarizer() -> FakeSummarizer:
    return FakeSummarizer()


@pytest.fixture
def email_sender() -> FakeEmailSender:
    return FakeEmailSender()


@pytest.fixture
def use_case(summarizer: FakeSummarizer, email_sender: FakeEmailSender) -> ProcessCallWebhookUseCase:
    return ProcessCallWebhookUseCase(
        summarizer=summarizer,
        email_sender=email_sender,
        assistant_name="Priya",
    )


@pytest.mark.asyncio
async def test_skip_has_no_side_effects(use_case, summarizer, email_sender) -> None:
    result = await use_case.execute(in_progress_payload())

    assert result.success is True
    assert result.message == "awaiting completion"
    assert result.to_response() == {
        "success": True,
        "message": "awaiting completion",
        "callId": "call_987654321",
    }
    assert summarizer.calls == []
    assert email_sender.sent == []


@pytest.mark.asyncio
async def test_transcript_is_summarized_and_emailed_once(use_case, summarizer, email_sender) -> None:
    result = await use_case.execute(completed_flat_payload())

    assert len(summarizer.calls) == 1
    transcript, caller_info = summarizer.calls[0]
    assert transcript.startswith("Priya: Hello!")
    assert caller_info == "John Doe (+1234567890)"
    assert len(email_sender.sent) == 1
    assert email_sender.sent[0].subject == "📞 Call Summary from Priya - John Doe"
    assert "Caller wants to book a meeting." in email_sender.sent[0].text
    assert result.to_response() == {
        "success": True,
        "message": "Webhook processed successfully by Priya",
        "callId": "call_123456789",
        "summaryGenerated": True,
        "summarySource": "generated",
        "emailSent": True,
        "assistant": "Priya",
    }


@pytest.mark.asyncio
async def test_vendor_summary_skips_summarizer(use_case, summarizer, email_sender) -> None:
    payload = completed_flat_payload()
    payload["summary"] = "Vendor summary text"

    result = await use_case.execute(payload)

    assert summarizer.calls == []
    assert result.summary_source == "vendor"
    assert result.summary_generated is False
    assert "Vendor summary text" in email_sender.sent[0].text


@pytest.mark.asyncio
async def test_caller_info_falls_back_to_number(use_case, summarizer) -> None:
    await use_case.execute(end_of_call_envelope())

    assert summarizer.calls[0][1] == "+15550001111"


@pytest.mark.asyncio
async def test_caller_info_unknown_caller(use_case, summarizer) -> None:
    await use_case.execute({"id": "c1", "status": "completed", "transcript": "AI: Hello"})

    assert summarizer.calls[0][1] == "Unknown caller"


@pytest.mark.asyncio
async def test_fallback_summary_when_nothing_to_summarize(use_case, summarizer, email_sender) -> None:
    result = await use_case.execute({"id": "c1", "status": "ended", "duration": 95})

    assert summarizer.calls == []
    assert result.summary_source == "fallback"
    assert result.summary_generated is False
    assert result.email_sent is True
    assert "Call ended with no transcript available. Duration: 2 minutes." in email_sender.sent[0].text


@pytest.mark.asyncio
async def test_summarizer_failure_propagates(use_case, summarizer, email_sender) -> None:
    summarizer.error = UpstreamError("Failed to summarize transcript")

    with pytest.raises(UpstreamError, match="Failed to summarize transcript"):
        await use_case.execute(completed_flat_payload())

    assert email_sender.sent == []


@pytest.mark.asyncio
async def test_email_failure_propagates(use_case, email_sender) -> None:
    email_sender.error = UpstreamError("Failed to send email")

    with pytest.raises(UpstreamError, match="Failed to send email"):
        await use_case.execute(completed_flat_payload())


@pytest.mark.asyncio
async def test_threshold_comes_from_constructor(summarizer, email_sender) -> None:
    use_case = ProcessCallWebhookUseCase(
        summarizer=summarizer,
        email_sender=email_sender,
        assistant_name="Priya",
        completion_threshold_seconds=120,
    )

    result = await use_case.execute({"id": "c1", "status": "in-progress", "duration": 90})

    assert result.message == "awaiting completion"
    assert email_sender.sent == []
