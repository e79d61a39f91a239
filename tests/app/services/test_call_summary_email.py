"""Testes do conteúdo do email de resumo."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from app.domain.call_event import CallerInfo, CallEvent
from app.services.call_summary_email import (
    build_call_summary_email,
    format_call_date,
    format_cost,
    format_duration,
)

NOW = datetime(2024, 3, 19, 12, 0, 0, tzinfo=UTC)


def _event(**overrides) -> CallEvent:
    data = {
        "id": "call_123456789",
        "status": "completed",
        "vendor_status": "completed",
        "is_complete": True,
        "caller": CallerInfo(name="John Doe", number="+1234567890"),
        "transcript": "User: Hi\nPriya: Hello",
        "duration_seconds": 180.0,
        "cost": 0.15,
        "created_at": "2024-03-19T10:30:00Z",
    }
    data.update(overrides)
    return CallEvent(**data)


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(None, "Unknown"), (180, "3 minutes"), (90, "2 minutes"), (89, "1 minutes"), (0, "0 minutes")],
)
def test_format_duration(seconds: float | None, expected: str) -> None:
    assert format_duration(seconds) == expected


def test_format_cost() -> None:
    assert format_cost(0.15) == "$0.1500"
    assert format_cost(None) == "Unknown"


def test_format_call_date() -> None:
    assert format_call_date("2024-03-19T10:30:00Z") == "2024-03-19 10:30:00 UTC"
    assert format_call_date("yesterday") == "yesterday"
    assert format_call_date(None, NOW) == "2024-03-19 12:00:00 UTC"


def test_subject_uses_caller_name() -> None:
    content = build_call_summary_email(_event(), "Summary", "Priya", now=NOW)

    assert content.subject == "📞 Call Summary from Priya - John Doe"


def test_subject_falls_back_to_number_then_unknown() -> None:
    by_number = build_call_summary_email(
        _event(caller=CallerInfo(name="Unknown", number="+1555")), "S", "Priya", now=NOW
    )
    anonymous = build_call_summary_email(_event(caller=CallerInfo()), "S", "Priya", now=NOW)

    assert by_number.subject.endswith("- +1555")
    assert anonymous.subject.endswith("- Unknown Caller")


def test_text_body_lists_call_details() -> None:
    content = build_call_summary_email(_event(), "Line one\nLine two", "Priya", now=NOW)

    assert "- Call ID: call_123456789" in content.text
    assert "- Caller: John Doe (+1234567890)" in content.text
    assert "- Date & Time: 2024-03-19 10:30:00 UTC" in content.text
    assert "- Duration: 3 minutes" in content.text
    assert "- Cost: $0.1500" in content.text
    assert "- Status: completed" in content.text
    assert "Line one\nLine two" in content.text
    assert "📝 Full Conversation:\nUser: Hi\nPriya: Hello" in content.text


def test_transcript_section_omitted_without_transcript() -> None:
    content = build_call_summary_email(_event(transcript=None), "S", "Priya", now=NOW)

    assert "Full Conversation" not in content.text
    assert "Full Conversation" not in content.html


def test_html_escapes_vendor_content() -> None:
    event = _event(
        caller=CallerInfo(name="<script>alert(1)</script>", number="+1"),
        transcript="User: <b>bold</b>",
    )

    content = build_call_summary_email(event, "Use <i>care</i>\nnext", "Priya", now=NOW)

    assert "<script>" not in content.html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in content.html
    assert "User: &lt;b&gt;bold&lt;/b&gt;" in content.html
    assert "Use &lt;i&gt;care&lt;/i&gt;<br>next" in content.html
