"""Testes do extractor de payloads Vapi."""

from __future__ import annotations

from api.normalizers.vapi.extractor import (
    TranscriptTurn,
    classify_payload,
    extract_working_record,
    reconstruct_transcript,
)
from tests.fakes.payloads import completed_flat_payload, end_of_call_envelope


def test_classify_payload_shapes() -> None:
    assert classify_payload({"message": {"type": "status-update"}}) == "message_envelope"
    assert classify_payload({"call": {"id": "c1"}}) == "nested_call"
    assert classify_payload({"id": "c1", "status": "completed"}) == "flat"


def test_message_that_is_not_object_is_not_an_envelope() -> None:
    assert classify_payload({"message": "hello", "id": "c1"}) == "flat"


def test_extract_flat_payload() -> None:
    record = extract_working_record(completed_flat_payload())

    assert record.shape == "flat"
    assert record.call_id == "call_123456789"
    assert record.call_status == "completed"
    assert record.duration == 180.0
    assert record.caller_name == "John Doe"
    assert record.caller_number == "+1234567890"
    assert record.cost == 0.15
    assert record.created_at == "2024-03-19T10:30:00Z"


def test_extract_envelope_prefers_nested_call_fields() -> None:
    record = extract_working_record(end_of_call_envelope())

    assert record.shape == "message_envelope"
    assert record.call_id == "call_env_1"
    assert record.call_status == "ended"
    assert record.ended_reason == "customer-ended-call"
    assert record.duration == 42.5
    assert record.customer_number == "+15550001111"
    assert record.recording_url == "https://storage.vapi.ai/rec.wav"
    assert record.created_at == "2024-03-20T09:00:00Z"
    assert len(record.turns) == 3


def test_nested_call_status_wins_over_top_level_status() -> None:
    record = extract_working_record({"status": "queued", "call": {"status": "ended", "id": "c9"}, "id": "top"})

    assert record.call_status == "ended"
    assert record.call_id == "c9"


def test_duration_seconds_wins_over_duration() -> None:
    record = extract_working_record({"durationSeconds": 12, "duration": 99})
    assert record.duration == 12.0


def test_duration_ms_is_kept_apart() -> None:
    record = extract_working_record({"durationMs": 45000})
    assert record.duration is None
    assert record.duration_ms == 45000.0


def test_non_numeric_values_are_ignored() -> None:
    record = extract_working_record({"duration": "180", "cost": True})
    assert record.duration is None
    assert record.cost is None


def test_malformed_turns_are_dropped() -> None:
    record = extract_working_record(
        {"messages": [{"role": "user"}, "oops", {"role": "bot", "message": "Hi"}]}
    )
    assert record.turns == (TranscriptTurn(role="bot", message="Hi"),)


def test_reconstruct_transcript_labels_roles() -> None:
    turns = (
        TranscriptTurn(role="user", message="Hi"),
        TranscriptTurn(role="bot", message="Hello"),
    )
    assert reconstruct_transcript(turns, "Priya") == "Caller: Hi\nPriya: Hello"


def test_reconstruct_transcript_skips_other_roles() -> None:
    turns = (
        TranscriptTurn(role="system", message="prompt"),
        TranscriptTurn(role="tool_calls", message="{}"),
    )
    assert reconstruct_transcript(turns, "Priya") is None
