"""Conteúdo do email de resumo de chamada (HTML e texto puro).

Todo valor vindo do vendor ou do modelo é escapado antes de entrar no HTML.
"""

from __future__ import annotations

from datetime import datetime, timezone
from html import escape
from typing import TYPE_CHECKING

from app.protocols.email_sender import EmailContent

if TYPE_CHECKING:
    from app.domain.call_event import CallEvent

UNKNOWN_VALUE = "Unknown"
UNKNOWN_CALLER_SUBJECT = "Unknown Caller"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


def format_duration(seconds: float | None) -> str:
    """Minutos arredondados (meio para cima) ou "Unknown"."""
    if seconds is None:
        return UNKNOWN_VALUE
    minutes = int(seconds / 60 + 0.5)
    return f"{minutes} minutes"


def format_cost(cost: float | None) -> str:
    if cost is None:
        return UNKNOWN_VALUE
    return f"${cost:.4f}"


def format_call_date(created_at: str | None, now: datetime | None = None) -> str:
    """Data da chamada; sem created_at usa o instante atual, texto inválido passa cru."""
    if not created_at:
        return (now or datetime.now(timezone.utc)).strftime(_DATE_FORMAT)
    try:
        parsed = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    except ValueError:
        return created_at
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.strftime(_DATE_FORMAT)


def subject_caller(event: CallEvent) -> str:
    if event.caller.has_known_name:
        return str(event.caller.name)
    return event.caller.number or UNKNOWN_CALLER_SUBJECT


def display_status(event: CallEvent) -> str:
    return event.vendor_status or event.status


def build_call_summary_email(
    event: CallEvent,
    summary: str,
    assistant_name: str,
    *,
    now: datetime | None = None,
) -> EmailContent:
    """Monta assunto, HTML e texto do resumo da chamada."""
    generated_at = (now or datetime.now(timezone.utc)).strftime(_DATE_FORMAT)
    caller_line = f"{event.caller.name or UNKNOWN_VALUE} ({event.caller.number or 'No number'})"
    details = [
        ("Call ID", event.id),
        ("Caller", caller_line),
        ("Date & Time", format_call_date(event.created_at, now)),
        ("Duration", format_duration(event.duration_seconds)),
        ("Cost", format_cost(event.cost)),
        ("Status", display_status(event)),
    ]
    if event.ended_reason:
        details.append(("Ended Reason", event.ended_reason))
    if event.recording_url:
        details.append(("Recording", event.recording_url))

    subject = f"📞 Call Summary from {assistant_name} - {subject_caller(event)}"
    html = _render_html(assistant_name, details, summary, event.transcript, event.id, generated_at)
    text = _render_text(assistant_name, details, summary, event.transcript, event.id, generated_at)
    return EmailContent(subject=subject, html=html, text=text)


def _render_html(
    assistant_name: str,
    details: list[tuple[str, str]],
    summary: str,
    transcript: str | None,
    call_id: str,
    generated_at: str,
) -> str:
    rows = "\n".join(
        "<tr>"
        f'<td style="padding: 8px 0; font-weight: bold; color: #555; width: 120px;">{escape(label)}:</td>'
        f'<td style="padding: 8px 0; color: #333;">{escape(value)}</td>'
        "</tr>"
        for label, value in details
    )
    summary_html = escape(summary).replace("\n", "<br>")
    transcript_html = ""
    if transcript:
        transcript_html = (
            '<div style="background-color: #f8f9fa; padding: 20px; border-radius: 8px; margin-bottom: 25px;">'
            '<h3 style="color: #374151; margin-top: 0;">📝 Full Conversation</h3>'
            '<pre style="margin: 0; white-space: pre-wrap; font-family: monospace; font-size: 12px;">'
            f"{escape(transcript)}</pre></div>"
        )
    name = escape(assistant_name)
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">'
        f'<h1 style="color: #6366f1; text-align: center;">🤖 {name}</h1>'
        '<p style="color: #6b7280; text-align: center;">Your Personal AI Assistant</p>'
        '<h2 style="font-size: 20px;">📞 Call Summary Report</h2>'
        '<div style="background-color: #f8f9fa; padding: 20px; border-radius: 8px; margin-bottom: 25px;">'
        '<h3 style="color: #374151; margin-top: 0;">Call Details</h3>'
        f'<table style="width: 100%; border-collapse: collapse;">{rows}</table></div>'
        '<div style="padding: 20px; border-radius: 8px; margin-bottom: 25px;">'
        '<h3 style="margin-top: 0; font-size: 18px;">🤖 AI Summary</h3>'
        f'<p style="line-height: 1.6; margin: 0; font-size: 14px;">{summary_html}</p></div>'
        f"{transcript_html}"
        '<p style="color: #6b7280; font-size: 12px; text-align: center;">'
        f"This summary was automatically generated by {name}, your personal AI assistant.<br>"
        f"Call ID: {escape(call_id)} | Generated at: {escape(generated_at)}</p>"
        "</div>"
    )


def _render_text(
    assistant_name: str,
    details: list[tuple[str, str]],
    summary: str,
    transcript: str | None,
    call_id: str,
    generated_at: str,
) -> str:
    lines = [
        f"🤖 {assistant_name} - Your Personal AI Assistant",
        "📞 Call Summary Report",
        "",
        "Call Details:",
        *(f"- {label}: {value}" for label, value in details),
        "",
        "🤖 AI Summary:",
        summary,
    ]
    if transcript:
        lines += ["", "📝 Full Conversation:", transcript]
    lines += [
        "",
        "---",
        f"This summary was automatically generated by {assistant_name}, your personal AI assistant.",
        f"Call ID: {call_id} | Generated at: {generated_at}",
    ]
    return "\n".join(lines)


__all__ = [
    "EmailContent",
    "build_call_summary_email",
    "format_call_date",
    "format_cost",
    "format_duration",
]
