"""Use case: processar webhook de chamada do Vapi.

Fluxo: normaliza -> escolhe a origem do resumo -> monta email -> envia.
Entregas ignoradas pelo normalizer não tocam resumidor nem email.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from api.normalizers.vapi import (
    DEFAULT_COMPLETION_THRESHOLD_SECONDS,
    SkippedDelivery,
    normalize,
)
from app.services.call_summary_email import build_call_summary_email, format_duration
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.call_event import CallEvent
    from app.protocols import CallSummarizerProtocol, EmailSenderProtocol

logger = logging.getLogger(__name__)

SummarySource = Literal["vendor", "generated", "fallback"]

PROCESSED_MESSAGE = "Webhook processed successfully by {assistant}"


@dataclass(frozen=True, slots=True)
class CallWebhookResult:
    """Resultado do processamento de uma entrega do webhook."""

    success: bool
    message: str
    call_id: str
    summary_generated: bool = False
    summary_source: SummarySource | None = None
    email_sent: bool = False
    assistant: str | None = None

    def to_response(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "success": self.success,
            "message": self.message,
            "callId": self.call_id,
        }
        if self.summary_source is None:
            return body
        body.update(
            summaryGenerated=self.summary_generated,
            summarySource=self.summary_source,
            emailSent=self.email_sent,
            assistant=self.assistant,
        )
        return body


def build_fallback_summary(event: CallEvent) -> str:
    """Resumo sintético quando não há resumo do vendor nem transcrição."""
    status = event.vendor_status or event.status
    return (
        f"Call {status} with no transcript available. "
        f"Duration: {format_duration(event.duration_seconds)}."
    )


class ProcessCallWebhookUseCase:
    """Processa um payload do webhook até o envio do email."""

    def __init__(
        self,
        *,
        summarizer: CallSummarizerProtocol,
        email_sender: EmailSenderProtocol,
        assistant_name: str,
        completion_threshold_seconds: float = DEFAULT_COMPLETION_THRESHOLD_SECONDS,
    ) -> None:
        self._summarizer = summarizer
        self._email_sender = email_sender
        self._assistant_name = assistant_name
        self._threshold = completion_threshold_seconds

    async def execute(self, payload: dict[str, Any]) -> CallWebhookResult:
        """Executa o fluxo.

        Raises:
            UpstreamError: falha do resumidor ou do transporte de email
        """
        outcome = normalize(
            payload,
            assistant_name=self._assistant_name,
            completion_threshold_seconds=self._threshold,
        )
        if isinstance(outcome, SkippedDelivery):
            logger.info(
                "vapi_delivery_skipped",
                extra={"call_id": outcome.call_id, "reason": outcome.reason},
            )
            return CallWebhookResult(success=True, message=outcome.reason, call_id=outcome.call_id)

        event = outcome
        logger.info(
            "vapi_call_received",
            extra={
                "call_id": event.id,
                "call_status": event.status,
                "has_transcript": event.transcript is not None,
                "has_summary": event.summary is not None,
            },
        )

        summary, source = await self._resolve_summary(event)
        logger.info("vapi_summary_resolved", extra={"call_id": event.id, "summary_source": source})

        content = build_call_summary_email(event, summary, self._assistant_name)
        dispatch = await self._email_sender.send(content)
        logger.info(
            "vapi_summary_email_sent",
            extra={"call_id": event.id, "message_id": dispatch.message_id},
        )

        return CallWebhookResult(
            success=True,
            message=PROCESSED_MESSAGE.format(assistant=self._assistant_name),
            call_id=event.id,
            summary_generated=source == "generated",
            summary_source=source,
            email_sent=True,
            assistant=self._assistant_name,
        )

    async def _resolve_summary(self, event: CallEvent) -> tuple[str, SummarySource]:
        if event.summary:
            return event.summary, "vendor"
        if event.transcript:
            summary = await self._summarizer.summarize(event.transcript, event.caller.describe())
            return summary, "generated"
        log_fallback(logger, "call_summary", reason="no_transcript")
        return build_fallback_summary(event), "fallback"
