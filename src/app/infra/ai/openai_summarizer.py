"""Resumidor de chamadas via OpenAI Chat Completions."""

from __future__ import annotations

import logging

from openai import AsyncOpenAI, OpenAIError

from config.settings.ai.openai import OpenAISettings, get_openai_settings
from utils.errors import UpstreamError

logger = logging.getLogger(__name__)

EMPTY_SUMMARY_TEXT = "Unable to generate summary"

_SYSTEM_PROMPT = (
    "You are {assistant}, a helpful personal AI assistant. "
    "You handle calls professionally and provide clear, actionable summaries."
)

_USER_PROMPT = """You are {assistant}, a personal AI assistant. You just handled a phone call and need to provide a clear, concise summary to your human.

Caller Information: {caller_info}

Call Transcript:
{transcript}

Please provide a professional summary that includes:
1. **Main Purpose**: What did the caller want or need?
2. **Key Information**: Important details, dates, times, or requests mentioned
3. **Action Items**: Any tasks, follow-ups, or meetings that need to be scheduled
4. **Next Steps**: What needs to be done next (if anything)

Keep the summary clear, professional, and actionable. Focus on what's most important for your human to know."""


def build_summary_messages(
    *, assistant_name: str, transcript: str, caller_info: str
) -> list[dict[str, str]]:
    """Monta as mensagens system/user do pedido de resumo."""
    return [
        {"role": "system", "content": _SYSTEM_PROMPT.format(assistant=assistant_name)},
        {
            "role": "user",
            "content": _USER_PROMPT.format(
                assistant=assistant_name,
                caller_info=caller_info,
                transcript=transcript,
            ),
        },
    ]


class OpenAICallSummarizer:
    """Implementa CallSummarizerProtocol com a API da OpenAI."""

    __slots__ = ("_assistant_name", "_client", "_settings")

    def __init__(
        self,
        *,
        assistant_name: str,
        settings: OpenAISettings | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._assistant_name = assistant_name
        self._settings = settings or get_openai_settings()
        if client is not None:
            self._client = client
        else:
            self._client = AsyncOpenAI(
                api_key=self._settings.api_key,
                timeout=self._settings.timeout_seconds,
            )

    async def summarize(self, transcript: str, caller_info: str) -> str:
        messages = build_summary_messages(
            assistant_name=self._assistant_name,
            transcript=transcript,
            caller_info=caller_info,
        )
        try:
            completion = await self._client.chat.completions.create(
                model=self._settings.model,
                messages=messages,
                max_tokens=self._settings.max_tokens,
                temperature=self._settings.temperature,
            )
        except OpenAIError as exc:
            logger.warning(
                "openai_summary_failed",
                extra={"model": self._settings.model, "error_type": type(exc).__name__},
            )
            raise UpstreamError("Failed to summarize transcript") from exc

        content = None
        if completion.choices:
            content = completion.choices[0].message.content
        if not content:
            logger.warning("openai_empty_response", extra={"model": self._settings.model})
            return EMPTY_SUMMARY_TEXT

        usage = getattr(completion, "usage", None)
        logger.debug(
            "openai_summary_success",
            extra={
                "model": self._settings.model,
                "tokens_used": getattr(usage, "total_tokens", None),
            },
        )
        return content
