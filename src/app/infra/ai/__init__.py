"""Implementações concretas de IO para IA."""

from app.infra.ai.openai_summarizer import OpenAICallSummarizer

__all__ = [
    "OpenAICallSummarizer",
]
