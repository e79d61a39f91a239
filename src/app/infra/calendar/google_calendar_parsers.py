"""Helpers internos de parsing para respostas da Google Calendar API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from googleapiclient.errors import HttpError


def extract_items(response: Any) -> list[dict[str, Any]]:
    """Lista `items` da resposta de events.list (vazia quando ausente)."""
    items = response.get("items") if isinstance(response, dict) else None
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None
