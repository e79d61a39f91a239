"""Teste E2E: consentimento OAuth seguido de operações de calendário."""

from __future__ import annotations

import httpx
import pytest

from api.routes.auth import router as auth_module
from api.routes.calendar import router as calendar_module
from app.app import app
from app.infra.stores import MemoryTokenStore
from app.services.calendar_operations import CalendarOperations
from app.services.token_lifecycle import TokenLifecycleManager
from tests.fakes.fake_calendar_service import FakeCalendarClient
from tests.fakes.fake_call_collaborators import FakeOAuthClient


@pytest.fixture
def calendar_client(monkeypatch: pytest.MonkeyPatch) -> FakeCalendarClient:
    lifecycle = TokenLifecycleManager(oauth_client=FakeOAuthClient(), token_store=MemoryTokenStore())
    client = FakeCalendarClient()
    operations = CalendarOperations(
        token_lifecycle=lifecycle,
        calendar_client=client,
        default_timezone="America/New_York",
    )
    monkeypatch.setattr(auth_module, "_get_token_lifecycle", lambda: lifecycle)
    monkeypatch.setattr(calendar_module, "_get_calendar_operations", lambda: operations)
    return client


@pytest.mark.asyncio
async def test_consent_then_create_list_delete(calendar_client: FakeCalendarClient) -> None:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        before = await client.get("/calendar/events")
        assert before.status_code == 401

        consent = await client.get("/auth")
        assert consent.json()["authUrl"].startswith("https://accounts.google.com/")

        callback = await client.get("/auth/callback", params={"code": "abc"})
        assert callback.status_code == 307
        assert callback.headers["location"] == "/?success=true"

        created = await client.post(
            "/calendar/events",
            json={
                "summary": "Meeting with John",
                "start": "2024-03-26T14:00:00",
                "end": "2024-03-26T15:00:00",
            },
        )
        assert created.status_code == 200
        event_id = created.json()["event"]["id"]

        listed = await client.get("/calendar/events", params={"maxResults": "5"})
        assert [event["id"] for event in listed.json()["events"]] == [event_id]

        deleted = await client.delete(f"/calendar/events/{event_id}")
        assert deleted.json() == {"success": True, "message": "Event deleted successfully"}

    assert calendar_client.events == {}
    assert calendar_client.credentials_seen[0].refresh_token == "refresh-1"
