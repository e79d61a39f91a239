"""Testes do TokenLifecycleManager."""

from __future__ import annotations

import pytest
from google.oauth2.credentials import Credentials

from app.infra.stores import MemoryTokenStore
from app.protocols.oauth_client import OAuthTokens
from app.services.token_lifecycle import TokenLifecycleManager, get_active_credentials
from tests.fakes.fake_call_collaborators import FakeOAuthClient
from utils.errors import AuthError


@pytest.fixture
def store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def oauth_client() -> FakeOAuthClient:
    return FakeOAuthClient()


@pytest.fixture
def manager(oauth_client: FakeOAuthClient, store: MemoryTokenStore) -> TokenLifecycleManager:
    return TokenLifecycleManager(oauth_client=oauth_client, token_store=store)


def test_build_authorization_url_delegates(manager: TokenLifecycleManager) -> None:
    assert manager.build_authorization_url().startswith("https://accounts.google.com/")


@pytest.mark.asyncio
async def test_exchange_code_returns_tokens(manager, oauth_client) -> None:
    tokens = await manager.exchange_code("code-1")

    assert tokens == OAuthTokens(access_token="access-1", refresh_token="refresh-1", expiry_date=1_710_000_000_000)
    assert oauth_client.codes == ["code-1"]


@pytest.mark.asyncio
async def test_exchange_code_propagates_auth_error(manager, oauth_client) -> None:
    oauth_client.error = AuthError("No refresh token received")

    with pytest.raises(AuthError, match="No refresh token received"):
        await manager.exchange_code("code-1")


@pytest.mark.asyncio
async def test_store_token_twice_keeps_one_record_with_latest(manager, store) -> None:
    await manager.store_token("demo-user", "refresh-old")
    await manager.store_token("demo-user", "refresh-new", access_token="a2", expiry_date=5)

    record = await store.get("demo-user")
    assert len(store) == 1
    assert record.refresh_token == "refresh-new"
    assert record.access_token == "a2"
    assert record.expiry_date == 5


@pytest.mark.asyncio
async def test_activate_unknown_principal_returns_false(manager) -> None:
    activated = await manager.activate_credentials("nobody")
    credentials = get_active_credentials()

    assert activated is False
    assert credentials is None


@pytest.mark.asyncio
async def test_activate_builds_credentials_from_refresh_token(manager) -> None:
    await manager.store_token("demo-user", "refresh-xyz")

    activated = await manager.activate_credentials("demo-user")
    credentials = get_active_credentials()

    assert activated is True
    assert isinstance(credentials, Credentials)
    assert credentials.refresh_token == "refresh-xyz"
    assert credentials.client_id == "client-id"
    assert credentials.token_uri == "https://oauth2.googleapis.com/token"
    assert credentials.token is None
