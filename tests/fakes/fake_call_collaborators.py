"""Fakes do resumidor, transporte de email e provedor OAuth."""

from __future__ import annotations

from app.protocols.email_sender import EmailContent, EmailDispatchResult
from app.protocols.oauth_client import OAuthClientConfig, OAuthTokens


class FakeSummarizer:
    def __init__(self, summary: str = "Caller wants to book a meeting.") -> None:
        self.summary = summary
        self.calls: list[tuple[str, str]] = []
        self.error: Exception | None = None

    async def summarize(self, transcript: str, caller_info: str) -> str:
        self.calls.append((transcript, caller_info))
        if self.error is not None:
            raise self.error
        return self.summary


class FakeEmailSender:
    def __init__(self) -> None:
        self.sent: list[EmailContent] = []
        self.error: Exception | None = None

    async def send(self, content: EmailContent) -> EmailDispatchResult:
        if self.error is not None:
            raise self.error
        self.sent.append(content)
        return EmailDispatchResult(message_id=f"msg-{len(self.sent)}", status_code=202)


class FakeOAuthClient:
    def __init__(self, tokens: OAuthTokens | None = None) -> None:
        self.tokens = tokens or OAuthTokens(
            access_token="access-1",
            refresh_token="refresh-1",
            expiry_date=1_710_000_000_000,
        )
        self.codes: list[str] = []
        self.error: Exception | None = None

    @property
    def config(self) -> OAuthClientConfig:
        return OAuthClientConfig(
            client_id="client-id",
            client_secret="client-secret",
            token_uri="https://oauth2.googleapis.com/token",
            scopes=(
                "https://www.googleapis.com/auth/calendar",
                "https://www.googleapis.com/auth/calendar.events",
            ),
        )

    def build_authorization_url(self) -> str:
        return "https://accounts.google.com/o/oauth2/auth?client_id=client-id"

    async def exchange_code(self, code: str) -> OAuthTokens:
        self.codes.append(code)
        if self.error is not None:
            raise self.error
        return self.tokens
