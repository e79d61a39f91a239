"""Registro de autorização de calendário de um principal.

Persistido como objeto JSON com chaves camelCase:
`{userId, refreshToken, accessToken?, expiryDate?}`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TokenRecord(BaseModel):
    """Refresh token (e opcionalmente o último access token) de um principal."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    principal_id: str = Field(..., alias="userId", min_length=1)
    refresh_token: str = Field(..., alias="refreshToken", min_length=1)
    access_token: str | None = Field(default=None, alias="accessToken")
    expiry_date: int | None = Field(
        default=None,
        alias="expiryDate",
        description="Expiração do access token em epoch millis.",
    )

    def to_storage(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["TokenRecord"]
