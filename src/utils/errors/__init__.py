"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthError,
    MalformedPayloadError,
    NotAuthenticatedError,
    ServiceError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "AuthError",
    "MalformedPayloadError",
    "NotAuthenticatedError",
    "ServiceError",
    "UpstreamError",
    "ValidationError",
]
