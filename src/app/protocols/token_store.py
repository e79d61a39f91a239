"""Repositório de refresh tokens por principal.

A interface é propositalmente mínima (get/upsert) para que a
implementação possa trocar o read-modify-write do arquivo JSON por uma
atualização atômica sem mudar quem a usa.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.token_record import TokenRecord


@runtime_checkable
class TokenStoreProtocol(Protocol):
    """Contrato de persistência de TokenRecord (no máximo um por principal)."""

    async def get(self, principal_id: str) -> TokenRecord | None:
        """Retorna o registro do principal ou None."""
        ...

    async def upsert(self, record: TokenRecord) -> None:
        """Insere ou substitui o registro do principal."""
        ...
