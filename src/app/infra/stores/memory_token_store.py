"""Store de refresh tokens em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Sem persistência entre reinícios.
"""

from __future__ import annotations

from app.domain.token_record import TokenRecord


class MemoryTokenStore:
    """TokenStoreProtocol em dicionário."""

    def __init__(self, records: list[TokenRecord] | None = None) -> None:
        self._records: dict[str, TokenRecord] = {}
        for record in records or []:
            self._records[record.principal_id] = record

    async def get(self, principal_id: str) -> TokenRecord | None:
        return self._records.get(principal_id)

    async def upsert(self, record: TokenRecord) -> None:
        self._records[record.principal_id] = record

    def __len__(self) -> int:
        return len(self._records)
