"""Store de refresh tokens em arquivo JSON (array de TokenRecord).

Cada upsert lê o arquivo inteiro, substitui o registro do principal e
regrava o conjunto. Não há lock: duas autorizações simultâneas podem
perder uma das escritas (a última vence). A gravação usa arquivo
temporário + os.replace, então um leitor nunca vê o arquivo pela metade.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.domain.token_record import TokenRecord

logger = logging.getLogger(__name__)


class JsonFileTokenStore:
    """TokenStoreProtocol persistido em disco."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def get(self, principal_id: str) -> TokenRecord | None:
        records = await asyncio.to_thread(self._read_all)
        for record in records:
            if record.principal_id == principal_id:
                return record
        return None

    async def upsert(self, record: TokenRecord) -> None:
        await asyncio.to_thread(self._upsert_sync, record)

    def _upsert_sync(self, record: TokenRecord) -> None:
        records = [r for r in self._read_all() if r.principal_id != record.principal_id]
        records.append(record)
        self._write_all(records)
        logger.info(
            "token_record_stored",
            extra={"principal_id": record.principal_id, "records": len(records)},
        )

    def _read_all(self) -> list[TokenRecord]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []

        try:
            data: Any = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("token_store_corrupt_file", extra={"path": str(self._path)})
            return []

        if not isinstance(data, list):
            logger.warning("token_store_unexpected_format", extra={"path": str(self._path)})
            return []

        records: list[TokenRecord] = []
        for item in data:
            try:
                records.append(TokenRecord.model_validate(item))
            except PydanticValidationError:
                logger.warning("token_store_invalid_record", extra={"path": str(self._path)})
        return records

    def _write_all(self, records: list[TokenRecord]) -> None:
        directory = self._path.parent
        directory.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([r.to_storage() for r in records], indent=2)
        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
