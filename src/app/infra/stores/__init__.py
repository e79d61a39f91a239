"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - json_token_store: refresh tokens em arquivo JSON
    - memory_token_store: refresh tokens em memória (dev/test)
"""

from __future__ import annotations

from app.infra.stores.json_token_store import JsonFileTokenStore
from app.infra.stores.memory_token_store import MemoryTokenStore

__all__ = [
    "JsonFileTokenStore",
    "MemoryTokenStore",
]
