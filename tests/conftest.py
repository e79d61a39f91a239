"""Configuração do pytest para o projeto Priya."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_assistant_settings,
    get_base_settings,
    get_email_settings,
    get_google_calendar_settings,
    get_openai_settings,
)

_SETTINGS_GETTERS = (
    get_assistant_settings,
    get_base_settings,
    get_email_settings,
    get_google_calendar_settings,
    get_openai_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas por processo; cada teste lê o próprio ambiente."""
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
    yield
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
