"""Shared pytest fixtures for translation tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from message_format import global_translations
from message_format.config import MessageFormatSettings, get_settings

LANG_PROPERTIES = """\
# Test language file
greeting=${prefix} Hello, ${0}!
iterator=${prefix} Current Iteration Index ${0}.
farewell = 'Goodbye, ${0}'
"""


@pytest.fixture(autouse=True)
def _reset_shared_state():
    get_settings.cache_clear()
    global_translations.reset()
    yield
    global_translations.reset()
    get_settings.cache_clear()


@pytest.fixture
def settings() -> MessageFormatSettings:
    return MessageFormatSettings(default_language="en")


@pytest.fixture
def lang_dir(tmp_path: Path) -> Path:
    locale_dir = tmp_path / "lang"
    locale_dir.mkdir()
    (locale_dir / "lang.properties").write_text(LANG_PROPERTIES, encoding="utf-8")
    return locale_dir


@pytest.fixture
def default_replacements() -> dict[str, str]:
    return {"prefix": "[PREFIX]"}
