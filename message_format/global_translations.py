"""Process-wide translation helpers backed by one shared handler.

``init`` (or ``init_files``) must run before any ``translate`` call; ``reset``
drops the shared handler, its tables and its default replacements.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Iterable, Mapping

from message_format.locales import LanguageSelector
from message_format.translations import LanguageSource, TranslationHandler

_lock = threading.Lock()
_handler: TranslationHandler | None = None


def get_translation_handler() -> TranslationHandler:
    """Return the shared handler, creating an uninitialized one on first use."""

    global _handler
    if _handler is None:
        with _lock:
            if _handler is None:
                _handler = TranslationHandler()
    return _handler


def reset() -> None:
    global _handler
    with _lock:
        _handler = None


def init(
    sources: Iterable[LanguageSource],
    *,
    default_replacements: Mapping[str, Any] | None = None,
) -> None:
    get_translation_handler().init(sources, default_replacements=default_replacements)


def init_files(*paths: str | Path, default_replacements: Mapping[str, Any] | None = None) -> None:
    get_translation_handler().init_files(*paths, default_replacements=default_replacements)


def get_translations() -> Mapping[str, Mapping[str, str]]:
    return get_translation_handler().translations


def get_fallback() -> Mapping[str, str] | None:
    return get_translation_handler().fallback


def get_default_replacements() -> dict[str, Any]:
    return get_translation_handler().default_replacements


def add_default_replacements(replacements: Mapping[str, Any] | None) -> None:
    get_translation_handler().placeholder_handler.add_default_replacements(replacements)


def set_default_replacements(replacements: Mapping[str, Any] | None) -> None:
    get_translation_handler().placeholder_handler.set_default_replacements(replacements)


def fast_format(template: str, values: Mapping[str, Any] | None = None) -> str:
    return get_translation_handler().placeholder_handler.fast_format(template, values)


def resolve(
    key: str,
    language: LanguageSelector | None = None,
    replacements: Mapping[str, Any] | None = None,
) -> str:
    return get_translation_handler().resolve(key, language, replacements)


def translate(key: str, *args: Any) -> str:
    return get_translation_handler().translate(key, *args)


def translate_for(language: LanguageSelector | None, key: str, *args: Any) -> str:
    return get_translation_handler().translate_for(language, key, *args)


def translate_values(
    key: str,
    values: Mapping[str, Any] | None = None,
    *,
    language: LanguageSelector | None = None,
    args: Iterable[Any] = (),
) -> str:
    return get_translation_handler().translate_values(key, values, language=language, args=args)


__all__ = [
    "add_default_replacements",
    "fast_format",
    "get_default_replacements",
    "get_fallback",
    "get_translation_handler",
    "get_translations",
    "init",
    "init_files",
    "reset",
    "resolve",
    "set_default_replacements",
    "translate",
    "translate_for",
    "translate_values",
]
