"""Key based translation lookup with locale fallback."""

from __future__ import annotations

import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from message_format.config import MessageFormatSettings, get_settings
from message_format.exceptions import TranslationsNotInitialized
from message_format.loader import iter_language_files
from message_format.locales import LanguageSelector, Locale, default_language
from message_format.logging import logger
from message_format.placeholders import MessagePlaceholderHandler, fast_format, merge_replacements

LanguageSource = tuple[str, Mapping[str, str]]


class TranslationHandler:
    """Resolve message keys against per-language tables.

    Tables are registered with :meth:`init`; every lookup falls back to the
    fallback table when the requested language is unknown and echoes the key
    itself when the key is missing. Default replacements live on the attached
    :class:`MessagePlaceholderHandler` and win over per-call arguments.
    """

    def __init__(
        self,
        sources: Iterable[LanguageSource] | None = None,
        *,
        default_replacements: Mapping[str, Any] | None = None,
        placeholder_handler: MessagePlaceholderHandler | None = None,
        settings: MessageFormatSettings | None = None,
    ) -> None:
        self.placeholder_handler = placeholder_handler or MessagePlaceholderHandler()
        self.settings = settings or get_settings()
        self._lock = threading.Lock()
        # (registry, fallback) swapped as one value so readers never mix two inits
        self._state: tuple[Mapping[str, Mapping[str, str]], Mapping[str, str] | None] = (
            MappingProxyType({}),
            None,
        )
        if sources is not None:
            self.init(sources, default_replacements=default_replacements)
        else:
            self.placeholder_handler.add_default_replacements(default_replacements)

    @classmethod
    def from_files(
        cls,
        *paths: str | Path,
        default_replacements: Mapping[str, Any] | None = None,
        settings: MessageFormatSettings | None = None,
    ) -> "TranslationHandler":
        handler = cls(settings=settings)
        handler.init_files(*paths, default_replacements=default_replacements)
        return handler

    @property
    def translations(self) -> Mapping[str, Mapping[str, str]]:
        return self._state[0]

    @property
    def fallback(self) -> Mapping[str, str] | None:
        return self._state[1]

    @property
    def languages(self) -> list[str]:
        return list(self._state[0])

    @property
    def initialized(self) -> bool:
        return self._state[1] is not None

    @property
    def default_replacements(self) -> dict[str, Any]:
        return self.placeholder_handler.default_replacements

    def init(
        self,
        sources: Iterable[LanguageSource],
        *,
        default_replacements: Mapping[str, Any] | None = None,
    ) -> None:
        """Replace the registered tables with ``sources``.

        Tables sharing a language id are merged in order. The fallback table is
        the one matching the default language, else the first one loaded.
        """

        tables: dict[str, dict[str, str]] = {}
        for language, table in sources:
            tables.setdefault(str(language), {}).update(table)

        self.placeholder_handler.add_default_replacements(default_replacements)

        registry = MappingProxyType({lang: MappingProxyType(table) for lang, table in tables.items()})
        preferred = default_language(self.settings)
        if preferred in registry:
            fallback = registry[preferred]
            fallback_language = preferred
        elif registry:
            fallback_language = next(iter(registry))
            fallback = registry[fallback_language]
        else:
            fallback_language = None
            fallback = MappingProxyType({})

        with self._lock:
            self._state = (registry, fallback)
        logger.info(
            "translations_initialized",
            languages=list(registry),
            fallback=fallback_language,
        )

    def init_files(self, *paths: str | Path, default_replacements: Mapping[str, Any] | None = None) -> None:
        self.init(iter_language_files(paths, self.settings), default_replacements=default_replacements)

    def has_language(self, language: LanguageSelector) -> bool:
        return self._select(self._state[0], language) is not None

    def resolve(
        self,
        key: str,
        language: LanguageSelector | None = None,
        replacements: Mapping[str, Any] | None = None,
    ) -> str:
        """Translate ``key`` using an already merged replacement mapping."""

        registry, fallback = self._state
        if fallback is None:
            raise TranslationsNotInitialized(
                f"Cannot translate {key!r}: no language tables have been initialized."
            )
        table = fallback
        if language is not None:
            selected = self._select(registry, language)
            if selected is None:
                logger.debug("language_fallback", language=str(language), key=key)
            else:
                table = selected
        return fast_format(table.get(key, key), replacements)

    def translate(self, key: str, *args: Any) -> str:
        return self.resolve(key, None, self._replacements(args))

    def translate_for(self, language: LanguageSelector | None, key: str, *args: Any) -> str:
        return self.resolve(key, language, self._replacements(args))

    def translate_values(
        self,
        key: str,
        values: Mapping[str, Any] | None = None,
        *,
        language: LanguageSelector | None = None,
        args: Iterable[Any] = (),
    ) -> str:
        return self.resolve(key, language, self._replacements(tuple(args), values))

    def _replacements(self, args: tuple[Any, ...], values: Mapping[str, Any] | None = None) -> dict[str, Any]:
        positional = {str(index): arg for index, arg in enumerate(args)}
        return merge_replacements(self.placeholder_handler.default_replacements, positional, values)

    @staticmethod
    def _select(
        registry: Mapping[str, Mapping[str, str]],
        language: LanguageSelector,
    ) -> Mapping[str, str] | None:
        candidates = language.candidates() if isinstance(language, Locale) else (language,)
        for candidate in candidates:
            table = registry.get(candidate)
            if table is not None:
                return table
        return None


__all__ = ["LanguageSource", "TranslationHandler"]
