"""Locale value type and runtime default language detection."""

from __future__ import annotations

import locale as _locale
import os
import re
from dataclasses import dataclass
from typing import Union

from message_format.config import MessageFormatSettings, get_settings

_TAG_SPLIT_RE = re.compile(r"[-_]")


@dataclass(frozen=True)
class Locale:
    """A language with an optional region, e.g. ``Locale("en", "US")``.

    Tables are matched against the full tag first (``en_US``) and then against
    the bare language (``en``).
    """

    language: str
    region: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "region", self.region.upper())

    @classmethod
    def parse(cls, tag: str) -> "Locale":
        # "en-US.UTF-8@euro" -> en / US
        code = tag.split(".", 1)[0].split("@", 1)[0].strip()
        parts = [part for part in _TAG_SPLIT_RE.split(code) if part]
        if not parts:
            raise ValueError(f"Invalid locale tag: {tag!r}")
        return cls(parts[0], parts[1] if len(parts) > 1 else "")

    @property
    def tag(self) -> str:
        return f"{self.language}_{self.region}" if self.region else self.language

    def candidates(self) -> tuple[str, ...]:
        if self.region:
            return (self.tag, self.language)
        return (self.language,)

    def __str__(self) -> str:
        return self.tag


LanguageSelector = Union[str, Locale]


def _system_locale_tag() -> str | None:
    try:
        tag = _locale.getlocale()[0]
    except ValueError:
        tag = None
    if tag and tag not in ("C", "POSIX"):
        return tag
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX") and not value.startswith("C."):
            return value
    return None


def default_language(settings: MessageFormatSettings | None = None) -> str | None:
    """Return the language id used to pick the fallback table.

    The configured ``default_language`` wins; otherwise the language subtag of
    the process locale is used. ``None`` when neither is available.
    """

    settings = settings or get_settings()
    if settings.default_language:
        return settings.default_language
    tag = _system_locale_tag()
    if not tag:
        return None
    try:
        return Locale.parse(tag).language
    except ValueError:
        return None


__all__ = ["Locale", "LanguageSelector", "default_language"]
