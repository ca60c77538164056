"""Placeholder substitution for ``${name}`` style templates."""

from __future__ import annotations

import re
import threading
from typing import Any, Mapping

from message_format.logging import logger

PLACEHOLDER_RE = re.compile(r"\$\{(\w+)\}", re.ASCII)
NULL_TEXT = "null"


def render_value(value: Any) -> str:
    """Render a replacement value the way it appears in formatted text."""

    if value is None:
        return NULL_TEXT
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


def fast_format(template: str, values: Mapping[str, Any] | None = None) -> str:
    """Substitute every ``${name}`` token in ``template`` with ``values[name]``.

    Keys are compared as strings, so ``{0: "x"}`` fills ``${0}``. Missing
    names render as ``null``. Text that is not exactly ``${word}`` is
    copied through unchanged, so malformed templates never raise.
    """

    values = merge_replacements(values)
    resolved: dict[str, str] = {}
    parts: list[str] = []
    position = 0
    for match in PLACEHOLDER_RE.finditer(template):
        name = match.group(1)
        if name not in resolved:
            resolved[name] = render_value(values.get(name))
        parts.append(template[position:match.start()])
        parts.append(resolved[name])
        position = match.end()
    if not parts:
        return template
    parts.append(template[position:])
    return "".join(parts)


def merge_replacements(*layers: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge mappings so that the first layer defining a key wins."""

    merged: dict[str, Any] = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            merged.setdefault(str(key), value)
    return merged


class MessagePlaceholderHandler:
    """Holds default replacements and formats templates with them applied."""

    def __init__(self, default_replacements: Mapping[str, Any] | None = None) -> None:
        self._lock = threading.Lock()
        self._defaults: dict[str, Any] = dict(default_replacements or {})

    @property
    def default_replacements(self) -> dict[str, Any]:
        return dict(self._defaults)

    def add_default_replacements(self, replacements: Mapping[str, Any] | None) -> None:
        if not replacements:
            return
        with self._lock:
            updated = dict(self._defaults)
            updated.update(replacements)
            self._defaults = updated
        logger.debug("default_replacements_updated", mode="add", keys=list(replacements))

    def set_default_replacements(self, replacements: Mapping[str, Any] | None) -> None:
        with self._lock:
            self._defaults = dict(replacements or {})
        logger.debug("default_replacements_updated", mode="set", keys=list(self._defaults))

    def fast_format(self, template: str, values: Mapping[str, Any] | None = None) -> str:
        """Format ``template``; default replacements take precedence over ``values``."""

        return fast_format(template, merge_replacements(self._defaults, values))


__all__ = [
    "MessagePlaceholderHandler",
    "NULL_TEXT",
    "PLACEHOLDER_RE",
    "fast_format",
    "merge_replacements",
    "render_value",
]
