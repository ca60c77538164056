"""Read language tables from ``.properties`` and ``.json`` files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Iterator

from message_format.config import MessageFormatSettings, get_settings
from message_format.exceptions import LanguageFileError
from message_format.logging import logger

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SEPARATORS = "=:"
_WHITESPACE = " \t\f"


def _logical_lines(text: str) -> Iterator[str]:
    """Yield property lines with comments dropped and continuations joined."""

    buffer: list[str] = []
    for raw in text.splitlines():
        line = raw.lstrip(_WHITESPACE)
        if not buffer and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            buffer.append(line[:-1])
            continue
        buffer.append(line)
        yield "".join(buffer)
        buffer = []
    if buffer:
        yield "".join(buffer)


def _unescape(text: str) -> str:
    out: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char != "\\" or index + 1 >= len(text):
            out.append(char)
            index += 1
            continue
        nxt = text[index + 1]
        if nxt == "u":
            digits = text[index + 2:index + 6]
            if len(digits) < 4 or not all(c in "0123456789abcdefABCDEF" for c in digits):
                raise ValueError(f"Malformed \\uXXXX escape: \\u{digits}")
            out.append(chr(int(digits, 16)))
            index += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        index += 2
    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(key), _unescape(rest)


def strip_quotes(value: str) -> str:
    """Values written as ``'text'`` lose every single quote."""

    if value.startswith("'"):
        return value.replace("'", "")
    return value


def parse_properties(text: str) -> dict[str, str]:
    table: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        table[key] = strip_quotes(value)
    return table


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    table: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            table.update(_flatten(value, f"{full_key}."))
        elif isinstance(value, str):
            table[full_key] = value
        else:
            table[full_key] = json.dumps(value, ensure_ascii=False)
    return table


def parse_json(text: str) -> dict[str, str]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("top-level JSON value must be an object")
    return _flatten(data)


def load_language_file(path: str | Path, *, encoding: str = "utf-8") -> dict[str, str]:
    """Load one language file into a key -> template table."""

    file_path = Path(path)
    try:
        text = file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise LanguageFileError(file_path, str(exc)) from exc
    try:
        if file_path.suffix.lower() == ".json":
            return parse_json(text)
        return parse_properties(text)
    except ValueError as exc:
        raise LanguageFileError(file_path, str(exc)) from exc


def _expand(paths: Iterable[str | Path]) -> Iterator[Path]:
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            try:
                children = sorted(child for child in path.iterdir() if child.is_file())
            except OSError as exc:
                logger.warning("language_file_load_failed", path=str(path), error=str(exc))
                continue
            yield from children
        else:
            yield path


def iter_language_files(
    paths: Iterable[str | Path],
    settings: MessageFormatSettings | None = None,
) -> Iterator[tuple[str, dict[str, str]]]:
    """Yield ``(language id, table)`` for every loadable file in ``paths``.

    Directories contribute their direct children. The language id is the file
    stem. Broken files are logged and skipped.
    """

    settings = settings or get_settings()
    suffixes = {suffix.lower() for suffix in settings.language_file_suffixes}
    for path in _expand(paths):
        if settings.skip_marker and settings.skip_marker in path.name:
            logger.debug("language_file_skipped", path=str(path), reason="skip_marker")
            continue
        if path.suffix.lower() not in suffixes:
            logger.debug("language_file_skipped", path=str(path), reason="suffix")
            continue
        try:
            table = load_language_file(path, encoding=settings.file_encoding)
        except LanguageFileError as exc:
            logger.warning("language_file_load_failed", path=str(path), error=exc.reason)
            continue
        logger.debug("language_file_loaded", path=str(path), language=path.stem, keys=len(table))
        yield path.stem, table


__all__ = [
    "iter_language_files",
    "load_language_file",
    "parse_json",
    "parse_properties",
    "strip_quotes",
]
