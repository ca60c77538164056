"""Tests for reading language tables from disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from message_format.config import MessageFormatSettings
from message_format.exceptions import LanguageFileError
from message_format.loader import (
    iter_language_files,
    load_language_file,
    parse_json,
    parse_properties,
    strip_quotes,
)

PROPERTIES = """\
# comment
! another comment

key1 = value one
key2:value two
key3 value three
multi = first \\
        second
tab = a\\tb
uni = caf\\u00e9
quoted = 'It''s here'
apostrophe = it's
escaped\\ key = spaced
path = C:\\\\
empty
"""


def test_parse_properties_handles_java_syntax():
    table = parse_properties(PROPERTIES)
    assert table == {
        "key1": "value one",
        "key2": "value two",
        "key3": "value three",
        "multi": "first second",
        "tab": "a\tb",
        "uni": "café",
        "quoted": "Its here",
        "apostrophe": "it's",
        "escaped key": "spaced",
        "path": "C:\\",
        "empty": "",
    }


def test_parse_properties_keeps_placeholders():
    assert parse_properties("greeting=${prefix} Hello, ${0}!") == {"greeting": "${prefix} Hello, ${0}!"}


def test_strip_quotes_only_applies_to_leading_quote():
    assert strip_quotes("'Hello'") == "Hello"
    assert strip_quotes("Don't") == "Don't"


def test_parse_json_flattens_nested_objects():
    table = parse_json('{"menu": {"open": "Open", "count": 3}, "flag": true, "none": null}')
    assert table == {"menu.open": "Open", "menu.count": "3", "flag": "true", "none": "null"}


def test_parse_json_requires_object():
    with pytest.raises(ValueError):
        parse_json('["a", "b"]')


def test_load_language_file_reports_missing_file(tmp_path: Path):
    with pytest.raises(LanguageFileError) as excinfo:
        load_language_file(tmp_path / "missing.properties")
    assert excinfo.value.path == tmp_path / "missing.properties"


def test_load_language_file_reports_bad_escape(tmp_path: Path):
    path = tmp_path / "bad.properties"
    path.write_text("key=\\u12", encoding="utf-8")
    with pytest.raises(LanguageFileError):
        load_language_file(path)


def test_iter_language_files_filters_and_names_tables(tmp_path: Path):
    (tmp_path / "en_US.properties").write_text("a=1", encoding="utf-8")
    (tmp_path / "de.json").write_text('{"a": "2"}', encoding="utf-8")
    (tmp_path / "platform_en.properties").write_text("a=3", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("a=4", encoding="utf-8")
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "fr.properties").write_text("a=5", encoding="utf-8")

    settings = MessageFormatSettings(default_language="en")
    loaded = list(iter_language_files([tmp_path], settings))

    assert loaded == [("de", {"a": "2"}), ("en_US", {"a": "1"})]


def test_iter_language_files_accepts_explicit_files(tmp_path: Path):
    first = tmp_path / "lang.properties"
    first.write_text("greeting=Hi", encoding="utf-8")
    second = tmp_path / "missing.properties"

    loaded = list(iter_language_files([first, second], MessageFormatSettings()))

    assert loaded == [("lang", {"greeting": "Hi"})]


def test_iter_language_files_honours_settings(tmp_path: Path):
    (tmp_path / "en.properties").write_text("a=1", encoding="utf-8")
    (tmp_path / "de.json").write_text('{"a": "2"}', encoding="utf-8")

    settings = MessageFormatSettings(language_file_suffixes=["json"], skip_marker="")
    assert [lang for lang, _ in iter_language_files([tmp_path], settings)] == ["de"]
