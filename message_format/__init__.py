"""Lightweight file-backed translations with ``${name}`` placeholders."""

from message_format.exceptions import LanguageFileError, MessageFormatError, TranslationsNotInitialized
from message_format.locales import Locale
from message_format.placeholders import MessagePlaceholderHandler, fast_format
from message_format.translations import TranslationHandler

__all__ = [
    "LanguageFileError",
    "Locale",
    "MessageFormatError",
    "MessagePlaceholderHandler",
    "TranslationHandler",
    "TranslationsNotInitialized",
    "fast_format",
]
