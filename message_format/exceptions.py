"""Library-specific exceptions."""


class MessageFormatError(Exception):
    pass


class TranslationsNotInitialized(MessageFormatError):
    """Raised when a translation is requested before any tables were loaded."""


class LanguageFileError(MessageFormatError):
    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Cannot load language file {path}: {reason}")
        self.path = path
        self.reason = reason
