"""Runtime configuration based on environment variables."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class MessageFormatSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MESSAGE_FORMAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_language: str | None = Field(
        default=None,
        description="Language id preferred as fallback table; detected from the process locale when unset.",
    )
    # comma separated in the environment: MESSAGE_FORMAT_LANGUAGE_FILE_SUFFIXES=json,.properties
    language_file_suffixes: Annotated[tuple[str, ...], NoDecode] = (".properties", ".json")
    skip_marker: str = Field(default="platform", description="Files whose name contains this text are ignored.")
    file_encoding: str = "utf-8"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = Field(default=True, description="Render log events as JSON lines; console output otherwise.")

    @field_validator("default_language", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("language_file_suffixes", mode="before")
    @classmethod
    def _split_suffixes(cls, value):
        if isinstance(value, str) and value.lstrip().startswith("["):
            value = json.loads(value)
        elif isinstance(value, str):
            value = [part.strip() for part in value.split(",") if part.strip()]
        return tuple(s if s.startswith(".") else f".{s}" for s in value)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> MessageFormatSettings:
    """Return cached settings instance."""

    return MessageFormatSettings()


__all__ = ["MessageFormatSettings", "get_settings"]
