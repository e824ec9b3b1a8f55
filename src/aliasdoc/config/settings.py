"""Configuration settings using Pydantic Settings.

Provides typed linter configuration with environment variable support.

Usage:
    from aliasdoc.config import LintSettings

    # Load from environment variables (ALIASDOC_*)
    settings = LintSettings()

    # Or override with explicit values
    settings = LintSettings(disable=["AD201"], fail_on="warning")
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aliasdoc.lint.models import Severity

DEFAULT_WRAPPER_LANGUAGES = [
    "python",
    "kotlin",
    "scala",
    "swift",
    "typescript",
    "rust",
    "go",
    "c",
    "cpp",
    "csharp",
]


class LintSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the document linter.

    Attributes:
        enable: Rule codes or names to run (empty = every default-on rule).
        disable: Rule codes or names to skip; wins over enable.
        fail_on: Lowest severity that makes a run fail.
        require_language: Report fenced blocks without a language tag.
        known_types: Extra type names treated as resolvable in alias targets.
        wrapper_languages: Languages with native aliases, where a
            single-field wrapper class is redundant.
        log_level: structlog filtering level.
        log_format: ``console`` for humans, ``json`` for log collectors.

    Environment Variables:
        ALIASDOC_ENABLE, ALIASDOC_DISABLE (JSON lists)
        ALIASDOC_FAIL_ON
        ALIASDOC_REQUIRE_LANGUAGE
        ALIASDOC_KNOWN_TYPES (JSON list)
        ALIASDOC_WRAPPER_LANGUAGES (JSON list)
        ALIASDOC_LOG_LEVEL
        ALIASDOC_LOG_FORMAT
    """

    model_config = SettingsConfigDict(
        env_prefix="ALIASDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enable: list[str] = []
    disable: list[str] = []
    fail_on: Severity = Severity.ERROR
    require_language: bool = False
    known_types: list[str] = []
    wrapper_languages: list[str] = list(DEFAULT_WRAPPER_LANGUAGES)
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    @field_validator("fail_on", mode="before")
    @classmethod
    def _parse_fail_on(cls, value: object) -> Severity:
        if isinstance(value, str | int | Severity):
            return Severity.parse(value)
        raise ValueError(f"Invalid severity: {value!r}")

    @field_validator("wrapper_languages")
    @classmethod
    def _lower_languages(cls, value: list[str]) -> list[str]:
        return [language.lower() for language in value]
