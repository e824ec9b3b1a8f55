"""Configuration module using Pydantic Settings.

Usage:
    from aliasdoc.config import LintSettings

    settings = LintSettings(require_language=True)
"""

from aliasdoc.config.settings import DEFAULT_WRAPPER_LANGUAGES, LintSettings

__all__ = [
    "DEFAULT_WRAPPER_LANGUAGES",
    "LintSettings",
]
