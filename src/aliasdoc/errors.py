"""Exception hierarchy for aliasdoc.

Usage:
    from aliasdoc.errors import AliasdocError, DocumentParseError

    try:
        document = parse_document(text)
    except DocumentParseError as e:
        print(f"line {e.line}: {e}")
"""

from __future__ import annotations


class AliasdocError(Exception):
    """Base class for all aliasdoc errors."""

    pass


class DocumentParseError(AliasdocError):
    """Raised when a markdown document cannot be split into blocks."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class AliasCycleError(AliasdocError):
    """Raised when an alias chain refers back to one of its own members."""

    def __init__(self, chain: list[str]) -> None:
        super().__init__("Alias cycle: " + " -> ".join(chain))
        self.chain = chain


class UnknownRuleError(AliasdocError, KeyError):
    """Raised when a rule code or name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown rule: {self.name}"


class UnknownLanguageError(AliasdocError, KeyError):
    """Raised when no syntax checker is registered for a language tag."""

    def __init__(self, language: str) -> None:
        super().__init__(language)
        self.language = language

    def __str__(self) -> str:
        return f"No syntax checker for language: {self.language}"
