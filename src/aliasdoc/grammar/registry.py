"""Registry mapping language tags to syntax checkers."""

from __future__ import annotations

from aliasdoc.errors import UnknownLanguageError
from aliasdoc.grammar.checkers import builtin_checkers
from aliasdoc.grammar.protocol import SyntaxChecker


class CheckerRegistry:
    """Language tag -> checker lookup.

    Tags are matched case-insensitively. Registering a checker also registers
    its aliases; a later registration for the same tag replaces the earlier one.
    """

    def __init__(self) -> None:
        self._checkers: dict[str, SyntaxChecker] = {}
        self._canonical: dict[str, str] = {}

    def register(self, checker: SyntaxChecker) -> None:
        canonical = checker.language.lower()
        for tag in (checker.language, *checker.aliases):
            self._checkers[tag.lower()] = checker
            self._canonical[tag.lower()] = canonical

    def get(self, language: str) -> SyntaxChecker:
        """Return the checker for language.

        Raises:
            UnknownLanguageError: If no checker handles the tag.
        """
        try:
            return self._checkers[language.lower()]
        except KeyError:
            raise UnknownLanguageError(language) from None

    def canonical(self, language: str) -> str:
        """Canonical tag for language ("kt" -> "kotlin"); unknown tags pass through."""
        return self._canonical.get(language.lower(), language.lower())

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and language.lower() in self._checkers

    def languages(self) -> list[str]:
        """Sorted canonical language tags."""
        return sorted(set(self._canonical.values()))


def default_registry() -> CheckerRegistry:
    """Registry populated with the built-in checkers."""
    registry = CheckerRegistry()
    for checker in builtin_checkers():
        registry.register(checker)
    return registry
