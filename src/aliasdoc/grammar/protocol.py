"""Protocol and result type for per-language syntax checkers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class SyntaxProblem:
    """A syntax problem inside a code block.

    Attributes:
        message: Human-readable description.
        line: 1-based line relative to the block body.
    """

    message: str
    line: int = 1


@runtime_checkable
class SyntaxChecker(Protocol):
    """Checks that source text parses under one language's grammar.

    Implementations must be stateless: one instance is shared by every
    block of its language.
    """

    language: str
    aliases: tuple[str, ...]

    def check(self, source: str) -> list[SyntaxProblem]:
        """Return problems found in source (empty when it parses)."""
        ...
