"""Per-language syntax checks for fenced code blocks."""

from aliasdoc.grammar.checkers import (
    BraceSyntaxChecker,
    JsonSyntaxChecker,
    PythonSyntaxChecker,
    builtin_checkers,
)
from aliasdoc.grammar.protocol import SyntaxChecker, SyntaxProblem
from aliasdoc.grammar.registry import CheckerRegistry, default_registry

__all__ = [
    "SyntaxChecker",
    "SyntaxProblem",
    "PythonSyntaxChecker",
    "JsonSyntaxChecker",
    "BraceSyntaxChecker",
    "builtin_checkers",
    "CheckerRegistry",
    "default_registry",
]
