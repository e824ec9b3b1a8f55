"""Built-in syntax checkers.

Python and JSON are checked with their real parsers. Brace languages get a
structural check: balanced, properly nested brackets with strings and
comments closed.
"""

from __future__ import annotations

import ast
import json
import re
import warnings
from dataclasses import dataclass

from aliasdoc.grammar.protocol import SyntaxProblem

_PAIRS = {")": "(", "]": "[", "}": "{"}
# Rust char literal; any other single quote starts a lifetime or label
_RUST_CHAR = re.compile(r"'(?:\\(?:x[0-9A-Fa-f]{2}|u\{[0-9A-Fa-f]{1,6}\}|.)|[^\\'\n])'")


class PythonSyntaxChecker:
    """Compile with ``ast.parse``."""

    language = "python"
    aliases = ("py", "python3")

    def check(self, source: str) -> list[SyntaxProblem]:
        try:
            with warnings.catch_warnings():
                # Invalid escape sequences in samples are not syntax errors
                warnings.simplefilter("ignore", SyntaxWarning)
                ast.parse(source)
        except SyntaxError as e:
            return [SyntaxProblem(message=e.msg, line=e.lineno or 1)]
        return []


class JsonSyntaxChecker:
    """Decode with the json module."""

    language = "json"
    aliases = ()

    def check(self, source: str) -> list[SyntaxProblem]:
        if not source.strip():
            return []
        try:
            json.loads(source)
        except json.JSONDecodeError as e:
            return [SyntaxProblem(message=e.msg, line=e.lineno)]
        return []


@dataclass(frozen=True, slots=True)
class BraceSyntaxChecker:
    """Structural check for C-family languages.

    Attributes:
        language: Canonical language tag.
        aliases: Other tags for the same language.
        nested_comments: Block comments nest (Kotlin, Scala, Swift, Rust).
        char_literals: Single quotes delimit char literals (Swift has none).
        backtick_strings: Backticks delimit strings (JS, TS, Go raw strings).
        triple_quotes: ``\"\"\"`` delimits raw strings (Kotlin, Scala, Swift, Java).
        lifetimes: A single quote is a char literal only when one (escaped)
            character and a closing quote follow; otherwise it is a lifetime
            tick (Rust).
    """

    language: str
    aliases: tuple[str, ...] = ()
    nested_comments: bool = False
    char_literals: bool = True
    backtick_strings: bool = False
    triple_quotes: bool = False
    lifetimes: bool = False

    def check(self, source: str) -> list[SyntaxProblem]:
        stack: list[tuple[str, int]] = []
        problems: list[SyntaxProblem] = []
        i = 0
        line = 1
        n = len(source)

        while i < n:
            char = source[i]

            if char == "\n":
                line += 1
                i += 1
                continue

            if source.startswith("//", i):
                end = source.find("\n", i)
                i = n if end == -1 else end
                continue

            if source.startswith("/*", i):
                start_line = line
                depth = 1
                i += 2
                while i < n and depth:
                    if source.startswith("*/", i):
                        depth -= 1
                        i += 2
                    elif self.nested_comments and source.startswith("/*", i):
                        depth += 1
                        i += 2
                    else:
                        if source[i] == "\n":
                            line += 1
                        i += 1
                if depth:
                    problems.append(SyntaxProblem("Unterminated block comment", start_line))
                    return problems
                continue

            if self.triple_quotes and source.startswith('"""', i):
                end = source.find('"""', i + 3)
                if end == -1:
                    problems.append(SyntaxProblem("Unterminated raw string", line))
                    return problems
                line += source.count("\n", i, end)
                i = end + 3
                continue

            if char == "'" and self.lifetimes:
                match = _RUST_CHAR.match(source, i)
                i = match.end() if match else i + 1
                continue

            quote = None
            if char == '"':
                quote = '"'
            elif char == "'" and self.char_literals:
                quote = "'"
            elif char == "`" and self.backtick_strings:
                quote = "`"
            if quote is not None:
                start_line = line
                i += 1
                closed = False
                while i < n:
                    c = source[i]
                    if c == "\\" and quote != "`":
                        if source.startswith("\n", i + 1):
                            line += 1
                        i += 2
                        continue
                    if c == "\n":
                        if quote != "`":
                            break
                        line += 1
                    if c == quote:
                        closed = True
                        i += 1
                        break
                    i += 1
                if not closed:
                    problems.append(SyntaxProblem("Unterminated string literal", start_line))
                    return problems
                continue

            if char in "([{":
                stack.append((char, line))
            elif char in _PAIRS:
                if not stack:
                    problems.append(SyntaxProblem(f"Unmatched '{char}'", line))
                    return problems
                opener, opened_at = stack.pop()
                if opener != _PAIRS[char]:
                    problems.append(
                        SyntaxProblem(
                            f"'{char}' does not close '{opener}' opened on line {opened_at}",
                            line,
                        )
                    )
                    return problems
            i += 1

        for opener, opened_at in stack:
            problems.append(SyntaxProblem(f"Unclosed '{opener}'", opened_at))
        return problems


def builtin_checkers() -> list[PythonSyntaxChecker | JsonSyntaxChecker | BraceSyntaxChecker]:
    """All checkers shipped with aliasdoc."""
    return [
        PythonSyntaxChecker(),
        JsonSyntaxChecker(),
        BraceSyntaxChecker(
            "kotlin", ("kt", "kts"), nested_comments=True, triple_quotes=True
        ),
        BraceSyntaxChecker("java", triple_quotes=True),
        BraceSyntaxChecker("scala", nested_comments=True, triple_quotes=True),
        BraceSyntaxChecker("swift", nested_comments=True, char_literals=False, triple_quotes=True),
        BraceSyntaxChecker("c", ("h",)),
        BraceSyntaxChecker("cpp", ("c++", "cc", "hpp", "cxx")),
        BraceSyntaxChecker("csharp", ("cs", "c#")),
        BraceSyntaxChecker("typescript", ("ts", "tsx"), backtick_strings=True),
        BraceSyntaxChecker("javascript", ("js", "jsx"), backtick_strings=True),
        BraceSyntaxChecker("go", ("golang",), char_literals=True, backtick_strings=True),
        BraceSyntaxChecker("rust", ("rs",), nested_comments=True, lifetimes=True),
    ]
