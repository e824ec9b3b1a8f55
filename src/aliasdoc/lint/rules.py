"""Built-in lint rules.

Each rule inspects a parsed document through a LintContext and yields
findings. Rules never raise for document content; anything unexpected is
caught by the linter and reported as AD999.

Codes:
    AD0xx  code blocks
    AD1xx  alias declarations
    AD2xx  encapsulating wrappers
    AD3xx  comparison tables
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from aliasdoc.aliases import AliasIndex, WrapperCandidate
from aliasdoc.document.models import Document
from aliasdoc.errors import UnknownLanguageError
from aliasdoc.grammar import CheckerRegistry
from aliasdoc.lint.models import Finding, Severity

if TYPE_CHECKING:
    from aliasdoc.config import LintSettings


@dataclass(slots=True)
class LintContext:
    """Everything a rule may consult besides the document itself."""

    settings: LintSettings
    checkers: CheckerRegistry
    index: AliasIndex


class LintRule(ABC):
    """Base class for lint rules."""

    code: ClassVar[str]
    name: ClassVar[str]
    severity: ClassVar[Severity]
    description: ClassVar[str]
    default_enabled: ClassVar[bool] = True

    @abstractmethod
    def check(self, document: Document, context: LintContext) -> Iterable[Finding]:
        """Yield findings for document."""
        ...

    def finding(
        self,
        document: Document,
        message: str,
        line: int,
        severity: Severity | None = None,
    ) -> Finding:
        return Finding(
            rule=self.code,
            name=self.name,
            severity=severity if severity is not None else self.severity,
            message=message,
            path=document.display_path,
            line=line,
        )


class CodeBlockSyntaxRule(LintRule):
    code = "AD001"
    name = "code-block-syntax"
    severity = Severity.ERROR
    description = "Every labelled code block parses under its language's grammar."

    def check(self, document: Document, context: LintContext) -> Iterator[Finding]:
        for block in document.code_blocks:
            if not block.language or block.language not in context.checkers:
                continue
            checker = context.checkers.get(block.language)
            for problem in checker.check(block.source):
                yield self.finding(
                    document,
                    f"{context.checkers.canonical(block.language)} block does not parse: "
                    f"{problem.message}",
                    block.document_line(problem.line),
                )


class UncheckedLanguageRule(LintRule):
    code = "AD002"
    name = "unchecked-language"
    severity = Severity.INFO
    description = "A code block's language has no syntax checker."

    def check(self, document: Document, context: LintContext) -> Iterator[Finding]:
        for block in document.code_blocks:
            if not block.language:
                continue
            try:
                context.checkers.get(block.language)
            except UnknownLanguageError as e:
                yield self.finding(document, str(e), block.line)


class MissingLanguageRule(LintRule):
    code = "AD003"
    name = "missing-language"
    severity = Severity.WARNING
    description = "A fenced code block has no language tag."
    default_enabled = False

    def check(self, document: Document, context: LintContext) -> Iterator[Finding]:
        for block in document.code_blocks:
            if not block.language:
                yield self.finding(document, "Code block has no language tag", block.line)


class UnresolvedAliasRule(LintRule):
    code = "AD101"
    name = "unresolved-alias"
    severity = Severity.ERROR
    description = "An alias target names a type that is neither built in nor declared."

    def check(self, document: Document, context: LintContext) -> Iterator[Finding]:
        extra = context.settings.known_types
        for alias in context.index.aliases:
            missing = context.index.unresolved(alias, extra)
            if missing:
                names = ", ".join(f"'{name}'" for name in missing)
                yield self.finding(
                    document,
                    f"Alias '{alias.name}' = {alias.target} refers to unknown type(s) {names}",
                    alias.line,
                )


class AliasCycleRule(LintRule):
    code = "AD102"
    name = "alias-cycle"
    severity = Severity.ERROR
    description = "Aliases refer to each other without ever reaching a real type."

    def check(self, document: Document, context: LintContext) -> Iterator[Finding]:
        for cycle in context.index.cycles():
            chain = " -> ".join([*(alias.name for alias in cycle), cycle[0].name])
            yield self.finding(document, f"Alias cycle: {chain}", cycle[0].line)


class DuplicateAliasRule(LintRule):
    code = "AD103"
    name = "duplicate-alias"
    severity = Severity.WARNING
    description = "The same alias name is declared twice with different targets."

    def check(self, document: Document, context: LintContext) -> Iterator[Finding]:
        for first, later in context.index.duplicates():
            yield self.finding(
                document,
                f"Alias '{later.name}' redeclared as {later.target} "
                f"(line {first.line} declares it as {first.target})",
                later.line,
            )


ALIAS_SYNTAX = {
    "python": "type {name} = {target}",
    "kotlin": "typealias {name} = {target}",
    "scala": "type {name} = {target}",
    "swift": "typealias {name} = {target}",
    "typescript": "type {name} = {target};",
    "rust": "type {name} = {target};",
    "go": "type {name} = {target}",
    "c": "typedef {target} {name};",
    "cpp": "using {name} = {target};",
    "csharp": "using {name} = {target};",
}


def suggest_alias(wrapper: WrapperCandidate) -> str | None:
    """Alias declaration equivalent to wrapper, or None if its field is untyped."""
    template = ALIAS_SYNTAX.get(wrapper.language)
    if template is None or not wrapper.field_type:
        return None
    return template.format(name=wrapper.name, target=wrapper.field_type)


class RedundantWrapperRule(LintRule):
    code = "AD201"
    name = "redundant-wrapper"
    severity = Severity.WARNING
    description = "A single-field wrapper class in a language that has native type aliases."

    def check(self, document: Document, context: LintContext) -> Iterator[Finding]:
        languages = set(context.settings.wrapper_languages)
        for wrapper in context.index.wrappers:
            if wrapper.language not in languages:
                continue
            message = (
                f"Class '{wrapper.name}' only wraps its field '{wrapper.field}'; "
                f"{wrapper.language} has native type aliases"
            )
            suggestion = suggest_alias(wrapper)
            if suggestion is not None:
                message += f" (consider `{suggestion}`)"
            yield self.finding(document, message, wrapper.line)


class TableEmptyCellRule(LintRule):
    code = "AD301"
    name = "table-empty-cell"
    severity = Severity.ERROR
    description = "A comparison table has an empty cell."

    def check(self, document: Document, context: LintContext) -> Iterator[Finding]:
        for table in document.tables:
            for column, cell in enumerate(table.header):
                if not cell:
                    yield self.finding(
                        document, f"Empty header cell in column {column + 1}", table.line
                    )
            for index, row in enumerate(table.rows):
                for column, cell in enumerate(row[: len(table.header)]):
                    if not cell:
                        label = table.header[column] or f"column {column + 1}"
                        yield self.finding(
                            document, f"Empty cell under '{label}'", table.row_line(index)
                        )


class TableColumnCountRule(LintRule):
    code = "AD302"
    name = "table-column-count"
    severity = Severity.ERROR
    description = "A table row has a different number of cells than the header."

    def check(self, document: Document, context: LintContext) -> Iterator[Finding]:
        for table in document.tables:
            width = len(table.header)
            for index, row in enumerate(table.rows):
                if len(row) != width:
                    yield self.finding(
                        document,
                        f"Row has {len(row)} cell(s), header has {width}",
                        table.row_line(index),
                    )


_EMPHASIS = re.compile(r"[*_`~]")


def aspect_key(cell: str) -> str:
    """Normalize a first-column cell for comparison."""
    return " ".join(_EMPHASIS.sub("", cell).lower().split())


class TableDuplicateAspectRule(LintRule):
    code = "AD303"
    name = "table-duplicate-aspect"
    severity = Severity.WARNING
    description = "Two rows of a comparison table describe the same aspect."

    def check(self, document: Document, context: LintContext) -> Iterator[Finding]:
        for table in document.tables:
            if len(table.header) < 2:
                continue
            seen: dict[str, int] = {}
            for index, row in enumerate(table.rows):
                if not row or not row[0]:
                    continue
                key = aspect_key(row[0])
                line = table.row_line(index)
                if key in seen:
                    yield self.finding(
                        document,
                        f"Aspect '{row[0]}' already described on line {seen[key]}",
                        line,
                    )
                else:
                    seen[key] = line


BUILTIN_RULES: tuple[type[LintRule], ...] = (
    CodeBlockSyntaxRule,
    UncheckedLanguageRule,
    MissingLanguageRule,
    UnresolvedAliasRule,
    AliasCycleRule,
    DuplicateAliasRule,
    RedundantWrapperRule,
    TableEmptyCellRule,
    TableColumnCountRule,
    TableDuplicateAspectRule,
)
