"""aliasdoc: lint markdown tutorials that compare type aliases with wrapper types.

Usage:
    from aliasdoc import Linter, LintSettings

    linter = Linter(LintSettings(fail_on="warning"))
    report = linter.lint_file("docs/type-aliases.md")
    for finding in report.sorted_findings():
        print(finding.format())

    # The runtime side of the same idea
    from aliasdoc import Person, PersonSet, resolve_alias

    people: PersonSet = {Person("Alice", 1)}
    resolve_alias(PersonSet)  # set[Person]
"""

__version__ = "0.1.0"

# Core primitives
from aliasdoc.core import (
    Alias,
    AliasDeclaration,
    EncapsulatingWrapper,
    Person,
    PersonSet,
    PersonSetWrapper,
    is_substitutable,
    is_type_alias,
    resolve_alias,
    runtime_type,
    underlying_type,
    unwrap_value,
)

# Documents
from aliasdoc.document import CodeBlock, Document, Heading, Table, load_document, parse_document

# Errors
from aliasdoc.errors import (
    AliasCycleError,
    AliasdocError,
    DocumentParseError,
    UnknownLanguageError,
    UnknownRuleError,
)

# Linting
from aliasdoc.lint import Finding, Linter, LintReport, Severity, default_rules

# Configuration
from aliasdoc.config import LintSettings

__all__ = [
    # Version
    "__version__",
    # Core
    "Alias",
    "AliasDeclaration",
    "EncapsulatingWrapper",
    "Person",
    "PersonSet",
    "PersonSetWrapper",
    "is_substitutable",
    "is_type_alias",
    "resolve_alias",
    "runtime_type",
    "underlying_type",
    "unwrap_value",
    # Documents
    "CodeBlock",
    "Document",
    "Heading",
    "Table",
    "load_document",
    "parse_document",
    # Errors
    "AliasdocError",
    "AliasCycleError",
    "DocumentParseError",
    "UnknownLanguageError",
    "UnknownRuleError",
    # Linting
    "Finding",
    "Linter",
    "LintReport",
    "Severity",
    "default_rules",
    # Configuration
    "LintSettings",
]
