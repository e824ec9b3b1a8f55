"""Lint rules, registry, linter, and report models."""

from aliasdoc.lint.linter import Linter, iter_markdown_files
from aliasdoc.lint.models import Finding, LintReport, Severity
from aliasdoc.lint.registry import RuleRegistry, default_rules
from aliasdoc.lint.rules import BUILTIN_RULES, LintContext, LintRule, suggest_alias

__all__ = [
    "Linter",
    "iter_markdown_files",
    "Finding",
    "LintReport",
    "Severity",
    "RuleRegistry",
    "default_rules",
    "BUILTIN_RULES",
    "LintContext",
    "LintRule",
    "suggest_alias",
]
