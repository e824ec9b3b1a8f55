"""Document linter: parse, index, run rules, collect a report.

Usage:
    linter = Linter(LintSettings(fail_on="warning"))
    report = linter.lint_file("docs/aliases.md")
    for finding in report.sorted_findings():
        print(finding.format())
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from aliasdoc.aliases import AliasIndex
from aliasdoc.document import Document, parse_document
from aliasdoc.errors import DocumentParseError
from aliasdoc.grammar import CheckerRegistry, default_registry
from aliasdoc.lint.models import Finding, LintReport, Severity
from aliasdoc.lint.registry import RuleRegistry, default_rules
from aliasdoc.lint.rules import LintContext, LintRule, MissingLanguageRule

if TYPE_CHECKING:
    from aliasdoc.config import LintSettings

log = structlog.get_logger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


class Linter:
    """Runs the selected rules over markdown documents.

    Args:
        settings: Linter configuration; defaults to LintSettings() (environment).
        rules: Rule registry; defaults to the built-in rules.
        checkers: Syntax checker registry; defaults to the built-in checkers.

    Raises:
        UnknownRuleError: If settings enable or disable an unregistered rule.
    """

    def __init__(
        self,
        settings: LintSettings | None = None,
        rules: RuleRegistry | None = None,
        checkers: CheckerRegistry | None = None,
    ) -> None:
        if settings is None:
            # Late import to avoid circular dependency
            from aliasdoc.config import LintSettings

            settings = LintSettings()
        self.settings = settings
        self.rules = rules if rules is not None else default_rules()
        self.checkers = checkers if checkers is not None else default_registry()

        self.selected: list[LintRule] = self.rules.select(settings.enable, settings.disable)
        if settings.require_language:
            missing = self.rules.get(MissingLanguageRule.code)
            disabled = {self.rules.get(key).code for key in settings.disable}
            if missing not in self.selected and missing.code not in disabled:
                self.selected.append(missing)
                self.selected.sort(key=lambda rule: rule.code)

    def lint_document(self, document: Document) -> LintReport:
        """Run the selected rules over an already parsed document."""
        context = LintContext(
            settings=self.settings,
            checkers=self.checkers,
            index=AliasIndex.build(document, canonical=self.checkers.canonical),
        )
        report = LintReport(path=document.display_path)
        for rule in self.selected:
            try:
                report.findings.extend(rule.check(document, context))
            except Exception as e:
                log.exception("rule_failed", rule=rule.code, path=report.path)
                report.findings.append(
                    Finding(
                        rule="AD999",
                        name="internal-error",
                        severity=Severity.ERROR,
                        message=f"Rule {rule.code} ({rule.name}) crashed: {e!r}",
                        path=report.path,
                        line=0,
                    )
                )
        log.info(
            "lint_complete",
            path=report.path,
            rules=len(self.selected),
            **report.counts(),
        )
        return report

    def lint_text(self, text: str, path: str | Path | None = None) -> LintReport:
        """Parse and lint markdown text.

        A document that cannot be parsed yields a single AD000 finding.
        """
        try:
            document = parse_document(text, path=path)
        except DocumentParseError as e:
            return _unparseable(path, str(e), e.line or 0)
        return self.lint_document(document)

    def lint_file(self, path: str | Path) -> LintReport:
        """Read a UTF-8 markdown file and lint it.

        A file that is not valid UTF-8 yields a single AD000 finding.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            return _unparseable(path, f"File is not valid UTF-8: {e.reason} at byte {e.start}", 0)
        return self.lint_text(text, path=path)

    def lint_paths(self, paths: Iterable[str | Path]) -> list[LintReport]:
        """Lint files and directories (walked for markdown files, sorted)."""
        return [self.lint_file(path) for path in iter_markdown_files(paths)]

    def failed(self, reports: Iterable[LintReport]) -> bool:
        """True if any report has a finding at or above settings.fail_on."""
        return any(report.has_findings_at(self.settings.fail_on) for report in reports)


def iter_markdown_files(paths: Iterable[str | Path]) -> Iterator[Path]:
    """Expand directories into their markdown files; files pass through.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            yield from sorted(
                p for p in path.rglob("*") if p.is_file() and p.suffix.lower() in MARKDOWN_SUFFIXES
            )
        elif path.exists():
            yield path
        else:
            raise FileNotFoundError(f"No such file or directory: {path}")


def _unparseable(path: str | Path | None, message: str, line: int) -> LintReport:
    display = str(path) if path is not None else "<string>"
    log.warning("document_unparseable", path=display, error=message)
    return LintReport(
        path=display,
        findings=[
            Finding(
                rule="AD000",
                name="document-parse",
                severity=Severity.ERROR,
                message=message,
                path=display,
                line=line,
            )
        ],
    )
