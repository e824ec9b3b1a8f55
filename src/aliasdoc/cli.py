"""CLI entry point for aliasdoc.

Usage:
    aliasdoc check docs/                    # Lint every markdown file under docs/
    aliasdoc check guide.md --format json   # Machine-readable output
    aliasdoc check guide.md --disable AD201 --fail-on warning
    aliasdoc rules                          # List rule codes
    aliasdoc languages                      # List languages with syntax checkers
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

import structlog
from pydantic import ValidationError

from aliasdoc import __version__
from aliasdoc.config import LintSettings
from aliasdoc.errors import UnknownRuleError
from aliasdoc.grammar import default_registry
from aliasdoc.lint import Linter, LintReport, Severity, default_rules
from aliasdoc.observability import configure_logging

log = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aliasdoc",
        description="Lint markdown tutorials about type aliases and wrapper types",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Lint markdown files or directories")
    check.add_argument("paths", nargs="+", help="Markdown files or directories")
    check.add_argument("--format", choices=("text", "json"), default="text", dest="output")
    check.add_argument(
        "--enable", action="append", default=[], metavar="RULE", help="Run only these rules"
    )
    check.add_argument(
        "--disable", action="append", default=[], metavar="RULE", help="Skip these rules"
    )
    check.add_argument(
        "--fail-on",
        choices=[s.label for s in Severity],
        default=None,
        help="Lowest severity that fails the run (default: error)",
    )
    check.add_argument(
        "--require-language", action="store_true", help="Report blocks without a language tag"
    )
    check.add_argument(
        "--known-type",
        action="append",
        default=[],
        metavar="NAME",
        help="Treat NAME as a resolvable type in alias targets",
    )

    subparsers.add_parser("rules", help="List lint rules")
    subparsers.add_parser("languages", help="List languages with syntax checkers")
    return parser


def _settings_from_args(args: argparse.Namespace) -> LintSettings:
    base = LintSettings()
    overrides: dict[str, Any] = {}
    if args.enable:
        overrides["enable"] = [*base.enable, *args.enable]
    if args.disable:
        overrides["disable"] = [*base.disable, *args.disable]
    if args.fail_on is not None:
        overrides["fail_on"] = Severity.parse(args.fail_on)
    if args.require_language:
        overrides["require_language"] = True
    if args.known_type:
        overrides["known_types"] = [*base.known_types, *args.known_type]
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return base.model_copy(update=overrides)


def _print_text(reports: list[LintReport]) -> None:
    total = 0
    for report in reports:
        for finding in report.sorted_findings():
            print(finding.format())
            total += 1
    files = len(reports)
    print(f"{total} finding(s) in {files} file(s)", file=sys.stderr)


def run_check(args: argparse.Namespace) -> int:
    settings = _settings_from_args(args)
    configure_logging(settings.log_level, settings.log_format)

    try:
        linter = Linter(settings)
    except UnknownRuleError as e:
        print(f"aliasdoc: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        reports = linter.lint_paths(args.paths)
    except FileNotFoundError as e:
        print(f"aliasdoc: {e}", file=sys.stderr)
        return EXIT_USAGE

    if args.output == "json":
        print(json.dumps([report.to_dict() for report in reports], indent=2))
    else:
        _print_text(reports)

    failed = linter.failed(reports)
    log.debug("run_complete", files=len(reports), failed=failed)
    return EXIT_FINDINGS if failed else EXIT_OK


def run_rules() -> int:
    for rule in default_rules():
        state = "" if rule.default_enabled else " (off by default)"
        print(f"{rule.code}  {rule.name:<24} {rule.severity.label:<8} {rule.description}{state}")
    return EXIT_OK


def run_languages() -> int:
    registry = default_registry()
    for language in registry.languages():
        print(language)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "check":
        try:
            return run_check(args)
        except ValidationError as e:
            print(f"aliasdoc: invalid configuration: {e}", file=sys.stderr)
            return EXIT_USAGE
    if args.command == "rules":
        return run_rules()
    return run_languages()


if __name__ == "__main__":
    sys.exit(main())
