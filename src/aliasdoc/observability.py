"""Structured logging configuration with structlog.

Lint findings are program output and go to stdout; log events describe what
the linter itself is doing and go to stderr.

Usage:
    from aliasdoc.observability import configure_logging

    configure_logging(level="DEBUG", fmt="console")

    import structlog
    log = structlog.get_logger(__name__)
    log.info("lint_complete", path="guide.md", findings=3)
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.typing import Processor


def _level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.WARNING)


def configure_logging(level: str | int = "WARNING", fmt: str = "console") -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name or number; unknown names fall back to WARNING.
        fmt: ``json`` for one JSON object per line, anything else for the
            console renderer.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
