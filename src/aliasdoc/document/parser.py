"""Markdown parser for the subset of markdown tutorials rely on.

Recognizes ATX headings, fenced code blocks, and GFM pipe tables. Everything
else is prose and ignored.

Usage:
    document = parse_document(text, path="guide.md")
    for block in document.code_blocks:
        print(block.language, block.line)
"""

from __future__ import annotations

import re
from pathlib import Path

import structlog

from aliasdoc.document.models import CodeBlock, Document, Heading, Table
from aliasdoc.errors import DocumentParseError

log = structlog.get_logger(__name__)

_FENCE_OPEN = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_HEADING = re.compile(r"^ {0,3}(?P<marks>#{1,6})(?:[ \t]+(?P<rest>.*))?$")
_CLOSING_MARKS = re.compile(r"(?:^|[ \t]+)#+[ \t]*$")
_DELIMITER_CELL = re.compile(r"^:?-+:?$")


def split_row(line: str) -> tuple[str, ...]:
    """Split a pipe table row into stripped cells.

    A leading and a trailing pipe are optional. ``\\|`` is a literal pipe.
    """
    cells: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\" and i + 1 < len(line) and line[i + 1] == "|":
            current.append("|")
            i += 2
            continue
        if char == "|":
            cells.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    cells.append("".join(current))

    stripped = line.strip()
    if stripped.startswith("|"):
        cells.pop(0)
    if stripped.endswith("|") and not stripped.endswith("\\|"):
        cells.pop()
    return tuple(cell.strip() for cell in cells)


def _is_delimiter_row(line: str) -> bool:
    if "-" not in line:
        return False
    cells = split_row(line)
    return bool(cells) and all(_DELIMITER_CELL.match(cell) for cell in cells)


def _parse_heading(line: str, lineno: int) -> Heading | None:
    match = _HEADING.match(line)
    if match is None:
        return None
    rest = match.group("rest") or ""
    title = _CLOSING_MARKS.sub("", rest).strip()
    return Heading(level=len(match.group("marks")), title=title, line=lineno)


def _has_pipe(line: str) -> bool:
    return "|" in line.replace("\\|", "")


def parse_document(text: str, path: str | Path | None = None) -> Document:
    """Parse markdown text into headings, code blocks, and tables.

    Args:
        text: Markdown source.
        path: Optional path recorded on the document for reporting.

    Returns:
        Parsed Document.

    Raises:
        DocumentParseError: If a fenced code block is never closed.
    """
    document = Document(path=Path(path) if path is not None else None)
    lines = text.splitlines()
    i = 0
    while i < len(lines):
        line = lines[i]
        lineno = i + 1

        fence = _FENCE_OPEN.match(line)
        if fence is not None and not (
            fence.group("fence")[0] == "`" and "`" in fence.group("info")
        ):
            block, i = _read_fenced_block(lines, i, fence)
            document.code_blocks.append(block)
            continue

        heading = _parse_heading(line, lineno)
        if heading is not None:
            document.headings.append(heading)
            i += 1
            continue

        if (
            _has_pipe(line)
            and i + 1 < len(lines)
            and _is_delimiter_row(lines[i + 1])
            and len(split_row(line)) == len(split_row(lines[i + 1]))
        ):
            table, i = _read_table(lines, i)
            document.tables.append(table)
            continue

        i += 1

    log.debug(
        "document_parsed",
        path=document.display_path,
        headings=len(document.headings),
        code_blocks=len(document.code_blocks),
        tables=len(document.tables),
    )
    return document


def _read_fenced_block(
    lines: list[str], start: int, fence: re.Match[str]
) -> tuple[CodeBlock, int]:
    marker = fence.group("fence")
    indent = len(fence.group("indent"))
    info = fence.group("info").strip()
    language = info.split()[0].lower() if info else ""
    closing = re.compile(rf"^ {{0,3}}{re.escape(marker[0])}{{{len(marker)},}}[ \t]*$")

    body: list[str] = []
    i = start + 1
    while i < len(lines):
        line = lines[i]
        if closing.match(line):
            source = "\n".join(body)
            if body:
                source += "\n"
            return CodeBlock(language=language, source=source, line=start + 1), i + 1
        # Strip up to the opening fence's indentation
        strip = min(indent, len(line) - len(line.lstrip(" ")))
        body.append(line[strip:])
        i += 1
    raise DocumentParseError(f"Unclosed code fence {marker!r}", line=start + 1)


def _read_table(lines: list[str], start: int) -> tuple[Table, int]:
    header = split_row(lines[start])
    rows: list[tuple[str, ...]] = []
    i = start + 2
    while i < len(lines):
        line = lines[i]
        if not line.strip() or not _has_pipe(line):
            break
        if _FENCE_OPEN.match(line) or _HEADING.match(line):
            break
        rows.append(split_row(line))
        i += 1
    return Table(header=header, rows=tuple(rows), line=start + 1), i


def load_document(path: str | Path) -> Document:
    """Read a UTF-8 markdown file and parse it."""
    path = Path(path)
    return parse_document(path.read_text(encoding="utf-8"), path=path)
