"""Document models: the blocks a markdown tutorial is made of.

All line numbers are 1-based and refer to the source text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Heading:
    """ATX heading (``#`` .. ``######``)."""

    level: int
    title: str
    line: int


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fenced code block.

    Attributes:
        language: First word of the info string, lower-cased ("" if absent).
        source: Block body without the fences.
        line: Line of the opening fence.
    """

    language: str
    source: str
    line: int

    @property
    def body_line(self) -> int:
        """Line of the first body line."""
        return self.line + 1

    def document_line(self, block_line: int) -> int:
        """Map a 1-based line inside the body to a document line."""
        return self.line + max(block_line, 1)


@dataclass(frozen=True, slots=True)
class Table:
    """GFM pipe table.

    Attributes:
        header: Header cells.
        rows: Body rows; rows may have a different width than the header.
        line: Line of the header row.
    """

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    line: int

    def row_line(self, index: int) -> int:
        """Document line of body row ``index`` (0-based)."""
        return self.line + 2 + index


@dataclass(slots=True)
class Section:
    """Blocks and tables grouped under one heading (None before the first)."""

    heading: Heading | None
    code_blocks: list[CodeBlock] = field(default_factory=list)
    tables: list[Table] = field(default_factory=list)


@dataclass(slots=True)
class Document:
    """Parsed markdown document."""

    path: Path | None = None
    headings: list[Heading] = field(default_factory=list)
    code_blocks: list[CodeBlock] = field(default_factory=list)
    tables: list[Table] = field(default_factory=list)

    @property
    def display_path(self) -> str:
        return str(self.path) if self.path is not None else "<string>"

    def languages(self) -> set[str]:
        """Language tags used by the document's code blocks."""
        return {block.language for block in self.code_blocks if block.language}

    def sections(self) -> list[Section]:
        """Group code blocks and tables under their nearest preceding heading."""
        sections = [Section(heading=None)]
        sections.extend(Section(heading=heading) for heading in self.headings)

        def owner(line: int) -> Section:
            current = sections[0]
            for heading, section in zip(self.headings, sections[1:], strict=True):
                if heading.line > line:
                    break
                current = section
            return current

        for block in self.code_blocks:
            owner(block.line).code_blocks.append(block)
        for table in self.tables:
            owner(table.line).tables.append(table)

        if not sections[0].code_blocks and not sections[0].tables:
            sections.pop(0)
        return sections
