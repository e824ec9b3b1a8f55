"""Markdown document model and parser."""

from aliasdoc.document.models import CodeBlock, Document, Heading, Section, Table
from aliasdoc.document.parser import load_document, parse_document, split_row

__all__ = [
    "CodeBlock",
    "Document",
    "Heading",
    "Section",
    "Table",
    "load_document",
    "parse_document",
    "split_row",
]
