"""Models for alias and wrapper extraction results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WrapperCandidate:
    """A class that holds exactly one field and only exposes it.

    Attributes:
        name: Class name.
        field: Name of the single stored field.
        field_type: Declared type of the field as written ("" if undeclared).
        language: Canonical language tag.
        line: 1-based document line of the class header.
    """

    name: str
    field: str
    field_type: str
    language: str
    line: int


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    """A named type declared in a code block (class, interface, struct, ...)."""

    name: str
    language: str
    line: int
