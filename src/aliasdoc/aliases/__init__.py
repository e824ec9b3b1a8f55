"""Alias, declared-type, and wrapper extraction from code blocks."""

from aliasdoc.aliases.extract import (
    AliasIndex,
    extract_aliases,
    extract_types,
    extract_wrappers,
    resolve_target,
    target_names,
)
from aliasdoc.aliases.models import TypeDeclaration, WrapperCandidate

__all__ = [
    "AliasIndex",
    "TypeDeclaration",
    "WrapperCandidate",
    "extract_aliases",
    "extract_types",
    "extract_wrappers",
    "resolve_target",
    "target_names",
]
