"""Core primitives: alias helpers, wrappers, and the Person example record.

Architecture Note:
    core/ is pure and stateless apart from Person's own fields. The linter
    in lint/ never imports Person; it is the runtime counterpart of the
    classes the linter finds in documents.
"""

from aliasdoc.core.person import Person, PersonSet, PersonSetWrapper
from aliasdoc.core.types import (
    Alias,
    AliasDeclaration,
    is_substitutable,
    is_type_alias,
    resolve_alias,
    runtime_type,
)
from aliasdoc.core.wrapper import EncapsulatingWrapper, underlying_type, unwrap_value

__all__ = [
    # Types
    "Alias",
    "AliasDeclaration",
    "is_type_alias",
    "resolve_alias",
    "runtime_type",
    "is_substitutable",
    # Wrapper
    "EncapsulatingWrapper",
    "underlying_type",
    "unwrap_value",
    # Person
    "Person",
    "PersonSet",
    "PersonSetWrapper",
]
