"""Core type definitions for aliasdoc.

Usage:
    type UserId = int
    type PersonSet = set[Person]

    resolve_alias(PersonSet)           # set[Person]
    is_substitutable({alice}, PersonSet)  # True
"""

from __future__ import annotations

from dataclasses import dataclass
from types import UnionType
from typing import Any, TypeAliasType, Union, get_args, get_origin

from aliasdoc.errors import AliasCycleError

type Alias[T] = T
"""Type alias marking a value as "the same type under another name".

An `Alias[T]` is exactly `T` to every type checker and at runtime: no
conversion, no wrapping, no new identity. Compare with
`EncapsulatingWrapper[T]`, which stores a `T` inside a new object.
"""


@dataclass(frozen=True, slots=True)
class AliasDeclaration:
    """An alias found in a code block.

    Attributes:
        name: Alias name as written.
        target: Source text of the aliased type expression.
        language: Language tag of the block the alias was found in.
        line: 1-based line in the document.
        parameters: Declared type parameters (e.g. ``("T",)`` for ``Alias[T]``).
    """

    name: str
    target: str
    language: str
    line: int = 0
    parameters: tuple[str, ...] = ()


def is_type_alias(obj: Any) -> bool:
    """Check whether obj was created by a ``type X = ...`` statement."""
    return isinstance(obj, TypeAliasType)


def resolve_alias(obj: Any) -> Any:
    """Follow an alias chain down to the first non-alias value.

    Non-alias inputs are returned unchanged. Subscripted aliases such as
    ``Alias[int]`` resolve through their origin's value.

    Raises:
        AliasCycleError: If an alias eventually refers back to itself.
    """
    chain: list[str] = []
    visited: set[int] = set()
    current = obj
    while True:
        origin = get_origin(current)
        if is_type_alias(origin):
            # Alias[T] = T: the argument is the resolved value for identity aliases
            args = getattr(current, "__args__", ())
            value = origin.__value__
            if value in origin.__type_params__ and len(args) == 1:
                current = args[0]
                chain.append(origin.__name__)
                continue
            current = origin
        if not is_type_alias(current):
            return current
        if id(current) in visited:
            raise AliasCycleError([*chain, current.__name__])
        visited.add(id(current))
        chain.append(current.__name__)
        current = current.__value__


def runtime_type(obj: Any) -> type | tuple[type, ...]:
    """Resolve obj to something usable with isinstance().

    ``set[Person]`` becomes ``set`` and ``int | str`` becomes ``(int, str)``;
    plain classes are returned unchanged.

    Raises:
        TypeError: If the resolved value has no runtime class.
    """
    resolved = resolve_alias(obj)
    if isinstance(resolved, type):
        return resolved
    origin = get_origin(resolved)
    if origin is Union or origin is UnionType:
        members: list[type] = []
        for arg in get_args(resolved):
            member = runtime_type(arg)
            members.extend(member if isinstance(member, tuple) else (member,))
        return tuple(members)
    if isinstance(origin, type):
        return origin
    raise TypeError(f"{resolved!r} has no runtime class")


def is_substitutable(value: Any, alias: Any) -> bool:
    """Check that value may be used wherever alias is expected.

    Only the outer runtime class is checked; element types are erased.
    """
    return isinstance(value, runtime_type(alias))
