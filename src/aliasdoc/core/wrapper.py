"""Encapsulating wrapper: the workaround for languages without type aliases.

A wrapper stores one value and re-exposes it through accessors. Unlike an
alias it is a new class, so a wrapped value is no longer an instance of the
original type and every wrap allocates an extra object.
"""

from __future__ import annotations

from typing import Any


class EncapsulatingWrapper[T]:
    """Base class for single-value wrappers."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self._value

    @property
    def wrapped_type(self) -> type[T]:
        """Return the type of the wrapped value."""
        return type(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


def underlying_type(value: Any | EncapsulatingWrapper[Any]) -> type:
    """Get the payload type, unwrapping if necessary."""
    if isinstance(value, EncapsulatingWrapper):
        return value.wrapped_type
    return type(value)


def unwrap_value(value: Any | EncapsulatingWrapper[Any]) -> Any:
    """Get the payload, unwrapping if necessary."""
    if isinstance(value, EncapsulatingWrapper):
        return value.unwrap()
    return value
