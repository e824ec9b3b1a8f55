"""Person record used by the tutorial examples.

Usage:
    alice = Person("Alice", 1)
    alice.set_name("Alicia")
    people: PersonSet = {alice, Person("Bob", 2)}

    wrapped = PersonSetWrapper(set())
    wrapped.add(alice)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from aliasdoc.core.wrapper import EncapsulatingWrapper


class Person:
    """Data holder with a mutable name and an immutable id.

    Equality and hashing use ``id`` only, so renaming a person that is
    already in a set keeps it findable.
    """

    __slots__ = ("_name", "_id")

    def __init__(self, name: str, id: int) -> None:
        if not isinstance(name, str):
            raise TypeError(f"name must be str, got {type(name).__name__}")
        if isinstance(id, bool) or not isinstance(id, int):
            raise TypeError(f"id must be int, got {type(id).__name__}")
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_id", id)

    def __setattr__(self, attr: str, value: Any) -> None:
        if attr in ("id", "_id"):
            raise AttributeError("Person.id is assigned once at construction")
        super().__setattr__(attr, value)

    def __delattr__(self, attr: str) -> None:
        raise AttributeError(f"Cannot delete Person.{attr.lstrip('_')}")

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(f"name must be str, got {type(name).__name__}")
        object.__setattr__(self, "_name", name)

    def get_id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self.set_name(value)

    @property
    def id(self) -> int:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Person(name={self._name!r}, id={self._id})"


type PersonSet = set[Person]
"""Native alias: a PersonSet value is a plain ``set``."""


class PersonSetWrapper(EncapsulatingWrapper[set[Person]]):
    """Wrapper alternative to PersonSet, delegating to an inner set."""

    __slots__ = ()

    def __init__(self, people: set[Person] | None = None) -> None:
        super().__init__(set() if people is None else people)

    def add(self, person: Person) -> None:
        self._value.add(person)

    def __contains__(self, person: object) -> bool:
        return person in self._value

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._value)
