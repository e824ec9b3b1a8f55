"""Tests for the Person record and the PersonSet alias/wrapper pair.

Critical Invariants:
- id is assigned once and never changes
- name is mutable through accessors and the property
- Renaming a person never moves it inside a set
- A PersonSet value is a plain set; a PersonSetWrapper is not
"""

import pytest

from aliasdoc.core import (
    EncapsulatingWrapper,
    Person,
    PersonSet,
    PersonSetWrapper,
    is_substitutable,
    resolve_alias,
)


def test_accessors_return_constructor_values() -> None:
    person = Person("Alice", 1)
    assert person.get_name() == "Alice"
    assert person.get_id() == 1
    assert person.name == "Alice"
    assert person.id == 1


@pytest.mark.parametrize("rename", ["set_name", "property"], ids=["accessor", "property"])
def test_name_is_mutable(rename) -> None:
    person = Person("Alice", 1)
    if rename == "set_name":
        person.set_name("Alicia")
    else:
        person.name = "Alicia"
    assert person.get_name() == "Alicia"


@pytest.mark.parametrize("attr", ["id", "_id"])
def test_id_cannot_be_reassigned(attr) -> None:
    """CRITICAL: id is fixed at construction.

    Why: Set membership hashes on id; changing it would orphan the entry.
    """
    person = Person("Alice", 1)
    with pytest.raises(AttributeError):
        setattr(person, attr, 2)
    assert person.get_id() == 1


def test_fields_cannot_be_deleted() -> None:
    person = Person("Alice", 1)
    with pytest.raises(AttributeError):
        del person.name


@pytest.mark.parametrize(
    ("name", "id_"),
    [(42, 1), ("Alice", "1"), ("Alice", True), ("Alice", 1.0)],
    ids=["int-name", "str-id", "bool-id", "float-id"],
)
def test_constructor_validates_field_types(name, id_) -> None:
    with pytest.raises(TypeError):
        Person(name, id_)


def test_set_name_validates_type() -> None:
    person = Person("Alice", 1)
    with pytest.raises(TypeError):
        person.set_name(None)  # type: ignore[arg-type]
    assert person.get_name() == "Alice"


def test_equality_and_hash_use_id_only() -> None:
    assert Person("Alice", 1) == Person("Someone else", 1)
    assert Person("Alice", 1) != Person("Alice", 2)
    assert hash(Person("Alice", 1)) == hash(Person("Bob", 1))
    assert Person("Alice", 1) != "Alice"


def test_renamed_person_stays_in_set() -> None:
    alice = Person("Alice", 1)
    people: PersonSet = {alice, Person("Bob", 2)}

    alice.set_name("Alicia")

    assert alice in people
    assert len(people) == 2


def test_set_deduplicates_by_id() -> None:
    people: PersonSet = {Person("Alice", 1), Person("Alice again", 1)}
    assert len(people) == 1


def test_person_set_alias_is_a_plain_set() -> None:
    """The alias adds no identity: a PersonSet value is just a set."""
    people: PersonSet = {Person("Alice", 1)}

    assert resolve_alias(PersonSet) == set[Person]
    assert type(people) is set
    assert is_substitutable(people, PersonSet)
    assert is_substitutable(set(), PersonSet)


def test_wrapper_adds_identity() -> None:
    """The wrapper is a new type: it is not a set and not substitutable for one."""
    alice = Person("Alice", 1)
    wrapped = PersonSetWrapper()
    wrapped.add(alice)

    assert alice in wrapped
    assert len(wrapped) == 1
    assert list(wrapped) == [alice]
    assert isinstance(wrapped, EncapsulatingWrapper)
    assert not isinstance(wrapped, set)
    assert not is_substitutable(wrapped, PersonSet)
    assert is_substitutable(wrapped.unwrap(), PersonSet)


def test_wrapper_shares_the_inner_set() -> None:
    people: PersonSet = set()
    wrapped = PersonSetWrapper(people)
    wrapped.add(Person("Bob", 2))
    assert wrapped.unwrap() is people
    assert len(people) == 1


def test_repr() -> None:
    assert repr(Person("Alice", 1)) == "Person(name='Alice', id=1)"
