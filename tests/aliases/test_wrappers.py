"""Tests for encapsulating wrapper detection.

Critical Invariants:
- A class with exactly one stored field and only trivial members is a wrapper
- Two fields, a supertype, or a non-trivial method disqualify a class
- The Person record from the tutorial is never a wrapper
"""

import pytest

from aliasdoc.aliases import extract_wrappers
from aliasdoc.document import CodeBlock

PYTHON_WRAPPER = '''\
class PersonSet:
    """Wraps a set of people."""

    __slots__ = ("_people",)

    def __init__(self, people: set[Person]) -> None:
        self._people = people

    def contains(self, person: Person) -> bool:
        return person in self._people

    def __len__(self) -> int:
        return len(self._people)
'''

PYTHON_PERSON = '''\
class Person:
    def __init__(self, name: str, id: int) -> None:
        self._name = name
        self._id = id

    def get_name(self) -> str:
        return self._name
'''


def block(language: str, source: str, line: int = 1) -> CodeBlock:
    return CodeBlock(language=language, source=source, line=line)


def test_python_wrapper_detected() -> None:
    (wrapper,) = extract_wrappers(block("python", PYTHON_WRAPPER, line=7))
    assert wrapper.name == "PersonSet"
    assert wrapper.field == "_people"
    assert wrapper.field_type == "set[Person]"
    assert wrapper.language == "python"
    assert wrapper.line == 8


def test_python_dataclass_with_one_field_is_a_wrapper() -> None:
    source = "@dataclass(frozen=True)\nclass UserId:\n    value: int\n"
    (wrapper,) = extract_wrappers(block("python", source))
    assert (wrapper.name, wrapper.field, wrapper.field_type) == ("UserId", "value", "int")


@pytest.mark.parametrize(
    "source",
    [
        PYTHON_PERSON,
        "class Tagged(Base):\n    def __init__(self, v):\n        self.v = v\n",
        (
            "class Counter:\n    def __init__(self, start: int):\n        self.n = start\n"
            "    def bump(self):\n        self.n += 1\n        return self.n\n"
        ),
        (
            "class Proxy:\n    def __init__(self, v):\n        self.v = v\n"
            "    def both(self):\n        return self.v, self.other\n"
        ),
        "class Empty:\n    pass\n",
        "class Color(Enum):\n    RED = 1\n",
    ],
    ids=["two-fields", "base-class", "multi-statement", "other-attribute", "no-field", "enum"],
)
def test_python_non_wrappers(source) -> None:
    assert extract_wrappers(block("python", source)) == []


@pytest.mark.parametrize(
    ("language", "source", "name", "field", "field_type"),
    [
        (
            "kotlin",
            "class UserId(private val value: Int) {\n    fun get(): Int = value\n}\n",
            "UserId",
            "value",
            "Int",
        ),
        (
            "kotlin",
            "class PersonSet {\n"
            "    private val people: MutableSet<Person> = mutableSetOf()\n"
            "    fun add(person: Person) { people.add(person) }\n"
            "}\n",
            "PersonSet",
            "people",
            "MutableSet<Person>",
        ),
        ("scala", "case class UserId(value: Int)\n", "UserId", "value", "Int"),
        ("swift", "struct UserId {\n    let value: Int\n}\n", "UserId", "value", "Int"),
        (
            "typescript",
            "class PersonSet {\n"
            "  constructor(private readonly people: Set<Person>) {}\n\n"
            "  has(person: Person): boolean {\n"
            "    return this.people.has(person);\n"
            "  }\n"
            "}\n",
            "PersonSet",
            "people",
            "Set<Person>",
        ),
        (
            "java",
            "public class PersonSet\n{\n"
            "    private final Set<Person> people;\n\n"
            "    public PersonSet(Set<Person> people) {\n"
            "        Objects.requireNonNull(people);\n"
            "        this.people = people;\n"
            "    }\n\n"
            "    @Override\n"
            "    public boolean contains(Person person) {\n"
            "        return people.contains(person);\n"
            "    }\n"
            "}\n",
            "PersonSet",
            "people",
            "Set<Person>",
        ),
        ("java", "public record UserId(int value) {}\n", "UserId", "value", "int"),
        ("csharp", "public record UserId(int Value);\n", "UserId", "Value", "int"),
        (
            "csharp",
            "public class UserId\n{\n    public int Value { get; }\n}\n",
            "UserId",
            "Value",
            "int",
        ),
    ],
    ids=[
        "kotlin-constructor",
        "kotlin-body",
        "scala-case-class",
        "swift-struct",
        "typescript-parameter-property",
        "java-allman",
        "java-record",
        "csharp-record",
        "csharp-property",
    ],
)
def test_lexical_wrappers(language, source, name, field, field_type) -> None:
    (wrapper,) = extract_wrappers(block(language, source))
    assert (wrapper.name, wrapper.field, wrapper.field_type) == (name, field, field_type)
    assert wrapper.language == language
    assert wrapper.line == 2


@pytest.mark.parametrize(
    ("language", "source"),
    [
        ("kotlin", "class Person(var name: String, val id: Int) {\n    fun getName() = name\n}\n"),
        ("kotlin", "class Special(val v: Int) : Base()\n"),
        ("kotlin", "open class Extensible(val v: Int)\n"),
        ("kotlin", "enum class Color(val rgb: Int)\n"),
        ("kotlin", "class Plain(v: Int)\n"),
        (
            "kotlin",
            "class Counter(private val start: Int) {\n"
            "    fun next(): Int {\n        val n = start + 1\n        return n\n    }\n"
            "}\n",
        ),
        ("scala", "class Holder(value: Int)\n"),
        ("swift", "struct Point {\n    let x: Int\n    let y: Int\n}\n"),
        ("java", "public class Tagged extends Base {\n    private int v;\n}\n"),
        ("typescript", "class Box implements Shape {\n  private v: number;\n}\n"),
        ("rust", "struct UserId(u32);\n"),
        ("kotlin", "@JvmInline\nvalue class UserId(val value: Int)\n"),
        ("kotlin", "inline class Password(val value: String)\n"),
    ],
    ids=[
        "two-fields",
        "supertype",
        "open",
        "enum",
        "plain-parameter",
        "multi-statement-method",
        "scala-plain-parameter",
        "swift-two-fields",
        "java-extends",
        "typescript-implements",
        "rust-unsupported",
        "kotlin-value-class",
        "kotlin-inline-class",
    ],
)
def test_lexical_non_wrappers(language, source) -> None:
    assert extract_wrappers(block(language, source)) == []


def test_companion_object_does_not_disqualify() -> None:
    source = (
        "class UserId(val value: Int) {\n"
        "    companion object {\n"
        "        val ZERO = UserId(0)\n"
        "        fun parse(s: String): UserId {\n"
        "            val n = s.toInt()\n"
        "            return UserId(n)\n"
        "        }\n"
        "    }\n"
        "}\n"
    )
    (wrapper,) = extract_wrappers(block("kotlin", source))
    assert wrapper.field == "value"


def test_swift_computed_property_is_not_a_field() -> None:
    source = "struct UserId {\n    let value: Int\n    var doubled: Int { value * 2 }\n}\n"
    (wrapper,) = extract_wrappers(block("swift", source))
    assert wrapper.field == "value"
