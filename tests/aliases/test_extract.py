"""Tests for alias and declared-type extraction.

Why these tests exist:
- Each language spells alias declarations differently; a missed declaration
  hides unresolved names, a false one reports nonsense
- Type parameters and qualified names must never be reported as unknown
- Only bare alias-to-alias chains are cycles; recursive structural aliases are valid
"""

import pytest

from aliasdoc.aliases import (
    AliasIndex,
    extract_aliases,
    extract_types,
    resolve_target,
    target_names,
)
from aliasdoc.core.types import AliasDeclaration
from aliasdoc.document import CodeBlock, parse_document


def block(language: str, source: str, line: int = 1) -> CodeBlock:
    return CodeBlock(language=language, source=source, line=line)


@pytest.mark.parametrize(
    ("language", "source", "name", "target", "params"),
    [
        ("python", "type PersonSet = set[Person]\n", "PersonSet", "set[Person]", ()),
        ("python", "type Matrix[T] = list[list[T]]\n", "Matrix", "list[list[T]]", ("T",)),
        ("python", "Ids: TypeAlias = list[int]\n", "Ids", "list[int]", ()),
        ("python", "Ids: typing.TypeAlias = 'list[int]'\n", "Ids", "'list[int]'", ()),
        (
            "python",
            'Box = TypeAliasType("Box", list[T], type_params=(T,))\n',
            "Box",
            "list[T]",
            ("T",),
        ),
        ("kotlin", "typealias PersonSet = Set<Person>\n", "PersonSet", "Set<Person>", ()),
        (
            "kotlin",
            "private typealias Handler<in E> = (E) -> Unit\n",
            "Handler",
            "(E) -> Unit",
            ("E",),
        ),
        ("swift", "typealias PersonSet = Set<Person>\n", "PersonSet", "Set<Person>", ()),
        ("scala", "type PersonSet = Set[Person]\n", "PersonSet", "Set[Person]", ()),
        (
            "typescript",
            "export type Pair<A, B> = [A, B];\n",
            "Pair",
            "[A, B]",
            ("A", "B"),
        ),
        (
            "rust",
            "pub type Registry<K> = HashMap<K, String>;\n",
            "Registry",
            "HashMap<K, String>",
            ("K",),
        ),
        ("go", "type PersonSet = map[int]Person\n", "PersonSet", "map[int]Person", ()),
        ("c", "typedef unsigned long ulong;\n", "ulong", "unsigned long", ()),
        (
            "cpp",
            "template <typename T> using Vec = std::vector<T>;\n",
            "Vec",
            "std::vector<T>",
            ("T",),
        ),
        (
            "csharp",
            "using PersonSet = System.Collections.Generic.HashSet<Person>;\n",
            "PersonSet",
            "System.Collections.Generic.HashSet<Person>",
            (),
        ),
    ],
    ids=[
        "python-pep695",
        "python-generic",
        "python-typealias",
        "python-qualified-typealias",
        "python-typealiastype",
        "kotlin",
        "kotlin-variance",
        "swift",
        "scala",
        "typescript",
        "rust",
        "go",
        "c-typedef",
        "cpp-template-using",
        "csharp-using",
    ],
)
def test_extract_alias(language, source, name, target, params) -> None:
    (alias,) = extract_aliases(block(language, source))
    assert alias.name == name
    assert alias.target == target
    assert alias.parameters == params
    assert alias.language == language


@pytest.mark.parametrize(
    ("language", "source"),
    [
        ("go", "type Celsius float64\n"),
        ("cpp", "using namespace std;\n"),
        ("kotlin", '// typealias Hidden = Int\nval s = "typealias Quoted = Int"\n'),
        ("java", "class PersonSet {}\n"),
        ("python", "type Broken = (\n"),
    ],
    ids=["go-defined-type", "using-namespace", "comment-and-string", "java", "unparseable"],
)
def test_no_alias(language, source) -> None:
    assert extract_aliases(block(language, source)) == []


def test_alias_lines_are_document_lines() -> None:
    aliases = extract_aliases(block("kotlin", "\ntypealias A = Int\ntypealias B = Long\n", line=10))
    assert [(a.name, a.line) for a in aliases] == [("A", 12), ("B", 13)]


def test_language_override_uses_canonical_tag() -> None:
    (alias,) = extract_aliases(block("kt", "typealias A = Int\n"), language="kotlin")
    assert alias.language == "kotlin"


@pytest.mark.parametrize(
    ("language", "source", "names"),
    [
        (
            "python",
            "from typing import Protocol\nimport collections.abc as cabc\n"
            "T = TypeVar('T')\nclass Person[K]:\n    pass\n",
            {"Protocol", "cabc", "T", "Person", "K"},
        ),
        (
            "python",
            "Vector = list[float]\nMaybe = int | None\nPair = namedtuple('Pair', 'a b')\n",
            {"Vector", "Maybe", "Pair"},
        ),
        ("kotlin", "data class Person(val name: String)\ninterface Named\n", {"Person", "Named"}),
        ("java", "public record Point(int x, int y) {}\nenum Color { RED }\n", {"Point", "Color"}),
        ("go", "type Celsius float64\ntype Person struct {\n}\n", {"Celsius", "Person"}),
    ],
    ids=["python", "python-implicit-aliases", "kotlin", "java", "go"],
)
def test_extract_types(language, source, names) -> None:
    assert {t.name for t in extract_types(block(language, source))} >= names


@pytest.mark.parametrize(
    ("alias", "names"),
    [
        (AliasDeclaration("A", "dict[str, 'Tree'] | None", "python"), ["dict", "str", "Tree"]),
        (AliasDeclaration("A", "Literal['red', 'blue']", "python"), ["Literal"]),
        (AliasDeclaration("A", "typing.List[Person]", "python"), ["Person"]),
        (AliasDeclaration("A", "(event: Event) -> Unit", "kotlin"), ["Event", "Unit"]),
        (AliasDeclaration("A", "java.util.List<Person>", "kotlin"), ["Person"]),
        (AliasDeclaration("A", "std::map<Key, std::string>", "cpp"), ["Key"]),
        (AliasDeclaration("A", "{ name: string; id?: number }", "typescript"), ["string", "number"]),
        (AliasDeclaration("A", "'on' | 'off'", "typescript"), []),
        (
            AliasDeclaration("A", "{ [K in keyof T]: boolean }", "typescript"),
            ["in", "keyof", "T", "boolean"],
        ),
        (
            AliasDeclaration("A", "T extends Array<infer U> ? U : never", "typescript"),
            ["T", "extends", "Array", "infer", "never"],
        ),
    ],
    ids=[
        "python-forward-ref",
        "python-literal",
        "python-qualified",
        "kotlin-function-type",
        "kotlin-qualified",
        "cpp-qualified",
        "typescript-object",
        "typescript-literals",
        "typescript-mapped-key",
        "typescript-infer",
    ],
)
def test_target_names(alias, names) -> None:
    assert target_names(alias) == names


@pytest.mark.parametrize(
    ("alias", "known", "missing"),
    [
        (AliasDeclaration("A", "set[Person]", "python"), set(), ["Person"]),
        (AliasDeclaration("A", "set[Person]", "python"), {"Person"}, []),
        (AliasDeclaration("A", "Map<K, List<Employee>>", "kotlin", parameters=("K",)), set(), ["Employee"]),
        (AliasDeclaration("A", "Vec<Widget>, Widget", "rust"), set(), ["Widget"]),
        (AliasDeclaration("A", "map[string]Person", "go"), {"Person"}, []),
    ],
    ids=["python-missing", "python-known", "kotlin-parameter", "deduplicated", "go-builtins"],
)
def test_resolve_target(alias, known, missing) -> None:
    assert resolve_target(alias, known) == missing


def test_index_collects_across_blocks(tutorial_text) -> None:
    index = AliasIndex.build(parse_document(tutorial_text))
    assert [a.name for a in index.aliases] == ["PersonSet", "Predicate"]
    assert {"Person", "PersonSet"} <= index.declared_names()
    assert all(index.unresolved(alias) == [] for alias in index.aliases)


def test_index_skips_untagged_blocks() -> None:
    index = AliasIndex.build(parse_document("```\ntypealias A = Missing\n```\n"))
    assert index.aliases == []


def test_index_canonicalizes_languages() -> None:
    document = parse_document("```kt\ntypealias A = Int\n```\n")
    index = AliasIndex.build(document, canonical=lambda tag: {"kt": "kotlin"}.get(tag, tag))
    assert index.aliases[0].language == "kotlin"


def test_cycles_reported_once() -> None:
    source = "typealias A = B\ntypealias B = C\ntypealias C = A\ntypealias D = A\n"
    index = AliasIndex.build(parse_document(f"```kotlin\n{source}```\n"))
    (cycle,) = index.cycles()
    assert [a.name for a in cycle] == ["A", "B", "C"]


def test_self_alias_is_a_cycle() -> None:
    index = AliasIndex.build(parse_document("```python\ntype Loop = Loop\n```\n"))
    (cycle,) = index.cycles()
    assert [a.name for a in cycle] == ["Loop"]


def test_recursive_structural_alias_is_not_a_cycle() -> None:
    source = "type Json = dict[str, Json] | list[Json] | str | int | None\n"
    index = AliasIndex.build(parse_document(f"```python\n{source}```\n"))
    assert index.cycles() == []
    assert index.unresolved(index.aliases[0]) == []


def test_same_name_in_different_languages_is_not_a_cycle() -> None:
    text = "```kotlin\ntypealias A = B\n```\n```swift\ntypealias B = A\n```\n"
    assert AliasIndex.build(parse_document(text)).cycles() == []


def test_duplicates_need_different_targets() -> None:
    text = (
        "```kotlin\ntypealias Id = Int\n```\n"
        "```kotlin\ntypealias Id =  Int\ntypealias Id = Long\n```\n"
    )
    ((first, later),) = AliasIndex.build(parse_document(text)).duplicates()
    assert (first.line, first.target) == (2, "Int")
    assert (later.line, later.target) == (6, "Long")
