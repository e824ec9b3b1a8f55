"""Language dispatch and document-wide alias index.

Usage:
    index = AliasIndex.build(document, canonical=registry.canonical)
    for alias in index.aliases:
        missing = index.unresolved(alias)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from aliasdoc.aliases import lexical, python
from aliasdoc.aliases.builtins import known_types
from aliasdoc.aliases.models import TypeDeclaration, WrapperCandidate
from aliasdoc.core.types import AliasDeclaration
from aliasdoc.document.models import CodeBlock, Document


def _language(block: CodeBlock, language: str | None) -> str:
    return (language or block.language).lower()


def extract_aliases(block: CodeBlock, language: str | None = None) -> list[AliasDeclaration]:
    """Alias declarations in block; language defaults to the block's tag."""
    language = _language(block, language)
    if language == "python":
        return python.extract_aliases(block)
    return lexical.extract_aliases(block, language)


def extract_types(block: CodeBlock, language: str | None = None) -> list[TypeDeclaration]:
    """Named types (classes, structs, imports, type variables) declared in block."""
    language = _language(block, language)
    if language == "python":
        return python.extract_types(block)
    return lexical.extract_types(block, language)


def extract_wrappers(block: CodeBlock, language: str | None = None) -> list[WrapperCandidate]:
    """Encapsulating wrapper classes declared in block."""
    language = _language(block, language)
    if language == "python":
        return python.extract_wrappers(block)
    return lexical.extract_wrappers(block, language)


def target_names(alias: AliasDeclaration) -> list[str]:
    """Unqualified names referenced by the alias target."""
    if alias.language == "python":
        return python.target_names(alias.target)
    return lexical.target_names(alias.target, alias.language)


def resolve_target(alias: AliasDeclaration, known: Iterable[str]) -> list[str]:
    """Names in the alias target that resolve to nothing.

    A name resolves if it is a builtin of the alias's language, one of the
    alias's own type parameters, or in known. Order of first appearance is
    kept; duplicates are dropped.
    """
    resolvable = set(known) | set(alias.parameters) | known_types(alias.language)
    missing: list[str] = []
    for name in target_names(alias):
        if name not in resolvable and name not in missing:
            missing.append(name)
    return missing


@dataclass(slots=True)
class AliasIndex:
    """Aliases, declared types, and wrappers across every block of a document."""

    aliases: list[AliasDeclaration] = field(default_factory=list)
    types: list[TypeDeclaration] = field(default_factory=list)
    wrappers: list[WrapperCandidate] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        document: Document,
        canonical: Callable[[str], str] = str.lower,
    ) -> AliasIndex:
        index = cls()
        for block in document.code_blocks:
            if not block.language:
                continue
            language = canonical(block.language)
            index.aliases.extend(extract_aliases(block, language))
            index.types.extend(extract_types(block, language))
            index.wrappers.extend(extract_wrappers(block, language))
        return index

    def declared_names(self) -> set[str]:
        """Every type and alias name declared anywhere in the document."""
        return {t.name for t in self.types} | {a.name for a in self.aliases}

    def unresolved(self, alias: AliasDeclaration, extra: Iterable[str] = ()) -> list[str]:
        return resolve_target(alias, self.declared_names() | set(extra))

    def cycles(self) -> list[list[AliasDeclaration]]:
        """Alias chains that only ever point at other aliases.

        Only bare-name targets form edges (``A = B``). Recursive structural
        aliases such as ``Json = dict[str, Json]`` are valid and ignored.
        Each cycle is reported once, starting from its first declaration.
        """
        by_key = {(a.language, a.name): a for a in self.aliases}
        edges: dict[tuple[str, str], tuple[str, str]] = {}
        for alias in self.aliases:
            target = alias.target.strip()
            if (alias.language, target) in by_key:
                edges[(alias.language, alias.name)] = (alias.language, target)

        cycles: list[list[AliasDeclaration]] = []
        reported: set[tuple[str, str]] = set()
        for start in edges:
            if start in reported:
                continue
            path: list[tuple[str, str]] = []
            node: tuple[str, str] | None = start
            while node is not None and node not in path and node not in reported:
                path.append(node)
                node = edges.get(node)
            if node is not None and node in path:
                loop = path[path.index(node) :]
                reported.update(loop)
                cycles.append(sorted((by_key[key] for key in loop), key=lambda a: a.line))
            reported.update(path)
        return cycles

    def duplicates(self) -> list[tuple[AliasDeclaration, AliasDeclaration]]:
        """(first, later) pairs redeclaring a name with a different target."""
        first_seen: dict[tuple[str, str], AliasDeclaration] = {}
        pairs: list[tuple[AliasDeclaration, AliasDeclaration]] = []
        for alias in sorted(self.aliases, key=lambda a: a.line):
            key = (alias.language, alias.name)
            previous = first_seen.get(key)
            if previous is None:
                first_seen[key] = alias
            elif "".join(previous.target.split()) != "".join(alias.target.split()):
                pairs.append((previous, alias))
        return pairs
