"""Alias, type, and wrapper extraction for brace languages.

There is no parser for these languages here, so extraction works on the
block text after comments and string literals are blanked out. Line
structure is preserved so offsets still map to block lines.
"""

from __future__ import annotations

import re

from aliasdoc.aliases.models import TypeDeclaration, WrapperCandidate
from aliasdoc.core.types import AliasDeclaration
from aliasdoc.document.models import CodeBlock

_SCRUB = re.compile(
    r"//[^\n]*"
    r"|/\*.*?\*/"
    r'|""".*?"""'
    r'|"(?:\\.|[^"\\\n])*"'
    r"|'(?:\\.|[^'\\\n])'",
    re.S,
)
_SCRUB_BACKTICK = re.compile(_SCRUB.pattern + r"|`(?:\\.|[^`\\])*`", re.S)
_BACKTICK_LANGUAGES = {"typescript", "javascript", "go"}

_LINE_TARGET = r"\s*=\s*(?P<target>[^\n]+?)[ \t;]*$"
ALIAS_PATTERNS: dict[str, list[re.Pattern[str]]] = {
    "kotlin": [
        re.compile(
            r"^[ \t]*(?:(?:public|private|internal|actual|expect)\s+)*"
            r"typealias\s+(?P<name>\w+)\s*(?:<(?P<params>[^=\n]*)>)?" + _LINE_TARGET,
            re.M,
        )
    ],
    "swift": [
        re.compile(
            r"^[ \t]*(?:(?:public|private|fileprivate|internal|open)\s+)*"
            r"typealias\s+(?P<name>\w+)\s*(?:<(?P<params>[^=\n]*)>)?" + _LINE_TARGET,
            re.M,
        )
    ],
    "scala": [
        re.compile(
            r"^[ \t]*(?:(?:private|protected|opaque|override|final)\s+)*"
            r"type\s+(?P<name>\w+)\s*(?:\[(?P<params>[^=\n]*)\])?" + _LINE_TARGET,
            re.M,
        )
    ],
    "typescript": [
        re.compile(
            r"^[ \t]*(?:export\s+)?(?:declare\s+)?"
            r"type\s+(?P<name>\w+)\s*(?:<(?P<params>[^=\n]*)>)?" + _LINE_TARGET,
            re.M,
        )
    ],
    "rust": [
        re.compile(
            r"^[ \t]*(?:pub(?:\([^)]*\))?\s+)?"
            r"type\s+(?P<name>\w+)\s*(?:<(?P<params>[^=\n]*)>)?\s*=\s*(?P<target>[^;]+?)\s*;",
            re.M,
        )
    ],
    "go": [
        re.compile(
            r"^[ \t]*type\s+(?P<name>\w+)\s*(?:\[(?P<params>[^\]=\n]*)\])?" + _LINE_TARGET,
            re.M,
        )
    ],
    "c": [
        re.compile(r"\btypedef\s+(?P<target>[^;{}()]+?)\s*\b(?P<name>\w+)\s*;"),
    ],
    "csharp": [
        re.compile(
            r"^[ \t]*(?:global\s+)?using\s+(?P<name>\w+)\s*=\s*(?P<target>[^;]+?)\s*;",
            re.M,
        )
    ],
}
ALIAS_PATTERNS["cpp"] = [
    *ALIAS_PATTERNS["c"],
    re.compile(
        r"^[ \t]*(?:template\s*<(?P<params>[^>]*)>\s*)?"
        r"using\s+(?P<name>\w+)\s*=\s*(?P<target>[^;]+?)\s*;",
        re.M,
    ),
]

_TYPE_DECLARATION = re.compile(
    r"\b(?:class|interface|enum|struct|record|object|trait|protocol|union|actor)"
    r"\s+(?P<name>[A-Za-z_]\w*)"
)
_GO_TYPE = re.compile(r"^[ \t]*type\s+(?P<name>\w+)\s*(?:\[[^\]]*\])?\s+(?!=)\S", re.M)
_TARGET_IDENT = re.compile(
    r"(?<![\w.$'])(?>[A-Za-z_]\w*(?:(?:\.|::)[A-Za-z_]\w*)*)(?!\s*\??:(?!:))"
)
_IDENT = re.compile(r"[A-Za-z_]\w*")
# Type variables introduced inside a target: [K in keyof T] and infer U
_BOUND_IN_TARGET = re.compile(r"\[\s*([A-Za-z_]\w*)\s+in\b|\binfer\s+([A-Za-z_]\w*)")
_PARAM_MODIFIERS = {"in", "out", "reified", "typename", "class", "const", "impl"}

WRAPPER_LANGUAGES = {"kotlin", "scala", "java", "swift", "typescript", "csharp"}
_HEADER_KEYWORDS = {
    "kotlin": "class",
    "scala": "class",
    "swift": "class|struct",
    "typescript": "class",
    "java": "class|record",
    "csharp": "class|struct|record",
}
_NESTED_TYPES = {"class", "object", "interface", "enum", "struct", "record", "protocol"}
_DISQUALIFYING_PREFIXES = {
    "abstract", "sealed", "enum", "annotation", "interface", "open", "value", "inline",
}
_MODIFIERS = {
    "private", "public", "protected", "internal", "fileprivate", "final", "readonly",
    "override", "lateinit", "transient", "volatile", "required", "let", "var", "val",
    "weak", "unowned", "mutating",
}
_KOTLIN_PROPERTY = re.compile(
    r"^\s*(?:@\w+\s+)*(?:(?:private|protected|internal|public|override|open)\s+)*"
    r"(?:val|var)\s+(?P<name>\w+)\s*:\s*(?P<type>.+?)\s*(?:=.*)?$",
    re.S,
)
_SCALA_PARAM = re.compile(
    r"^\s*(?:(?:private|protected|override)\s+)*(?P<decl>(?:val|var)\s+)?"
    r"(?P<name>\w+)\s*:\s*(?P<type>.+?)\s*(?:=.*)?$",
    re.S,
)
_TS_PARAMETER_PROPERTY = re.compile(
    r"^\s*(?:(?:private|public|protected|readonly)\s+)+"
    r"(?P<name>\w+)\s*\??\s*:\s*(?P<type>.+?)\s*(?:=.*)?$",
    re.S,
)
_ANNOTATIONS = re.compile(r"^(?:@\w+(?:\([^)]*\))?\s*)+")


def scrub(source: str, language: str) -> str:
    """Blank out comments and string literals, keeping every newline."""
    pattern = _SCRUB_BACKTICK if language in _BACKTICK_LANGUAGES else _SCRUB

    def replace(match: re.Match[str]) -> str:
        text = match.group(0)
        newlines = "\n" * text.count("\n")
        if text.startswith(("//", "/*")):
            return " " + newlines
        return '""' + newlines

    return pattern.sub(replace, source)


def _line_of(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def split_top_level(text: str, separator: str = ",") -> list[str]:
    """Split on separator where no bracket is open."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for index, char in enumerate(text):
        if char in "([{<":
            depth += 1
        elif char in ")]}" or (char == ">" and text[index - 1 : index] not in ("-", "=")):
            depth = max(depth - 1, 0)
        if char == separator and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def parameter_names(params: str | None) -> tuple[str, ...]:
    """Names of declared type parameters (``out T : Any`` -> ``T``)."""
    if not params:
        return ()
    names: list[str] = []
    for part in split_top_level(params):
        words = [w for w in _IDENT.findall(part) if w not in _PARAM_MODIFIERS]
        if words:
            names.append(words[0])
    return tuple(names)


def extract_aliases(block: CodeBlock, language: str) -> list[AliasDeclaration]:
    """Find alias declarations using the language's alias syntax."""
    text = scrub(block.source, language)
    aliases: list[AliasDeclaration] = []
    for pattern in ALIAS_PATTERNS.get(language, []):
        for match in pattern.finditer(text):
            groups = match.groupdict()
            aliases.append(
                AliasDeclaration(
                    name=match.group("name"),
                    target=" ".join(match.group("target").split()),
                    language=language,
                    line=block.document_line(_line_of(text, match.start("name"))),
                    parameters=parameter_names(groups.get("params")),
                )
            )
    aliases.sort(key=lambda alias: alias.line)
    return aliases


def extract_types(block: CodeBlock, language: str) -> list[TypeDeclaration]:
    """Named types declared by the block."""
    text = scrub(block.source, language)
    declared = [
        TypeDeclaration(
            match.group("name"), language, block.document_line(_line_of(text, match.start()))
        )
        for match in _TYPE_DECLARATION.finditer(text)
    ]
    if language == "go":
        declared.extend(
            TypeDeclaration(
                match.group("name"), language, block.document_line(_line_of(text, match.start()))
            )
            for match in _GO_TYPE.finditer(text)
        )
    return declared


def target_names(target: str, language: str) -> list[str]:
    """Unqualified identifiers in a type expression.

    Qualified names (``java.util.List``, ``std::vector``) are external and
    skipped, as are parameter names in function types (``(name: String) -> Unit``)
    and type variables the target binds itself (``[K in keyof T]``, ``infer U``).
    """
    text = scrub(target, language).lstrip(":")
    bound = {name for match in _BOUND_IN_TARGET.findall(text) for name in match if name}
    return [
        name
        for name in _TARGET_IDENT.findall(text)
        if "." not in name and "::" not in name and name not in bound
    ]


def _matching(text: str, start: int, opener: str, closer: str) -> int:
    """Index of the bracket closing the one at start (len(text) if unclosed)."""
    depth = 0
    for index in range(start, len(text)):
        if text[index] == opener:
            depth += 1
        elif text[index] == closer:
            depth -= 1
            if depth == 0:
                return index
    return len(text)


def _next_non_space(text: str, start: int) -> str:
    stripped = text[start:].lstrip()
    return stripped[:1]


def _members(body: str) -> list[tuple[str, str | None]]:
    """Split a class body into (declaration, block) pairs at depth 0."""
    members: list[tuple[str, str | None]] = []
    current: list[str] = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == "{":
            end = _matching(body, i, "{", "}")
            members.append(("".join(current).strip(), body[i + 1 : end]))
            current = []
            i = end + 1
            continue
        if char == "(":
            end = _matching(body, i, "(", ")")
            current.append(body[i : end + 1])
            i = end + 1
            continue
        if char in ";\n":
            if char == "\n" and _next_non_space(body, i + 1) == "{":
                current.append(" ")
                i += 1
                continue
            text = "".join(current).strip()
            if text:
                members.append((text, None))
            current = []
            i += 1
            continue
        current.append(char)
        i += 1
    text = "".join(current).strip()
    if text:
        members.append((text, None))
    return members


def _statement_count(block: str) -> int:
    return sum(1 for text, _ in _members(block) if text)


def _split_header(header: str) -> tuple[str | None, str]:
    """Return (constructor parameters, header text outside any brackets)."""
    params: str | None = None
    outside: list[str] = []
    i = 0
    while i < len(header):
        char = header[i]
        if char == "(":
            end = _matching(header, i, "(", ")")
            if params is None:
                params = header[i + 1 : end]
            i = end + 1
            continue
        if char == "<":
            end = _matching(header, i, "<", ">")
            i = end + 1
            continue
        if char == "[":
            end = _matching(header, i, "[", "]")
            i = end + 1
            continue
        outside.append(char)
        i += 1
    return params, "".join(outside)


def _header_end(text: str, start: int) -> tuple[int, bool]:
    """Find where a class header ends; True if a body follows."""
    depth = 0
    i = start
    while i < len(text):
        char = text[i]
        if char in "(<[":
            depth += 1
        elif char in ")]" or (char == ">" and text[i - 1] not in "-="):
            depth -= 1
        elif depth <= 0 and char == "{":
            return i, True
        elif depth <= 0 and char in ";\n":
            if char == "\n" and _next_non_space(text, i + 1) == "{":
                i += 1
                continue
            return i, False
        i += 1
    return i, False


def _constructor_fields(
    language: str, keyword: str, prefix: set[str], params: str
) -> list[tuple[str, str]]:
    fields: list[tuple[str, str]] = []
    for part in split_top_level(params):
        part = _ANNOTATIONS.sub("", part)
        if language == "kotlin":
            match = _KOTLIN_PROPERTY.match(part)
            if match:
                fields.append((match.group("name"), match.group("type")))
        elif language == "scala":
            match = _SCALA_PARAM.match(part)
            if match and ("case" in prefix or match.group("decl")):
                fields.append((match.group("name"), match.group("type")))
        elif keyword == "record":
            words = part.split()
            if len(words) >= 2:
                fields.append((words[-1], " ".join(w for w in words[:-1] if w != "final")))
    return fields


def _field_declaration(text: str, language: str) -> tuple[str, str] | None:
    """Parse a stored field declaration; None if text is not one."""
    lhs = text.split("=", 1)[0]
    if "(" in lhs:
        return None
    words = lhs.replace(":", " : ").split()
    if not words or {"static", "companion", "const", "class", "object", "init"} & set(words):
        return None
    if language in ("kotlin", "scala") and not {"val", "var"} & set(words):
        return None
    if language == "swift" and not {"let", "var"} & set(words):
        return None
    if ":" in words:
        colon = words.index(":")
        names = [w for w in words[:colon] if w not in _MODIFIERS]
        if not names:
            return None
        return names[-1].rstrip("?!"), " ".join(words[colon + 1 :])
    names = [w for w in words if w not in _MODIFIERS]
    if len(names) < 2:
        return None
    return names[-1], " ".join(names[:-1])


def _member_name(text: str) -> str:
    head = text.split("(", 1)[0].split()
    return head[-1] if head else ""


def extract_wrappers(block: CodeBlock, language: str) -> list[WrapperCandidate]:
    """Classes holding exactly one stored field with trivial members only."""
    if language not in WRAPPER_LANGUAGES:
        return []
    text = scrub(block.source, language)
    header_re = re.compile(rf"\b(?P<kw>{_HEADER_KEYWORDS[language]})\s+(?P<name>[A-Za-z_]\w*)")

    wrappers: list[WrapperCandidate] = []
    for match in header_re.finditer(text):
        line_start = text.rfind("\n", 0, match.start()) + 1
        prefix = set(text[line_start : match.start()].split())
        if prefix & _DISQUALIFYING_PREFIXES:
            continue

        name = match.group("name")
        header_end, has_body = _header_end(text, match.end())
        params, outside = _split_header(text[match.end() : header_end])
        if re.search(r"\b(?:extends|implements|with)\b|:", outside):
            continue

        fields = _constructor_fields(language, match.group("kw"), prefix, params or "")
        trivial = True
        if has_body:
            body = text[header_end + 1 : _matching(text, header_end, "{", "}")]
            for member, member_block in _members(body):
                member = _ANNOTATIONS.sub("", member).strip()
                if member in ("", "init", "static") and member_block is not None:
                    continue
                if _NESTED_TYPES & set(member.split()):
                    continue
                member_name = _member_name(member)
                is_constructor = member_name in (name, "constructor", "init")
                if "(" in member.split("=", 1)[0]:
                    if language == "typescript" and member_name == "constructor":
                        inner = member[member.index("(") + 1 : member.rindex(")")]
                        for part in split_top_level(inner):
                            prop = _TS_PARAMETER_PROPERTY.match(part)
                            if prop:
                                fields.append((prop.group("name"), prop.group("type")))
                    if (
                        not is_constructor
                        and member_block is not None
                        and _statement_count(member_block) > 1
                    ):
                        trivial = False
                        break
                    continue
                if member_block is not None and language != "csharp":
                    # Computed property or nested type body
                    if _statement_count(member_block) > 1:
                        trivial = False
                        break
                    continue
                declared = _field_declaration(member, language)
                if declared is not None:
                    fields.append(declared)

        if trivial and len(fields) == 1:
            field_name, field_type = fields[0]
            wrappers.append(
                WrapperCandidate(
                    name=name,
                    field=field_name,
                    field_type=field_type,
                    language=language,
                    line=block.document_line(_line_of(text, match.start())),
                )
            )
    return wrappers
