"""Alias, type, and wrapper extraction for Python blocks using ``ast``.

Blocks that fail to parse yield nothing; the syntax rule reports them.
"""

from __future__ import annotations

import ast

from aliasdoc.aliases.models import TypeDeclaration, WrapperCandidate
from aliasdoc.core.types import AliasDeclaration
from aliasdoc.document.models import CodeBlock

_GENERIC_BASES = {"object", "Generic", "Protocol"}


def _parse(source: str) -> ast.Module | None:
    try:
        return ast.parse(source)
    except SyntaxError:
        return None


def _is_typealias_annotation(node: ast.expr) -> bool:
    if isinstance(node, ast.Name):
        return node.id == "TypeAlias"
    if isinstance(node, ast.Attribute):
        return node.attr == "TypeAlias"
    return False


def _call_name(node: ast.expr) -> str | None:
    if not isinstance(node, ast.Call):
        return None
    func = node.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


def _type_param_names(node: ast.expr | None) -> tuple[str, ...]:
    if isinstance(node, ast.Tuple):
        return tuple(elt.id for elt in node.elts if isinstance(elt, ast.Name))
    return ()


def extract_aliases(block: CodeBlock) -> list[AliasDeclaration]:
    """Find ``type X = ...``, ``X: TypeAlias = ...``, and ``TypeAliasType(...)``."""
    tree = _parse(block.source)
    if tree is None:
        return []

    aliases: list[AliasDeclaration] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.TypeAlias) and isinstance(node.name, ast.Name):
            aliases.append(
                AliasDeclaration(
                    name=node.name.id,
                    target=ast.unparse(node.value),
                    language="python",
                    line=block.document_line(node.lineno),
                    parameters=tuple(p.name for p in node.type_params),
                )
            )
        elif (
            isinstance(node, ast.AnnAssign)
            and isinstance(node.target, ast.Name)
            and node.value is not None
            and _is_typealias_annotation(node.annotation)
        ):
            aliases.append(
                AliasDeclaration(
                    name=node.target.id,
                    target=ast.unparse(node.value),
                    language="python",
                    line=block.document_line(node.lineno),
                )
            )
        elif (
            isinstance(node, ast.Assign)
            and len(node.targets) == 1
            and isinstance(node.targets[0], ast.Name)
            and isinstance(node.value, ast.Call)
            and _call_name(node.value) == "TypeAliasType"
        ):
            call = node.value
            if len(call.args) < 2:
                continue
            params: tuple[str, ...] = ()
            for keyword in call.keywords:
                if keyword.arg == "type_params":
                    params = _type_param_names(keyword.value)
            aliases.append(
                AliasDeclaration(
                    name=node.targets[0].id,
                    target=ast.unparse(call.args[1]),
                    language="python",
                    line=block.document_line(node.lineno),
                    parameters=params,
                )
            )
    return aliases


def extract_types(block: CodeBlock) -> list[TypeDeclaration]:
    """Classes, imported names, and type variables bound in the block."""
    tree = _parse(block.source)
    if tree is None:
        return []

    declared: list[TypeDeclaration] = []

    def add(name: str, lineno: int) -> None:
        declared.append(TypeDeclaration(name, "python", block.document_line(lineno)))

    for node in ast.walk(tree):
        if isinstance(node, ast.ClassDef):
            add(node.name, node.lineno)
            for param in node.type_params:
                add(param.name, node.lineno)
        elif isinstance(node, ast.FunctionDef | ast.AsyncFunctionDef):
            for param in node.type_params:
                add(param.name, node.lineno)
        elif isinstance(node, ast.Import | ast.ImportFrom):
            for name in node.names:
                add((name.asname or name.name).split(".")[0], node.lineno)
        elif (
            isinstance(node, ast.Assign)
            and len(node.targets) == 1
            and isinstance(node.targets[0], ast.Name)
            and _call_name(node.value) in ("TypeVar", "ParamSpec", "TypeVarTuple", "NewType")
        ):
            add(node.targets[0].id, node.lineno)

    # Module-level implicit aliases and class factories: Vector = list[float]
    for node in tree.body:
        if (
            isinstance(node, ast.Assign)
            and len(node.targets) == 1
            and isinstance(node.targets[0], ast.Name)
            and _binds_type(node.value)
        ):
            add(node.targets[0].id, node.lineno)
    return declared


_TYPE_FACTORIES = {"namedtuple", "NamedTuple", "TypedDict", "Enum", "IntEnum", "StrEnum", "Flag"}


def _binds_type(value: ast.expr) -> bool:
    """True if value reads as a type expression or a call that builds a class."""
    if isinstance(value, ast.Subscript | ast.Name | ast.Attribute):
        return True
    if isinstance(value, ast.BinOp) and isinstance(value.op, ast.BitOr):
        return all(
            _binds_type(side) or (isinstance(side, ast.Constant) and side.value is None)
            for side in (value.left, value.right)
        )
    return _call_name(value) in _TYPE_FACTORIES


def target_names(target: str) -> list[str]:
    """Unqualified names referenced by a Python type expression.

    Attribute chains (``typing.List``) are qualified and skipped. String
    forward references are parsed recursively; ``Literal[...]`` arguments
    are values, not types.
    """
    try:
        tree = ast.parse(target, mode="eval")
    except SyntaxError:
        return []

    names: list[str] = []

    def visit(node: ast.AST) -> None:
        if isinstance(node, ast.Name):
            names.append(node.id)
        elif isinstance(node, ast.Attribute):
            return
        elif isinstance(node, ast.Constant) and isinstance(node.value, str):
            names.extend(target_names(node.value))
        elif isinstance(node, ast.Subscript):
            visit(node.value)
            base = node.value
            if isinstance(base, ast.Name | ast.Attribute) and (
                getattr(base, "id", None) == "Literal" or getattr(base, "attr", None) == "Literal"
            ):
                return
            visit(node.slice)
        else:
            for child in ast.iter_child_nodes(node):
                visit(child)

    visit(tree.body)
    return names


def _self_attribute(node: ast.AST) -> str | None:
    if (
        isinstance(node, ast.Attribute)
        and isinstance(node.value, ast.Name)
        and node.value.id == "self"
    ):
        return node.attr
    return None


def _body_without_docstring(body: list[ast.stmt]) -> list[ast.stmt]:
    if (
        body
        and isinstance(body[0], ast.Expr)
        and isinstance(body[0].value, ast.Constant)
        and isinstance(body[0].value.value, str)
    ):
        return body[1:]
    return body


def _self_attributes(node: ast.AST) -> set[str]:
    return {attr for child in ast.walk(node) if (attr := _self_attribute(child)) is not None}


def extract_wrappers(block: CodeBlock) -> list[WrapperCandidate]:
    """Classes storing one field whose methods are one-statement accessors."""
    tree = _parse(block.source)
    if tree is None:
        return []

    wrappers: list[WrapperCandidate] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.ClassDef):
            continue
        candidate = _wrapper_candidate(node, block)
        if candidate is not None:
            wrappers.append(candidate)
    return wrappers


def _base_name(base: ast.expr) -> str | None:
    if isinstance(base, ast.Subscript):
        base = base.value
    if isinstance(base, ast.Name):
        return base.id
    if isinstance(base, ast.Attribute):
        return base.attr
    return None


def _wrapper_candidate(node: ast.ClassDef, block: CodeBlock) -> WrapperCandidate | None:
    if any(_base_name(base) not in _GENERIC_BASES for base in node.bases):
        return None

    fields: dict[str, str] = {}
    methods: list[ast.FunctionDef | ast.AsyncFunctionDef] = []
    for stmt in _body_without_docstring(node.body):
        if isinstance(stmt, ast.AnnAssign) and isinstance(stmt.target, ast.Name):
            fields.setdefault(stmt.target.id, ast.unparse(stmt.annotation))
        elif isinstance(stmt, ast.FunctionDef | ast.AsyncFunctionDef):
            methods.append(stmt)
        elif isinstance(stmt, ast.Assign) and all(
            isinstance(t, ast.Name) and t.id == "__slots__" for t in stmt.targets
        ):
            continue
        elif isinstance(stmt, ast.Pass):
            continue
        else:
            return None

    for method in methods:
        if method.name != "__init__":
            continue
        annotations = {
            arg.arg: ast.unparse(arg.annotation)
            for arg in method.args.args
            if arg.annotation is not None
        }
        for stmt in ast.walk(method):
            targets: list[ast.expr] = []
            if isinstance(stmt, ast.Assign):
                targets = list(stmt.targets)
            elif isinstance(stmt, ast.AnnAssign):
                targets = [stmt.target]
            for target in targets:
                attr = _self_attribute(target)
                if attr is None:
                    continue
                annotation = ""
                if isinstance(stmt, ast.AnnAssign):
                    annotation = ast.unparse(stmt.annotation)
                elif isinstance(stmt.value, ast.Name):
                    annotation = annotations.get(stmt.value.id, "")
                fields.setdefault(attr, annotation)

    if len(fields) != 1:
        return None
    field_name, field_type = next(iter(fields.items()))

    for method in methods:
        if method.name == "__init__":
            continue
        body = _body_without_docstring(method.body)
        if len(body) != 1:
            return None
        if _self_attributes(body[0]) - {field_name}:
            return None

    return WrapperCandidate(
        name=node.name,
        field=field_name,
        field_type=field_type,
        language="python",
        line=block.document_line(node.lineno),
    )
