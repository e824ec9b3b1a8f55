"""Names each language resolves without a declaration.

Python's set is built from the interpreter itself; the others list the
types and type-position keywords a tutorial snippet can use unqualified.
"""

from __future__ import annotations

import builtins
import collections.abc
import typing

PYTHON_BUILTINS: frozenset[str] = frozenset(
    name for name in dir(builtins) if not name.startswith("_")
) | frozenset(typing.__all__) | frozenset(collections.abc.__all__)

_JVM_COMMON = {
    "Any", "Unit", "Nothing", "String", "Int", "Long", "Short", "Byte", "Double", "Float",
    "Boolean", "Char", "Number", "Array", "List", "Set", "Map", "Collection", "Iterable",
    "Iterator", "Comparable", "Comparator", "Pair", "Triple", "Object", "Integer",
    "Character", "Void", "HashMap", "HashSet", "ArrayList", "LinkedList", "LinkedHashMap",
    "LinkedHashSet", "TreeMap", "TreeSet", "Optional", "Exception", "Throwable",
    "RuntimeException", "CharSequence", "Function", "Supplier", "Consumer", "Predicate",
    "Stream", "Sequence", "Deque", "Queue", "Record", "Enum", "UUID", "BigDecimal",
    "BigInteger", "LocalDate", "LocalDateTime", "Instant", "Duration",
}

KNOWN_TYPES: dict[str, frozenset[str]] = {
    "kotlin": frozenset(
        _JVM_COMMON
        | {
            "MutableList", "MutableSet", "MutableMap", "MutableCollection", "IntArray",
            "LongArray", "ByteArray", "CharArray", "DoubleArray", "FloatArray",
            "BooleanArray", "ShortArray", "Result", "Lazy", "Regex", "IntRange",
            "UInt", "ULong", "UShort", "UByte", "Flow", "Job", "Deferred",
        }
    ),
    "java": frozenset(
        _JVM_COMMON
        | {
            "int", "long", "short", "byte", "double", "float", "boolean", "char", "void",
            "var", "Collections", "Arrays", "Objects", "StringBuilder", "Math",
        }
    ),
    "scala": frozenset(
        _JVM_COMMON
        | {
            "AnyRef", "AnyVal", "Null", "Option", "Some", "None", "Seq", "IndexedSeq",
            "Vector", "Either", "Left", "Right", "Future", "Try", "BigInt", "Function0",
            "Function1", "Function2", "Tuple2", "Tuple3", "LazyList", "Range",
        }
    ),
    "swift": frozenset(
        {
            "Int", "Int8", "Int16", "Int32", "Int64", "UInt", "UInt8", "UInt16", "UInt32",
            "UInt64", "Double", "Float", "Bool", "String", "Character", "Array", "Dictionary",
            "Set", "Optional", "Void", "Any", "AnyObject", "AnyHashable", "Result", "Error",
            "Never", "Hashable", "Equatable", "Comparable", "Codable", "Identifiable",
            "Sequence", "Collection", "Substring", "Data", "Date", "URL", "UUID", "Self",
        }
    ),
    "typescript": frozenset(
        {
            "string", "number", "boolean", "bigint", "symbol", "object", "unknown", "any",
            "never", "void", "undefined", "null", "Array", "ReadonlyArray", "Record",
            "Partial", "Required", "Readonly", "Pick", "Omit", "Exclude", "Extract",
            "NonNullable", "ReturnType", "Parameters", "InstanceType", "Awaited", "Promise",
            "Map", "Set", "WeakMap", "WeakSet", "Date", "RegExp", "Error", "Function",
            "Object", "String", "Number", "Boolean", "Iterable", "Uppercase", "Lowercase",
            "keyof", "typeof", "infer", "extends", "readonly", "in", "is", "true", "false",
        }
    ),
    "rust": frozenset(
        {
            "i8", "i16", "i32", "i64", "i128", "isize", "u8", "u16", "u32", "u64", "u128",
            "usize", "f32", "f64", "bool", "char", "str", "String", "Vec", "VecDeque",
            "Option", "Result", "Box", "Rc", "Arc", "Weak", "Cell", "RefCell", "Mutex",
            "RwLock", "HashMap", "HashSet", "BTreeMap", "BTreeSet", "Cow", "Self", "Fn",
            "FnMut", "FnOnce", "dyn", "impl", "mut", "const", "fn", "Send", "Sync",
            "Sized", "Iterator", "PhantomData",
        }
    ),
    "go": frozenset(
        {
            "int", "int8", "int16", "int32", "int64", "uint", "uint8", "uint16", "uint32",
            "uint64", "uintptr", "float32", "float64", "complex64", "complex128", "string",
            "bool", "byte", "rune", "error", "any", "comparable", "map", "chan", "func",
            "interface", "struct",
        }
    ),
    "c": frozenset(
        {
            "int", "char", "short", "long", "float", "double", "void", "unsigned", "signed",
            "const", "volatile", "struct", "enum", "union", "size_t", "ssize_t", "ptrdiff_t",
            "int8_t", "int16_t", "int32_t", "int64_t", "uint8_t", "uint16_t", "uint32_t",
            "uint64_t", "intptr_t", "uintptr_t", "wchar_t", "bool", "FILE",
        }
    ),
    "csharp": frozenset(
        {
            "int", "uint", "long", "ulong", "short", "ushort", "byte", "sbyte", "float",
            "double", "decimal", "bool", "char", "string", "object", "void", "dynamic",
            "List", "Dictionary", "HashSet", "IEnumerable", "IList", "ICollection",
            "IDictionary", "ISet", "IReadOnlyList", "IReadOnlyCollection", "Task",
            "Func", "Action", "Tuple", "Guid", "DateTime", "TimeSpan", "Nullable",
        }
    ),
}
KNOWN_TYPES["cpp"] = KNOWN_TYPES["c"] | {
    "auto", "typename", "template", "class", "bool", "nullptr_t",
}

# Words that can appear inside a type expression without naming a type
TYPE_KEYWORDS: dict[str, frozenset[str]] = {
    "kotlin": frozenset({"suspend", "in", "out", "reified", "where", "fun"}),
    "scala": frozenset({"with", "forSome", "type"}),
    "swift": frozenset({"inout", "some", "any", "throws", "async", "rethrows", "escaping"}),
    "typescript": frozenset({"as", "const", "unique", "asserts", "new"}),
    "rust": frozenset({"where", "for", "as", "static", "unsafe", "extern"}),
    "go": frozenset(),
    "c": frozenset(),
    "cpp": frozenset({"std", "const", "typename"}),
    "csharp": frozenset({"global", "ref", "out", "in"}),
}


def known_types(language: str) -> frozenset[str]:
    """Names that resolve without a declaration in language."""
    if language == "python":
        return PYTHON_BUILTINS
    return KNOWN_TYPES.get(language, frozenset()) | TYPE_KEYWORDS.get(language, frozenset())
