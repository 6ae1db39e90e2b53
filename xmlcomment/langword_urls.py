"""Keyword link table for `<see langword="..."/>` references."""

from collections.abc import Mapping

LANGUAGE_REFERENCE = "https://learn.microsoft.com/dotnet/csharp/language-reference"

_INTEGRAL = "builtin-types/integral-numeric-types"
_FLOATING = "builtin-types/floating-point-numeric-types"
_SELECTION = "statements/selection-statements"
_ITERATION = "statements/iteration-statements"
_JUMP = "statements/jump-statements"
_EXCEPTIONS = "statements/exception-handling-statements"

_PATHS: dict[str, str] = {
    # Literals and built-in types
    "null": "keywords/null",
    "true": "builtin-types/bool",
    "false": "builtin-types/bool",
    "bool": "builtin-types/bool",
    "byte": _INTEGRAL,
    "sbyte": _INTEGRAL,
    "short": _INTEGRAL,
    "ushort": _INTEGRAL,
    "int": _INTEGRAL,
    "uint": _INTEGRAL,
    "long": _INTEGRAL,
    "ulong": _INTEGRAL,
    "nint": _INTEGRAL,
    "nuint": _INTEGRAL,
    "float": _FLOATING,
    "double": _FLOATING,
    "decimal": _FLOATING,
    "char": "builtin-types/char",
    "string": "builtin-types/reference-types#the-string-type",
    "object": "builtin-types/reference-types#the-object-type",
    "dynamic": "builtin-types/reference-types#the-dynamic-type",
    "void": "builtin-types/void",
    "var": "statements/declarations#implicitly-typed-local-variables",
    # Type declarations
    "class": "keywords/class",
    "struct": "builtin-types/struct",
    "interface": "keywords/interface",
    "enum": "builtin-types/enum",
    "record": "builtin-types/record",
    "delegate": "builtin-types/reference-types#the-delegate-type",
    "namespace": "keywords/namespace",
    # Modifiers
    "public": "keywords/public",
    "private": "keywords/private",
    "protected": "keywords/protected",
    "internal": "keywords/internal",
    "abstract": "keywords/abstract",
    "sealed": "keywords/sealed",
    "static": "keywords/static",
    "virtual": "keywords/virtual",
    "override": "keywords/override",
    "async": "keywords/async",
    "const": "keywords/const",
    "readonly": "keywords/readonly",
    "extern": "keywords/extern",
    "unsafe": "keywords/unsafe",
    "volatile": "keywords/volatile",
    "partial": "keywords/partial-type",
    "event": "keywords/event",
    "in": "keywords/in",
    "out": "keywords/out",
    "ref": "keywords/ref",
    "params": "keywords/method-parameters#params-modifier",
    "this": "keywords/this",
    "base": "keywords/base",
    "get": "keywords/get",
    "set": "keywords/set",
    "init": "keywords/init",
    "value": "keywords/value",
    "where": "keywords/where-generic-type-constraint",
    # Statements
    "if": f"{_SELECTION}#the-if-statement",
    "else": f"{_SELECTION}#the-if-statement",
    "switch": f"{_SELECTION}#the-switch-statement",
    "case": f"{_SELECTION}#the-switch-statement",
    "for": f"{_ITERATION}#the-for-statement",
    "foreach": f"{_ITERATION}#the-foreach-statement",
    "while": f"{_ITERATION}#the-while-statement",
    "do": f"{_ITERATION}#the-do-statement",
    "break": f"{_JUMP}#the-break-statement",
    "continue": f"{_JUMP}#the-continue-statement",
    "return": f"{_JUMP}#the-return-statement",
    "goto": f"{_JUMP}#the-goto-statement",
    "throw": f"{_EXCEPTIONS}#the-throw-statement",
    "try": f"{_EXCEPTIONS}#the-try-statement",
    "catch": f"{_EXCEPTIONS}#the-try-catch-statement",
    "finally": f"{_EXCEPTIONS}#the-try-finally-statement",
    "using": "statements/using",
    "lock": "statements/lock",
    "yield": "statements/yield",
    "checked": "statements/checked-and-unchecked",
    "unchecked": "statements/checked-and-unchecked",
    # Operators
    "new": "operators/new-operator",
    "await": "operators/await",
    "typeof": "operators/type-testing-and-cast#typeof-operator",
    "is": "operators/is",
    "as": "operators/type-testing-and-cast#as-operator",
    "sizeof": "operators/sizeof",
    "nameof": "operators/nameof",
    "default": "operators/default",
    "operator": "operators/operator-overloading",
    "implicit": "operators/user-defined-conversion-operators",
    "explicit": "operators/user-defined-conversion-operators",
}

LANGWORD_URLS: dict[str, str] = {
    word: f"{LANGUAGE_REFERENCE}/{path}" for word, path in _PATHS.items()
}


def get_langword_url(langword: str) -> str | None:
    """Return the language reference url for a keyword, or None when unknown."""
    return LANGWORD_URLS.get(langword)


class KeywordLinkTable:
    """Keyword to url lookup: the built-in table plus configured overrides.

    Read-only after construction, so one instance can serve concurrent builds.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        """Initialize the table, letting overrides replace built-in entries."""
        self.urls = dict(LANGWORD_URLS)
        self.urls.update(
            {str(k): "" if v is None else str(v) for k, v in (overrides or {}).items()}
        )

    def __call__(self, langword: str) -> str | None:
        """Resolve a keyword; an empty configured url disables the link."""
        return self.urls.get(langword) or None
