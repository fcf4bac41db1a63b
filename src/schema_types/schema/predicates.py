"""Reusable predicates for building refinements.

Each factory returns a plain callable carrying a readable ``__name__`` so the
refined type gets a useful display name (e.g. ``{String | min_length(2)}``).
"""

import re
from collections.abc import Callable
from typing import TypeAlias, Any

Predicate: TypeAlias = Callable[[Any], bool]

# /body/flags, flags limited to the JavaScript regex literal set
REGEX_LITERAL = re.compile(r"^/(.+)/([gimuy]*)$")

_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
}


def _named(fn: Predicate, name: str) -> Predicate:
    fn.__name__ = name
    fn.__qualname__ = name
    return fn


def min_length(n: int) -> Predicate:
    return _named(lambda x: len(x) >= n, f"min_length({n})")


def max_length(n: int) -> Predicate:
    return _named(lambda x: len(x) <= n, f"max_length({n})")


def gt(n) -> Predicate:
    return _named(lambda x: x > n, f"gt({n})")


def gte(n) -> Predicate:
    return _named(lambda x: x >= n, f"gte({n})")


def lt(n) -> Predicate:
    return _named(lambda x: x < n, f"lt({n})")


def lte(n) -> Predicate:
    return _named(lambda x: x <= n, f"lte({n})")


def is_integer(x) -> bool:
    if isinstance(x, float):
        return x.is_integer()
    return isinstance(x, int) and not isinstance(x, bool)


def compile_pattern(pattern: str) -> tuple[re.Pattern, bool]:
    """Compile a schema ``pattern`` value.

    ``/body/flags`` literals use body and flags; anything else is the whole
    expression with no flags. Returns the compiled expression and whether it is
    sticky (``y`` flag), i.e. must match at the start of the string.
    """
    match = REGEX_LITERAL.match(pattern)
    if match is None:
        return re.compile(pattern), False

    body, flags = match.groups()
    re_flags = 0
    for flag in flags:
        re_flags |= _FLAG_MAP.get(flag, 0)
    return re.compile(body, re_flags), "y" in flags


def regexp(pattern: str) -> Predicate:
    compiled, sticky = compile_pattern(pattern)
    search = compiled.match if sticky else compiled.search
    return _named(lambda x: search(x) is not None, f"regexp({pattern})")


def and_(f: Predicate | None, g: Predicate) -> Predicate:
    """Compose two predicates with logical AND. A missing left side yields g."""
    if f is None:
        return g
    return _named(lambda x: f(x) and g(x), f"{_name_of(f)} & {_name_of(g)}")


def _name_of(fn: Predicate) -> str:
    return getattr(fn, "__name__", type(fn).__name__)
