"""Field-name patterns — which rule entries apply to which fields.

A pattern is exactly one of three kinds:

- ``Exact("email")`` — the field named ``email``
- ``AnyOf({"password", "confirm"})`` — any field in the set
- ``Regex(re.compile(r"^addr_"))`` — any field the expression finds

Rule entries may use bare values instead; ``as_pattern()`` coerces them::

    "email"                  -> Exact("email")
    ["password", "confirm"]  -> AnyOf(frozenset({"password", "confirm"}))
    re.compile(r"^addr_")    -> Regex(re.compile(r"^addr_"))

A bare string is always an exact name, never an expression. Regex
matching uses ``re.search`` (unanchored): ``re.compile("name")`` catches
``name``, ``first_name`` and ``name_suffix`` alike. Anchor with
``^...$`` to match whole names only.
"""

import re
from collections.abc import Collection, Mapping
from dataclasses import dataclass

from winnow.errors import RuleError


@dataclass(frozen=True, slots=True)
class Exact:
    """Match a single field by name."""

    name: str


@dataclass(frozen=True, slots=True)
class AnyOf:
    """Match any field whose name is in *names*."""

    names: frozenset[str]


@dataclass(frozen=True, slots=True)
class Regex:
    """Match any field name the expression finds (``re.search``)."""

    pattern: re.Pattern[str]


type Pattern = Exact | AnyOf | Regex


def as_pattern(value: object) -> Pattern:
    """Coerce a rule-entry key into a ``Pattern``.

    Raises:
        RuleError: *value* is not a string, a collection of strings,
            a compiled regular expression, or a ``Pattern`` already.
    """
    match value:
        case Exact() | AnyOf() | Regex():
            return value
        case str():
            return Exact(value)
        case re.Pattern():
            if not isinstance(value.pattern, str):
                raise RuleError(f"Field patterns must be str expressions, got {value.pattern!r}")
            return Regex(value)
        case Collection() if not isinstance(value, (bytes, bytearray, Mapping)):
            names = list(value)
            bad = [n for n in names if not isinstance(n, str)]
            if bad:
                raise RuleError(
                    f"Field-name sets may only hold strings, got {bad[0]!r} in {value!r}"
                )
            return AnyOf(frozenset(names))
    raise RuleError(f"Unrecognized field pattern: {value!r} ({type(value).__name__})")


def matches(pattern: Pattern, field_name: str) -> bool:
    """Return True if *pattern* applies to *field_name*."""
    match pattern:
        case Exact(name):
            return field_name == name
        case AnyOf(names):
            return field_name in names
        case Regex(expr):
            return expr.search(field_name) is not None
    raise RuleError(f"Unrecognized field pattern: {pattern!r}")
