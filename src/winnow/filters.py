"""Built-in filters.

A filter takes a value and returns the cleaned value::

    def trim(value: Any) -> Any

Filters run before checks, in declared order, and never signal failure.
The built-ins pass ``None`` and non-string values through untouched,
so they are safe to attach to every field::

    filters=[(re.compile(".*"), by_name("trim", "strip"))]
"""

import re
from typing import Any

from winnow._internal.types import FilterFn
from winnow.errors import RuleError

_WHITESPACE_RE = re.compile(r"\s+")


def trim(value: Any) -> Any:
    """Remove leading and trailing whitespace."""
    if not isinstance(value, str):
        return value
    return value.strip()


def strip(value: Any) -> Any:
    """Collapse whitespace runs to a single space, then trim.

    Example:
        "  Jane \\t  Doe " → "Jane Doe"
    """
    if not isinstance(value, str):
        return value
    return _WHITESPACE_RE.sub(" ", value).strip()


def lower(value: Any) -> Any:
    """Lower-case a string."""
    if not isinstance(value, str):
        return value
    return value.lower()


def upper(value: Any) -> Any:
    """Upper-case a string."""
    if not isinstance(value, str):
        return value
    return value.upper()


def capitalize(value: Any) -> Any:
    """Upper-case the first character only; the rest is left as-is.

    Unlike ``str.capitalize``, ``"mcDonald"`` becomes ``"McDonald"``.
    """
    if not isinstance(value, str) or not value:
        return value
    return value[0].upper() + value[1:]


# Names accepted by by_name(); lc/uc/ucfirst are the traditional aliases
FILTERS: dict[str, FilterFn] = {
    "trim": trim,
    "strip": strip,
    "lower": lower,
    "lc": lower,
    "upper": upper,
    "uc": upper,
    "capitalize": capitalize,
    "ucfirst": capitalize,
}


def by_name(*names: str) -> tuple[FilterFn, ...]:
    """Look up built-in filters by name, in the order given.

    Raises:
        RuleError: a name is not a built-in filter.
    """
    chain: list[FilterFn] = []
    for name in names:
        try:
            chain.append(FILTERS[name])
        except KeyError:
            known = ", ".join(sorted(FILTERS))
            raise RuleError(f"Unknown filter {name!r}. Built-in filters: {known}") from None
    return tuple(chain)
