"""Built-in checks.

Each check is a callable with the signature::

    def check(value: Any, data: Mapping[str, Any], field: str) -> str | None:
        '''Return error message, or None if valid.'''

``data`` is the full filtered data for the call, so a check can look
at other fields. Every built-in is a factory returning a check, and
every factory takes a ``message=`` override::

    def length_at_most(n: int, message: str | None = None) -> CheckFn:
        def check(value, data, field):
            if _is_empty(value) or len(value) <= n:
                return None
            return message or f"Must be at the most {n} symbols"
        return check

Apart from ``required`` and ``required_if``, the built-ins let an
empty value (``None`` or ``""``) through: an optional field only
fails when it is filled in wrong. Put ``required()`` first in the
chain to reject empty values.

Custom checks follow the same protocol. Any callable matching
``(value, data, field) -> str | None`` works with ``validate()``.
"""

import re
from collections.abc import Callable, Collection, Mapping
from typing import Any

from winnow._internal.types import CheckFn

_REQUIRED = "Required"
_INVALID = "Invalid value"


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(message: str = _REQUIRED) -> CheckFn:
    """Field must be present and not the empty string."""

    def check(value: Any, data: Mapping[str, Any], field: str) -> str | None:
        if _is_empty(value):
            return message
        return None

    return check


def required_if(
    condition: bool | Callable[[Mapping[str, Any]], Any],
    message: str = _REQUIRED,
) -> CheckFn:
    """Field is required when *condition* holds.

    *condition* is either a fixed truth value or a callable receiving
    the filtered data::

        ("company", required_if(lambda data: data.get("kind") == "business"))
    """

    def check(value: Any, data: Mapping[str, Any], field: str) -> str | None:
        active = condition(data) if callable(condition) else condition
        if active and _is_empty(value):
            return message
        return None

    return check


# ---------------------------------------------------------------------------
# Cross-field
# ---------------------------------------------------------------------------


def equal_to(other: str, message: str = _INVALID) -> CheckFn:
    """Value must equal the (filtered) value of field *other*.

    Typical for confirmations::

        ("password2", equal_to("password", "Passwords do not match"))
    """

    def check(value: Any, data: Mapping[str, Any], field: str) -> str | None:
        if _is_empty(value) or value == data.get(other):
            return None
        return message

    return check


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def length_between(low: int, high: int, message: str | None = None) -> CheckFn:
    """String must be *low* to *high* characters long, inclusive."""

    def check(value: Any, data: Mapping[str, Any], field: str) -> str | None:
        if _is_empty(value) or low <= len(str(value)) <= high:
            return None
        return message or f"Must be between {low} and {high} symbols"

    return check


def length_at_least(n: int, message: str | None = None) -> CheckFn:
    """String must be at least *n* characters."""

    def check(value: Any, data: Mapping[str, Any], field: str) -> str | None:
        if _is_empty(value) or len(str(value)) >= n:
            return None
        return message or f"Must be at least {n} symbols"

    return check


def length_at_most(n: int, message: str | None = None) -> CheckFn:
    """String must be at most *n* characters."""

    def check(value: Any, data: Mapping[str, Any], field: str) -> str | None:
        if _is_empty(value) or len(str(value)) <= n:
            return None
        return message or f"Must be at the most {n} symbols"

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


def matches(pattern: str | re.Pattern[str], message: str = _INVALID) -> CheckFn:
    """Value must match *pattern* (``re.search``, so anchor it if needed)."""
    compiled = re.compile(pattern)

    def check(value: Any, data: Mapping[str, Any], field: str) -> str | None:
        if _is_empty(value) or compiled.search(str(value)):
            return None
        return message

    return check


# ---------------------------------------------------------------------------
# Choice and type
# ---------------------------------------------------------------------------


def one_of(choices: Collection[Any], message: str = _INVALID) -> CheckFn:
    """Value must be one of *choices*."""
    allowed = frozenset(choices)

    def check(value: Any, data: Mapping[str, Any], field: str) -> str | None:
        if _is_empty(value) or value in allowed:
            return None
        return message

    return check


def instance_of(cls: type | tuple[type, ...], message: str = _INVALID) -> CheckFn:
    """Value must be an instance of *cls* (``isinstance`` semantics)."""

    def check(value: Any, data: Mapping[str, Any], field: str) -> str | None:
        if _is_empty(value) or isinstance(value, cls):
            return None
        return message

    return check
