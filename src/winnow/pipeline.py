"""Ordered function chains — filters run through, checks stop early.

Both runners take an already-resolved chain for a single field. They
never catch exceptions: a filter or check that raises is a bug in the
caller's rule set and propagates as-is.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from winnow._internal.types import CheckFn, FilterFn


def run_filters(value: Any, chain: Sequence[FilterFn]) -> Any:
    """Feed *value* through every filter in order and return the result.

    An empty chain returns *value* unchanged.
    """
    for fn in chain:
        value = fn(value)
    return value


def run_checks(
    value: Any,
    data: Mapping[str, Any],
    field: str,
    chain: Sequence[CheckFn],
) -> str | None:
    """Run checks in order, stopping at the first failure.

    Returns the failing check's message, or ``None`` if every check
    passes. Checks after the first failure are not called, so a field
    carries at most one error.
    """
    for check in chain:
        error = check(value, data, field)
        if error is not None:
            return error
    return None
