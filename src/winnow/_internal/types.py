"""Shared type aliases for the filter/check function contract."""

from collections.abc import Callable, Mapping
from typing import Any

# Filter — transforms a value; never signals failure
type FilterFn = Callable[[Any], Any]

# Check — (value, filtered data, field name) -> None to pass, message to fail
type CheckFn = Callable[[Any, Mapping[str, Any], str], str | None]
