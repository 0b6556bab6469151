"""The validation engine — select fields, filter, check, assemble."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from winnow.pipeline import run_checks, run_filters
from winnow.result import ValidationResult
from winnow.rules import RuleSpec, as_rule_spec, resolve

logger = logging.getLogger("winnow.engine")


def validate(
    data: Mapping[str, Any],
    rules: RuleSpec | Mapping[str, Any],
) -> ValidationResult:
    """Filter and check *data* against *rules*.

    Args:
        data: A flat mapping of field names to scalar values (form data,
            query params, a decoded JSON object). Never mutated.
        rules: A ``RuleSpec``, or a mapping with optional ``fields``,
            ``filters`` and ``checks`` keys.

    Returns:
        A ``ValidationResult``. ``data`` holds every selected field's
        filtered value; ``errors`` holds the first failing check's
        message for each failing field.

    Raises:
        RuleError: *rules* is malformed.

    Exceptions raised by filters or checks are not caught.

    Example::

        result = validate({"name": " Bob ", "email": ""}, {
            "fields": ["name", "email"],
            "filters": [(re.compile(".*"), trim)],
            "checks": [("name", required()), ("email", required())],
        })
        # result.data == {"name": "Bob", "email": ""}
        # result.errors == {"email": "Required"}
    """
    spec = as_rule_spec(rules)
    resolved = resolve(spec, data.keys())

    # Every field is filtered before any check runs
    filtered: dict[str, Any] = {}
    for field in resolved.fields:
        filtered[field] = run_filters(data.get(field), resolved.filters[field])

    frozen = MappingProxyType(filtered)
    errors: dict[str, str] = {}
    for field in resolved.fields:
        error = run_checks(filtered[field], frozen, field, resolved.checks[field])
        if error is not None:
            errors[field] = error

    logger.debug(
        "Validated %d field(s): %d error(s)%s",
        len(resolved.fields),
        len(errors),
        f" ({', '.join(errors)})" if errors else "",
    )
    return ValidationResult(fields=resolved.fields, data=filtered, errors=errors)
