"""Winnow — rule-driven filtering and validation for flat input.

Usage::

    import re

    from winnow import validate
    from winnow.checks import equal_to, length_at_least, required
    from winnow.filters import trim

    result = validate(form, {
        "fields": ["name", "password", "password2"],
        "filters": [(re.compile(".*"), trim)],
        "checks": [
            (["name", "password"], required()),
            ("password", length_at_least(8)),
            ("password2", equal_to("password", "Passwords do not match")),
        ],
    })
    if not result:
        return render("form.html", form=form, errors=result.errors)
    # result.data has filtered values
"""

from winnow.config import ErrorFormat
from winnow.engine import validate
from winnow.errors import (
    ConfigurationError,
    RuleError,
    TemplateError,
    UnknownFieldError,
    WinnowError,
)
from winnow.matching import AnyOf, Exact, Regex
from winnow.result import ValidationResult
from winnow.rules import RuleSpec

__version__ = "0.1.0"
__all__ = [
    "AnyOf",
    "ConfigurationError",
    "ErrorFormat",
    "Exact",
    "Regex",
    "RuleError",
    "RuleSpec",
    "TemplateError",
    "UnknownFieldError",
    "ValidationResult",
    "WinnowError",
    "validate",
]
