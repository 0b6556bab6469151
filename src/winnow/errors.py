"""Winnow exception hierarchy.

Validation failures are data, not exceptions: they land in
``ValidationResult.errors``. Everything raised from here means the
rule set or the calling code is broken.
"""


class WinnowError(Exception):
    """Base for all winnow-specific errors."""


class ConfigurationError(WinnowError):
    """Raised when a rule set or result accessor is used incorrectly."""


class RuleError(ConfigurationError):
    """A rule set is malformed.

    Raised for rule entries that are not ``(pattern, chain)`` pairs,
    pattern values of an unrecognized kind, chains that are not
    callables, unknown rule keys, and unknown built-in filter names.
    """


class UnknownFieldError(ConfigurationError, KeyError):
    """A result accessor was asked about a field that was never validated."""

    def __init__(self, field: str, fields: tuple[str, ...] = ()) -> None:
        self.field = field
        self.fields = fields
        known = ", ".join(fields) if fields else "(none)"
        super().__init__(f"Field {field!r} was not validated. Validated fields: {known}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class TemplateError(ConfigurationError):
    """An error-string template does not carry exactly ``{label}`` and ``{message}``."""
