"""Validation result — immutable container for filtered data and errors."""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from dataclasses import fields as dc_fields
from types import MappingProxyType
from typing import Any

from winnow.config import ErrorFormat
from winnow.errors import ConfigurationError, UnknownFieldError

_DEFAULT_FORMAT = ErrorFormat()
_FORMAT_OPTIONS = frozenset(f.name for f in dc_fields(ErrorFormat))


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating input against a rule set.

    ``success`` (alias ``is_valid``) is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = validate(form, rules)
        if not result:
            return render("form.html", form=form, errors=result.errors)

    ``fields`` is the resolved field list, in processing order.

    ``data`` maps every field to its filtered value. It is filled in
    even when validation fails, but only a successful result's data
    should be trusted.

    ``errors`` maps failing fields to a single message each::

        {"email": "Required"}
    """

    fields: tuple[str, ...]
    data: Mapping[str, Any]
    errors: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))

    @property
    def success(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    @property
    def is_valid(self) -> bool:
        """Alias for ``success``."""
        return self.success

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.success

    def value(self, field: str) -> Any:
        """Return the filtered value of *field*.

        Raises:
            UnknownFieldError: *field* was not among the validated fields.
        """
        self._require_field(field)
        return self.data.get(field)

    def error(self, field: str) -> str | None:
        """Return the error message for *field*, or None if it passed.

        Raises:
            UnknownFieldError: *field* was not among the validated fields.
        """
        self._require_field(field)
        return self.errors.get(field)

    def to_dict(self) -> dict[str, Any]:
        """Plain ``{"success", "data", "error"}`` structure, e.g. for a JSON body."""
        return {
            "success": self.success,
            "data": dict(self.data),
            "error": dict(self.errors),
        }

    def error_string(self, fmt: ErrorFormat | None = None, **options: Any) -> str:
        """Render the errors as one string.

        Pass an ``ErrorFormat``, or override its fields by keyword::

            result.error_string(names={"email": "E-mail"}, single=True)
            # "[E-mail] Required"

        Errors are rendered in field order. Returns ``""`` when there are
        no errors.

        Raises:
            TemplateError: the template lacks ``{label}`` or ``{message}``.
        """
        fmt = fmt or _DEFAULT_FORMAT
        if options:
            unknown = set(options) - _FORMAT_OPTIONS
            if unknown:
                raise ConfigurationError(
                    f"Unknown error_string option(s): {', '.join(sorted(unknown))}. "
                    f"Valid options: {', '.join(sorted(_FORMAT_OPTIONS))}"
                )
            fmt = replace(fmt, **options)

        lines = [fmt.render(f, self.errors[f]) for f in self.fields if f in self.errors]
        if fmt.single:
            lines = lines[:1]
        return fmt.separator.join(lines)

    def _require_field(self, field: str) -> None:
        if field not in self.data:
            raise UnknownFieldError(field, self.fields)
