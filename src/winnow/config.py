"""Error-string formatting options.

ErrorFormat is a frozen dataclass: immutable after creation, checked on
construction, no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from string import Formatter
from types import MappingProxyType

from winnow.errors import TemplateError

_PLACEHOLDERS = ("label", "message")


@dataclass(frozen=True, slots=True)
class ErrorFormat:
    """How ``ValidationResult.error_string()`` renders errors.

    All fields have defaults. Override what you need::

        fmt = ErrorFormat(template="{label}: {message}", separator="\\n")
    """

    # One line per field; exactly {label} and {message}, each once
    template: str = "[{label}] {message}"
    separator: str = ", "

    # Field name -> display label; unmapped fields show their raw name
    names: Mapping[str, str] = field(default_factory=dict)

    # Render only the first error (in field order)
    single: bool = False

    def __post_init__(self) -> None:
        found = _placeholders(self.template)
        if sorted(found) != sorted(_PLACEHOLDERS):
            raise TemplateError(
                f"Error template must contain {{label}} and {{message}} exactly once each, "
                f"got {self.template!r}"
            )
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))

    def render(self, field_name: str, message: str) -> str:
        """Render one field's error with the template."""
        label = self.names.get(field_name, field_name)
        return self.template.format(label=label, message=message)


def _placeholders(template: str) -> list[str]:
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as exc:
        raise TemplateError(f"Malformed error template {template!r}: {exc}") from exc
    return [name for _, name, _, _ in parsed if name is not None]
