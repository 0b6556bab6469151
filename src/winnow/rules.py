"""Rule sets — declaring and resolving which functions run on which fields.

A rule set names the fields to process and two ordered lists of
``(pattern, chain)`` entries::

    rules = RuleSpec(
        fields=("name", "email"),
        filters=((re.compile(".*"), trim),),
        checks=(
            ("name", required()),
            ("email", [required(), matches(r"@")]),
        ),
    )

``resolve()`` turns that into one filter chain and one check chain per
field. Every entry whose pattern matches a field contributes its
functions, in entry order, so broad entries (``re.compile(".*")``) and
narrow ones (``"email"``) compose.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from winnow._internal.types import CheckFn, FilterFn
from winnow.errors import RuleError
from winnow.matching import Pattern, as_pattern, matches

_RULE_KEYS = frozenset({"fields", "filters", "checks"})


@dataclass(frozen=True, slots=True)
class RuleEntry:
    """A normalized ``(pattern, chain)`` pair."""

    pattern: Pattern
    chain: tuple[Callable[..., Any], ...]


@dataclass(frozen=True, slots=True)
class RuleSpec:
    """A declarative rule set. Immutable after creation.

    ``fields`` lists the fields to process, in order; when empty, every
    key of the input is processed. ``filters`` and ``checks`` accept a
    sequence of ``(pattern, chain)`` pairs or a mapping of
    ``pattern -> chain``; both are normalized to tuples of ``RuleEntry``
    on construction, so a malformed rule set fails here rather than
    halfway through validating.
    """

    fields: tuple[str, ...] = ()
    filters: tuple[RuleEntry, ...] = ()
    checks: tuple[RuleEntry, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.fields, str):
            raise RuleError(f"'fields' must be a sequence of names, not the string {self.fields!r}")
        fields = tuple(dict.fromkeys(self.fields))
        for name in fields:
            if not isinstance(name, str):
                raise RuleError(f"Field names must be strings, got {name!r}")
        object.__setattr__(self, "fields", fields)
        object.__setattr__(self, "filters", _normalize_entries("filters", self.filters))
        object.__setattr__(self, "checks", _normalize_entries("checks", self.checks))

    @classmethod
    def from_mapping(cls, rules: Mapping[str, Any]) -> RuleSpec:
        """Build a RuleSpec from ``{"fields": ..., "filters": ..., "checks": ...}``.

        All keys are optional. Unknown keys raise ``RuleError`` since
        they are almost always a typo (``"check"`` for ``"checks"``).
        """
        unknown = set(rules) - _RULE_KEYS
        if unknown:
            raise RuleError(
                f"Unknown rule keys: {', '.join(sorted(map(str, unknown)))}. "
                f"Expected any of: fields, filters, checks"
            )
        return cls(
            fields=rules.get("fields") or (),
            filters=rules.get("filters") or (),
            checks=rules.get("checks") or (),
        )


@dataclass(frozen=True, slots=True)
class ResolvedRules:
    """Per-field chains for one validation call."""

    fields: tuple[str, ...]
    filters: Mapping[str, tuple[FilterFn, ...]]
    checks: Mapping[str, tuple[CheckFn, ...]]


def as_rule_spec(rules: RuleSpec | Mapping[str, Any]) -> RuleSpec:
    """Accept a ``RuleSpec`` as-is, or build one from a plain mapping."""
    if isinstance(rules, RuleSpec):
        return rules
    if isinstance(rules, Mapping):
        return RuleSpec.from_mapping(rules)
    raise RuleError(f"Rules must be a RuleSpec or a mapping, got {type(rules).__name__}")


def resolve(rules: RuleSpec, field_names: Iterable[str]) -> ResolvedRules:
    """Expand *rules* into ordered filter and check chains per field.

    Args:
        rules: The rule set.
        field_names: Keys of the input, used only when ``rules.fields``
            is empty.

    Returns:
        A ``ResolvedRules`` with the selected fields and, for each, the
        concatenated chains of every matching entry. A field nothing
        matches gets empty chains.
    """
    fields = rules.fields or tuple(field_names)
    return ResolvedRules(
        fields=fields,
        filters={f: _chain_for(f, rules.filters) for f in fields},
        checks={f: _chain_for(f, rules.checks) for f in fields},
    )


def _chain_for(field: str, entries: tuple[RuleEntry, ...]) -> tuple[Callable[..., Any], ...]:
    chain: list[Callable[..., Any]] = []
    for entry in entries:
        if matches(entry.pattern, field):
            chain.extend(entry.chain)
    return tuple(chain)


def _normalize_entries(kind: str, entries: Any) -> tuple[RuleEntry, ...]:
    """Validate and normalize the caller's ``filters``/``checks`` value."""
    if isinstance(entries, Mapping):
        pairs: Sequence[Any] = list(entries.items())
    elif isinstance(entries, Sequence) and not isinstance(entries, str):
        pairs = entries
    else:
        raise RuleError(f"'{kind}' must be a sequence of (pattern, chain) pairs or a mapping")

    normalized: list[RuleEntry] = []
    for index, pair in enumerate(pairs):
        if isinstance(pair, RuleEntry):
            pattern, chain = pair.pattern, pair.chain
        elif isinstance(pair, str) or not isinstance(pair, Sequence) or len(pair) != 2:
            raise RuleError(
                f"{kind}[{index}] must be a (pattern, chain) pair, got {pair!r}"
            )
        else:
            pattern, chain = pair
        normalized.append(RuleEntry(as_pattern(pattern), _as_chain(kind, index, chain)))
    return tuple(normalized)


def _as_chain(kind: str, index: int, chain: Any) -> tuple[Callable[..., Any], ...]:
    if callable(chain):
        return (chain,)
    if isinstance(chain, Sequence) and not isinstance(chain, str) and chain:
        for fn in chain:
            if not callable(fn):
                raise RuleError(f"{kind}[{index}] chain holds a non-callable: {fn!r}")
        return tuple(chain)
    raise RuleError(
        f"{kind}[{index}] chain must be a callable or a non-empty sequence of callables, "
        f"got {chain!r}"
    )
