"""Tests for winnow.filters — built-in filters and lookup by name."""

import re

import pytest

from winnow import validate
from winnow.errors import RuleError
from winnow.filters import FILTERS, by_name, capitalize, lower, strip, trim, upper


class TestTrim:
    def test_both_ends(self) -> None:
        assert trim("  a b \n") == "a b"

    def test_none_passes_through(self) -> None:
        assert trim(None) is None

    def test_non_string_untouched(self) -> None:
        assert trim(42) == 42


class TestStrip:
    def test_collapses_inner_whitespace(self) -> None:
        assert strip("  Jane \t  Doe ") == "Jane Doe"

    def test_none_passes_through(self) -> None:
        assert strip(None) is None


class TestCase:
    def test_lower(self) -> None:
        assert lower("HeLLo") == "hello"

    def test_upper(self) -> None:
        assert upper("HeLLo") == "HELLO"

    def test_capitalize_first_only(self) -> None:
        assert capitalize("mcDonald") == "McDonald"

    def test_capitalize_empty(self) -> None:
        assert capitalize("") == ""

    def test_non_strings(self) -> None:
        assert lower(None) is None
        assert upper(1.5) == 1.5
        assert capitalize(None) is None


class TestByName:
    def test_order_kept(self) -> None:
        assert by_name("trim", "lc") == (trim, lower)

    def test_aliases(self) -> None:
        assert FILTERS["uc"] is upper
        assert FILTERS["ucfirst"] is capitalize

    def test_unknown(self) -> None:
        with pytest.raises(RuleError, match="Unknown filter 'squash'"):
            by_name("trim", "squash")

    def test_composes_with_validate(self) -> None:
        result = validate(
            {"name": "  ada   LOVELACE "},
            {"filters": [(re.compile(".*"), by_name("strip", "lc"))]},
        )
        assert result.data["name"] == "ada lovelace"
