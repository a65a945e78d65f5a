"""Tests for the message catalog and the field-rule interpreter."""

from __future__ import annotations

import re
from enum import StrEnum

import pytest
from pydantic import ValidationError

from formguard.validators import rules as r
from formguard.validators.models import FieldRule, RuleKind
from formguard.validators.patterns import MESSAGES, message_for


class TestMessageCatalog:
    """Generators are pure functions of their bound."""

    @pytest.mark.parametrize(
        ("kind", "param", "expected"),
        [
            ("min_length", 8, "Must be at least 8 characters"),
            ("max_length", 50, "Must be at most 50 characters"),
            ("min", 1, "Must be at least 1"),
            ("max", 100, "Must be at most 100"),
            ("enum", ("a", "b"), "Must be one of: a, b"),
        ],
    )
    def test_generators(self, kind: str, param, expected: str) -> None:
        assert message_for(kind, param) == expected
        assert message_for(kind, param) == message_for(kind, param)

    def test_static_fallbacks(self) -> None:
        assert message_for("required") == MESSAGES["required"]
        assert message_for("pattern") == "Invalid"
        assert message_for("custom") == "Invalid input"

    def test_rule_kind_keys_resolve(self) -> None:
        assert message_for(RuleKind.MIN_LENGTH, 3) == "Must be at least 3 characters"


class TestFieldRule:
    def test_static_message_overrides_catalog(self) -> None:
        rule = r.min_length(2, "Too short")
        assert rule.resolve_message() == "Too short"

    def test_is_immutable(self) -> None:
        rule = r.min_length(2)
        with pytest.raises(ValidationError):
            rule.param = 5  # type: ignore[misc]

    def test_one_of_stores_tuple(self) -> None:
        rule = r.one_of(["x", "y"])
        assert rule.kind is RuleKind.ENUM
        assert rule.param == ("x", "y")

    def test_matches_compiles_strings(self) -> None:
        rule = r.matches(r"^\d+$")
        assert isinstance(rule.param, re.Pattern)


class TestEvaluate:
    def test_required(self) -> None:
        assert r.evaluate(r.required(), "") == MESSAGES["required"]
        assert r.evaluate(r.required(), None) == MESSAGES["required"]
        assert r.evaluate(r.required(), "x") is None
        assert r.evaluate(r.required(), False) is None

    def test_pattern_is_full_match(self) -> None:
        rule = r.matches(r"^[a-z]+$", "letters only")
        assert r.evaluate(rule, "abc") is None
        assert r.evaluate(rule, "abc\n") == "letters only"
        assert r.evaluate(rule, "abc1") == "letters only"

    def test_lengths(self) -> None:
        assert r.evaluate(r.min_length(3), "ab") == "Must be at least 3 characters"
        assert r.evaluate(r.min_length(3), "abc") is None
        assert r.evaluate(r.max_length(3), "abcd") == "Must be at most 3 characters"
        assert r.evaluate(r.max_length(3), "abc") is None

    def test_numeric_bounds(self) -> None:
        assert r.evaluate(r.min_value(1), 0) == "Must be at least 1"
        assert r.evaluate(r.min_value(1), 1) is None
        assert r.evaluate(r.max_value(100), 100.0) is None
        assert r.evaluate(r.max_value(100), 101) == "Must be at most 100"

    def test_enum_membership(self) -> None:
        rule = r.one_of(("relevance", "date"))
        assert r.evaluate(rule, "date") is None
        assert r.evaluate(rule, "bogus") == "Must be one of: relevance, date"

    def test_enum_does_not_confuse_bool_and_int(self) -> None:
        assert r.evaluate(r.one_of((1, 2)), True) == "Must be one of: 1, 2"

    def test_enum_accepts_str_subclasses(self) -> None:
        class Sort(StrEnum):
            DATE = "date"

        assert r.evaluate(r.one_of(("relevance", "date")), Sort.DATE) is None

    def test_enum_does_not_confuse_int_and_bool(self) -> None:
        assert r.evaluate(r.one_of((True,)), 1) == "Must be one of: True"

    def test_custom(self) -> None:
        rule = r.custom(lambda v: v is True, "must be true")
        assert r.evaluate(rule, True) is None
        assert r.evaluate(rule, 1) == "must be true"

    @pytest.mark.parametrize(
        "rule",
        [r.min_length(2), r.max_length(2), r.matches(r"^.*$"), r.min_value(0), r.max_value(0)],
    )
    def test_type_mismatch_fails_without_raising(self, rule: FieldRule) -> None:
        mismatched = 5 if rule.kind in (RuleKind.MIN_LENGTH, RuleKind.MAX_LENGTH, RuleKind.PATTERN) else "5"
        assert r.evaluate(rule, mismatched) == rule.resolve_message()

    def test_bool_and_nan_are_not_numbers(self) -> None:
        assert r.is_number(3)
        assert r.is_number(2.5)
        assert not r.is_number(True)
        assert not r.is_number(float("nan"))
        assert r.evaluate(r.min_value(0), True) == "Must be at least 0"
