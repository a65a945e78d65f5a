"""Field rules — factory helpers and the interpreter that evaluates them.

    rule = min_length(8)
    evaluate(rule, "short")   # -> "Must be at least 8 characters"
    evaluate(rule, "long enough")  # -> None
"""

import math
import re
from typing import Any, Callable, Iterable, Optional, Union

from formguard.validators.models import FieldRule, RuleKind

Number = Union[int, float]


# ── Factories ──


def required(message: Optional[str] = None) -> FieldRule:
    return FieldRule(kind=RuleKind.REQUIRED, message=message)


def matches(pattern: Union[str, re.Pattern], message: Optional[str] = None) -> FieldRule:
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return FieldRule(kind=RuleKind.PATTERN, param=pattern, message=message)


def min_length(bound: int, message: Optional[str] = None) -> FieldRule:
    return FieldRule(kind=RuleKind.MIN_LENGTH, param=bound, message=message)


def max_length(bound: int, message: Optional[str] = None) -> FieldRule:
    return FieldRule(kind=RuleKind.MAX_LENGTH, param=bound, message=message)


def min_value(bound: Number, message: Optional[str] = None) -> FieldRule:
    return FieldRule(kind=RuleKind.MIN, param=bound, message=message)


def max_value(bound: Number, message: Optional[str] = None) -> FieldRule:
    return FieldRule(kind=RuleKind.MAX, param=bound, message=message)


def one_of(options: Iterable[Any], message: Optional[str] = None) -> FieldRule:
    return FieldRule(kind=RuleKind.ENUM, param=tuple(options), message=message)


def custom(predicate: Callable[[Any], bool], message: Optional[str] = None) -> FieldRule:
    return FieldRule(kind=RuleKind.CUSTOM, param=predicate, message=message)


# ── Interpreter ──


def is_number(value: Any) -> bool:
    """True for real ints/floats; bool and NaN are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def _passes(rule: FieldRule, value: Any) -> bool:
    kind = rule.kind

    if kind is RuleKind.REQUIRED:
        # Only empty strings and None fail; False and 0 are real answers.
        return value is not None and value != ""

    if kind is RuleKind.PATTERN:
        return isinstance(value, str) and rule.param.fullmatch(value) is not None

    if kind is RuleKind.MIN_LENGTH:
        return isinstance(value, str) and len(value) >= rule.param

    if kind is RuleKind.MAX_LENGTH:
        return isinstance(value, str) and len(value) <= rule.param

    if kind is RuleKind.MIN:
        return is_number(value) and value >= rule.param

    if kind is RuleKind.MAX:
        return is_number(value) and value <= rule.param

    if kind is RuleKind.ENUM:
        # True must not satisfy an option of 1 (nor 1 an option of True).
        return any(
            isinstance(value, type(option))
            and not (isinstance(value, bool) ^ isinstance(option, bool))
            and value == option
            for option in rule.param
        )

    if kind is RuleKind.CUSTOM:
        return bool(rule.param(value))

    return False


def evaluate(rule: FieldRule, value: Any) -> Optional[str]:
    """Apply one rule to one value.

    Returns:
        The rule's message if the value violates it, otherwise None.
    """
    if _passes(rule, value):
        return None
    return rule.resolve_message()
