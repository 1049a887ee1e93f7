"""Reusable field rules for request descriptors.

A rule is a pure callable ``rule(field, value)`` returning one of:

* ``None`` - the value passes unchanged,
* ``Normalized(value)`` - the value passes and should be replaced,
* a ``FieldError`` - the value is rejected.

Rules never see missing values; requiredness is declared on each FieldSpec.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

from app.core.errors import FieldError, bad_format, wrong_type


@dataclass(frozen=True)
class Normalized:
    value: Any


RuleResult = FieldError | Normalized | None
Rule = Callable[[str, Any], RuleResult]

_DIGITS = re.compile(r"^[0-9]+$")


def is_str(field: str, value: Any) -> RuleResult:
    if not isinstance(value, str):
        return wrong_type(field, "a string")
    return None


def is_bool(field: str, value: Any) -> RuleResult:
    if not isinstance(value, bool):
        return wrong_type(field, "a boolean")
    return None


def stripped(field: str, value: str) -> RuleResult:
    return Normalized(value.strip())


def non_blank(field: str, value: str) -> RuleResult:
    if not value.strip():
        return bad_format(field, "must not be blank")
    return None


def max_length(limit: int) -> Rule:
    def rule(field: str, value: str) -> RuleResult:
        if len(value) > limit:
            return bad_format(field, f"must be at most {limit} characters")
        return None

    return rule


def one_of(choices: Iterable[str]) -> Rule:
    allowed = tuple(choices)

    def rule(field: str, value: str) -> RuleResult:
        if value not in allowed:
            return bad_format(field, f"must be one of: {', '.join(allowed)}")
        return None

    return rule


def is_email(field: str, value: str) -> RuleResult:
    """Syntax-only email check; the domain is normalized to lowercase."""
    try:
        result = validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return bad_format(field, "is not a valid email address")
    return Normalized(result.normalized)


def positive_int_id(field: str, value: Any) -> RuleResult:
    """Accept a positive int or a string of digits and normalize to int."""
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        return wrong_type(field, "an integer or a numeric string")
    if isinstance(value, str):
        candidate = value.strip()
        if not _DIGITS.match(candidate):
            return bad_format(field, "must be a numeric identifier")
        value = int(candidate)
    if value < 1:
        return bad_format(field, "must be a positive identifier")
    return Normalized(value)


def compose(*rules: Rule) -> Rule:
    """Chain rules for one field.

    Rules run in order on the (possibly normalized) value; the first failure
    stops the chain since later rules assume earlier ones held.
    """

    def rule(field: str, value: Any) -> RuleResult:
        current = value
        changed = False
        for step in rules:
            result = step(field, current)
            if isinstance(result, FieldError):
                return result
            if isinstance(result, Normalized):
                current = result.value
                changed = True
        return Normalized(current) if changed else None

    return rule


def apply(rule: Rule, field: str, value: Any) -> tuple[Any, FieldError | None]:
    """Run a rule and return ``(value, error)`` with normalization applied."""
    result = rule(field, value)
    if isinstance(result, FieldError):
        return value, result
    if isinstance(result, Normalized):
        return result.value, None
    return value, None
