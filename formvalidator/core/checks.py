"""
Rule dispatch: applies a Rule to a value and builds the default message.

The outcome depends on both the rule and the value kind (text, number,
or other). Every combination resolves to a CheckResult; a rule that does
not apply to a value kind is an ordinary failure, never an exception.
"""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from formvalidator.core.kinds import TaggedValue, ValueKind, is_numeric, to_float, widen
from formvalidator.core.rules import (
    Custom,
    Email,
    MustBeEqualTo,
    MustBeInRange,
    MustBeLessThan,
    MustBeMoreThan,
    Optional,
    Required,
    Rule,
)


EMAIL_ADDRESS_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)


# --- Result models ---


class FailureReason(str, Enum):
    """Why a check failed. Each reason has its own message template."""

    MISSING_REQUIRED_VALUE = "missing_required_value"
    LENGTH_TOO_SHORT = "length_too_short"
    LENGTH_TOO_LONG = "length_too_long"
    OUT_OF_RANGE = "out_of_range"
    MISMATCH_TO_TEMPLATE = "mismatch_to_template"
    INVALID_PATTERN = "invalid_pattern"
    CUSTOM_REJECTED = "custom_rejected"
    UNSUPPORTED_KIND = "unsupported_kind"


class CheckResult(BaseModel):
    """Outcome of applying one rule to one value.

    `message` is the default error message for the rule/kind pair. It is
    computed whether or not the check passed, except for Custom rules,
    which carry whatever message the predicate returned.
    `reason` is None when the check passed.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    message: str | None = None
    reason: FailureReason | None = None


def _result(valid: bool, message: str | None, reason: FailureReason) -> CheckResult:
    return CheckResult(valid=valid, message=message, reason=None if valid else reason)


# --- Public entry points ---


def check_missing(name: str) -> CheckResult:
    """Result for a non-Optional field with no value at all."""
    return _result(False, f"{name} is required", FailureReason.MISSING_REQUIRED_VALUE)


def check_rule(rule: Rule, tagged: TaggedValue, name: str) -> CheckResult:
    """Apply a rule to a present value.

    Args:
        rule: The rule to apply.
        tagged: The value wrapped with its kind.
        name: Field name used in generated messages.

    Returns:
        The CheckResult for this rule/value pair.
    """
    # Custom and Optional ignore the value kind entirely
    match rule:
        case Custom():
            return _check_custom(rule, tagged.value)
        case Optional():
            return CheckResult(valid=True)

    match tagged.kind:
        case ValueKind.TEXT:
            return _check_text(rule, tagged.value, name)
        case ValueKind.NUMBER:
            return _check_number(rule, tagged.value, name)
        case _:
            return _check_other(rule, tagged.value, name)


# --- Per-kind dispatch ---


def _check_custom(rule: Custom, value: Any) -> CheckResult:
    valid, message = rule.predicate(value)
    return _result(bool(valid), message, FailureReason.CUSTOM_REJECTED)


def _check_text(rule: Rule, value: str, name: str) -> CheckResult:
    match rule:
        case Required():
            return _result(
                bool(value.strip()),
                f"{name} is required",
                FailureReason.MISSING_REQUIRED_VALUE,
            )

        case MustBeMoreThan(template=template):
            length = len(str(template))
            return _result(
                len(value) > length,
                f"{name} must be longer than {length} characters",
                FailureReason.LENGTH_TOO_SHORT,
            )

        case MustBeLessThan(template=template):
            length = len(str(template))
            return _result(
                len(value) < length,
                f"{name} must be shorter than {length} characters",
                FailureReason.LENGTH_TOO_LONG,
            )

        case MustBeInRange(min=low, max=high):
            return _result(
                False,
                f"{name} must be in range {low} - {high}",
                FailureReason.UNSUPPORTED_KIND,
            )

        case MustBeEqualTo(template=template):
            if isinstance(template, str):
                return _result(
                    value == template,
                    f"{name} must match to {template}",
                    FailureReason.MISMATCH_TO_TEMPLATE,
                )
            if is_numeric(template):
                # Numeric templates compare lengths, not content
                length = len(str(template))
                return _result(
                    len(value) == length,
                    f"{name} must be {length} characters",
                    FailureReason.MISMATCH_TO_TEMPLATE,
                )
            return _result(False, f"{name} is not valid", FailureReason.UNSUPPORTED_KIND)

        case Email():
            message = "Enter a valid email" if not value else f"{value} is not a valid email"
            return _result(
                EMAIL_ADDRESS_PATTERN.fullmatch(value) is not None,
                message,
                FailureReason.INVALID_PATTERN,
            )

    raise TypeError(f"Unsupported rule: {rule!r}")


def _check_number(rule: Rule, value: Any, name: str) -> CheckResult:
    number = widen(value)

    match rule:
        case Required():
            return CheckResult(valid=True, message=f"{name} is required")

        case MustBeMoreThan(template=template):
            bound = to_float(template)
            return _result(
                number > bound,
                f"{name} must be greater than {bound}",
                FailureReason.OUT_OF_RANGE,
            )

        case MustBeLessThan(template=template):
            message = f"{name} must be less than {template}"
            if not is_numeric(template):
                return _result(False, message, FailureReason.UNSUPPORTED_KIND)
            return _result(number < widen(template), message, FailureReason.OUT_OF_RANGE)

        case MustBeInRange(min=low, max=high):
            return _result(
                widen(low) <= number <= widen(high),
                f"{name} must be in range {low} - {high}",
                FailureReason.OUT_OF_RANGE,
            )

        case MustBeEqualTo(template=template):
            expected = to_float(template)
            return _result(
                number == expected,
                f"{name} must be equal to {expected}",
                FailureReason.MISMATCH_TO_TEMPLATE,
            )

        case Email():
            return _result(False, f"{name} is not valid", FailureReason.UNSUPPORTED_KIND)

    raise TypeError(f"Unsupported rule: {rule!r}")


def _check_other(rule: Rule, value: Any, name: str) -> CheckResult:
    match rule:
        case Required():
            return CheckResult(valid=True, message=f"{name} is required")

        case MustBeMoreThan(template=template):
            return _result(
                False,
                f"{name} must be greater than {template}",
                FailureReason.UNSUPPORTED_KIND,
            )

        case MustBeLessThan(template=template):
            return _result(
                False,
                f"{name} must be less than {template}",
                FailureReason.UNSUPPORTED_KIND,
            )

        case MustBeInRange(min=low, max=high):
            return _result(
                False,
                f"{name} must be in range {low} - {high}",
                FailureReason.UNSUPPORTED_KIND,
            )

        case MustBeEqualTo(template=template):
            # Booleans only equal booleans, so True does not match 1
            same_family = isinstance(value, bool) == isinstance(template, bool)
            return _result(
                same_family and value == template,
                f"{name} does not match template",
                FailureReason.MISMATCH_TO_TEMPLATE,
            )

        case Email():
            return _result(False, f"{name} is not valid", FailureReason.UNSUPPORTED_KIND)

    raise TypeError(f"Unsupported rule: {rule!r}")
