"""
Validation field: one value bound to one rule.

A ValidationField is built fresh whenever the owning form is rebuilt.
Apart from the error slot written by `valid()`, it never changes after
construction.
"""

import logging
from collections.abc import Callable
from typing import Any

from formvalidator.core.checks import CheckResult, FailureReason, check_missing, check_rule
from formvalidator.core.kinds import TaggedValue, ValueKind, classify
from formvalidator.core.rules import Optional, Required, Rule

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[str | None], None]

DEFAULT_FIELD_NAME = "Field"


def _ignore_error(message: str | None) -> None:
    return None


class ValidationField:
    """A single form field and its validation rule.

    Args:
        value: The current field value. None means "not provided".
        name: Display name used in generated messages, e.g. "Age is required".
        rule: The rule to validate with. Defaults to Required.
        on_error: Called with the error message after each validation
            (None when valid), and with None when the owning form resets.
    """

    def __init__(
        self,
        value: Any = None,
        name: str = DEFAULT_FIELD_NAME,
        rule: Rule | None = None,
        on_error: ErrorCallback | None = None,
    ):
        self._value = value
        self._name = name
        self._rule = rule if rule is not None else Required()
        self._on_error = on_error or _ignore_error
        self._last_error_message: str | None = None
        self._last_failure_reason: FailureReason | None = None

    def __repr__(self) -> str:
        return f"ValidationField(name={self._name!r}, value={self._value!r}, rule={self._rule!r})"

    # -----------------------------------------------------------------
    # Read-only state
    # -----------------------------------------------------------------

    @property
    def value(self) -> Any:
        return self._value

    @property
    def name(self) -> str:
        return self._name

    @property
    def rule(self) -> Rule:
        return self._rule

    @property
    def on_error(self) -> ErrorCallback:
        return self._on_error

    @property
    def kind(self) -> ValueKind | None:
        """Kind of the current value, or None when no value is present."""
        if self._value is None:
            return None
        return classify(self._value)

    @property
    def last_error_message(self) -> str | None:
        """Message from the most recent failed validation, None after a pass."""
        return self._last_error_message

    @property
    def last_failure_reason(self) -> FailureReason | None:
        """Why the most recent validation failed, None after a pass."""
        return self._last_failure_reason

    # -----------------------------------------------------------------
    # Validation
    # -----------------------------------------------------------------

    def check(self) -> CheckResult:
        """Evaluate the rule without touching the error slot or callback."""
        if self._value is None and not isinstance(self._rule, Optional):
            return check_missing(self._name)
        return check_rule(self._rule, TaggedValue.of(self._value), self._name)

    def valid(self) -> bool:
        """Validate the field and report the outcome through `on_error`.

        An error message already held from an earlier failure takes
        precedence over the freshly computed one; the slot is emptied by
        `reset()` and by any passing validation.

        Returns:
            True if the value satisfies the rule.
        """
        result = self.check()

        if result.valid:
            self._last_error_message = None
            self._last_failure_reason = None
            self._on_error(None)
            return True

        if self._last_error_message is None:
            self._last_error_message = result.message or f"{self._name} is not valid"
        self._last_failure_reason = result.reason

        logger.debug(
            "Field '%s' failed %s (%s): %s",
            self._name,
            self._rule.kind.value,
            result.reason.value if result.reason else "unknown",
            self._last_error_message,
        )
        self._on_error(self._last_error_message)
        return False

    def reset(self) -> None:
        """Clear the error slot and tell the display there is no error."""
        self._last_error_message = None
        self._last_failure_reason = None
        self._on_error(None)
