"""
Form validator: runs every field and aggregates one overall result.

The flow decides the order fields are visited in and which failing field
supplies the form's error message:

- DOWN:   stop at the first failing field and use its message
- UP:     visit every field and use the message of the last failure
- SPLASH: visit every field so each shows its own error, and use a fixed
          fallback message for the form
"""

import logging
from collections.abc import Callable, Iterable
from enum import Enum

from formvalidator.core.field import ValidationField

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Fill all required fields"

ValidityCallback = Callable[[bool], None]


class Flow(str, Enum):
    """Traversal and aggregation policy for a form."""

    DOWN = "down"
    UP = "up"
    SPLASH = "splash"

    @property
    def fallback_error_message(self) -> str:
        """Form-level message used when the flow does not attribute errors."""
        return FALLBACK_ERROR_MESSAGE


def _ignore_result(valid: bool) -> None:
    return None


class FormValidator:
    """Validates an ordered collection of fields under one flow.

    Args:
        fields: The fields, in display order. Order decides traversal and
            which message wins.
        flow: The aggregation policy. Defaults to Flow.DOWN.
    """

    def __init__(
        self,
        fields: Iterable[ValidationField] = (),
        flow: Flow = Flow.DOWN,
    ):
        self.fields: list[ValidationField] = list(fields)
        self.flow = Flow(flow)
        self.on_validate: ValidityCallback = _ignore_result
        self.overall_error_message: str | None = None
        self._is_valid = False
        self._subscribers: list[ValidityCallback] = []

    # -----------------------------------------------------------------
    # Observable validity
    # -----------------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        """Result of the most recent `validate()` call (False before any)."""
        return self._is_valid

    def _set_is_valid(self, valid: bool) -> None:
        if valid == self._is_valid:
            return
        self._is_valid = valid
        for callback in list(self._subscribers):
            callback(valid)

    def subscribe(self, callback: ValidityCallback) -> Callable[[], None]:
        """Register a callback invoked whenever `is_valid` changes.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # -----------------------------------------------------------------
    # Validation
    # -----------------------------------------------------------------

    def validate(self) -> bool:
        """Validate every field according to the flow.

        Returns:
            True if the form is valid.
        """
        self.overall_error_message = None
        for field in self.fields:
            field.reset()

        valid = True
        failing_field: ValidationField | None = None

        match self.flow:
            case Flow.DOWN:
                failing_field = next(
                    (field for field in self.fields if not field.valid()),
                    None,
                )

            case Flow.UP:
                for field in self.fields:
                    if not field.valid():
                        failing_field = field

            case Flow.SPLASH:
                results = [field.valid() for field in self.fields]
                valid = all(results)
                # Attribution is not meaningful here; the first field only
                # marks that the fallback message applies.
                if not valid:
                    failing_field = self.fields[0]

        if failing_field is not None:
            valid = False
            if self.flow is Flow.SPLASH:
                self.overall_error_message = self.flow.fallback_error_message
            else:
                self.overall_error_message = failing_field.last_error_message

        logger.debug(
            "Form validated with flow=%s over %d fields: valid=%s, message=%r",
            self.flow.value,
            len(self.fields),
            valid,
            self.overall_error_message,
        )

        self.on_validate(valid)
        self._set_is_valid(valid)
        return valid

    def field_errors(self) -> dict[str, str | None]:
        """Map each field name to its current error message (None if none).

        Fields sharing a name collapse to the last one in order.
        """
        return {field.name: field.last_error_message for field in self.fields}
