"""
Test helpers shared across the FormValidator test suite.

- ErrorRecorder: stands in for a field's `on_error` display sink
- counting_field: a field whose Custom rule counts its evaluations
"""

from formvalidator.core.field import ValidationField
from formvalidator.core.rules import Custom


class ErrorRecorder:
    """Records every `on_error` call.

    Usage:
        recorder = ErrorRecorder()
        field = ValidationField(value="", name="Name", on_error=recorder)
        field.valid()
        assert recorder.calls == ["Name is required"]
    """

    def __init__(self):
        self.calls: list[str | None] = []

    def __call__(self, message: str | None) -> None:
        self.calls.append(message)

    @property
    def last(self) -> str | None:
        return self.calls[-1] if self.calls else None


class CountingRule:
    """Builds Custom rules that count how often their field was evaluated."""

    def __init__(self, valid: bool, message: str | None = None):
        self.valid = valid
        self.message = message
        self.evaluations = 0

    def rule(self) -> Custom:
        def predicate(value):
            self.evaluations += 1
            return self.valid, (None if self.valid else self.message)

        return Custom(predicate=predicate)


def counting_field(
    name: str,
    valid: bool,
    recorder: ErrorRecorder | None = None,
) -> tuple[ValidationField, CountingRule]:
    """Build a field whose Custom rule passes or fails as told and counts calls."""
    counter = CountingRule(valid, message=f"{name} is bad")
    field = ValidationField(
        value=name.lower(),
        name=name,
        rule=counter.rule(),
        on_error=recorder,
    )
    return field, counter
