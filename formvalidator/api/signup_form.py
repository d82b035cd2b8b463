"""
The demo sign-up form.

Three fields, rules fixed in code:
- Name:  Required
- Age:   whole number that must be divisible by two (absent if unparseable)
- Email: Email rule, keeps the default field name
"""

from collections.abc import Callable

from formvalidator.core.field import DEFAULT_FIELD_NAME, ValidationField
from formvalidator.core.form import Flow, FormValidator
from formvalidator.core.rules import Custom, Email

NAME_FIELD = "Name"
AGE_FIELD = "Age"

AGE_ERROR_MESSAGE = "Age must be divisible by two"


def parse_age(raw: str | None) -> int | None:
    """Parse the age input as an integer, or None if it is not one."""
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _age_is_even(value) -> tuple[bool, str | None]:
    return (value is not None and value % 2 == 0), AGE_ERROR_MESSAGE


def build_signup_form(
    name: str,
    age: str,
    email: str,
    flow: Flow = Flow.DOWN,
    on_error: Callable[[str, str | None], None] | None = None,
) -> FormValidator:
    """Build the sign-up form for one submission.

    Args:
        name: Raw name input.
        age: Raw age input; parsed to an int.
        email: Raw email input.
        flow: Aggregation policy.
        on_error: Optional sink called as `on_error(field_name, message)`
            whenever a field's displayed error changes.

    Returns:
        A FormValidator ready to `validate()`.
    """

    def sink(field_name: str) -> Callable[[str | None], None] | None:
        if on_error is None:
            return None
        return lambda message: on_error(field_name, message)

    return FormValidator(
        flow=flow,
        fields=[
            ValidationField(value=name, name=NAME_FIELD, on_error=sink(NAME_FIELD)),
            ValidationField(
                value=parse_age(age),
                name=AGE_FIELD,
                rule=Custom(predicate=_age_is_even),
                on_error=sink(AGE_FIELD),
            ),
            ValidationField(
                value=email,
                rule=Email(),
                on_error=sink(DEFAULT_FIELD_NAME),
            ),
        ],
    )
