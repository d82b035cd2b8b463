"""
Validation rule models.

Rules are the closed set of strategies a field can be validated with.
Each rule is a frozen Pydantic model carrying only the parameters its
check needs, so one instance can be shared across fields and passes.
The dispatch that applies a rule to a value lives in `checks.py`.
"""

from collections.abc import Callable
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


# --- Enums ---


class RuleKind(str, Enum):
    """Discriminator for the supported rule strategies."""

    REQUIRED = "required"
    MUST_BE_MORE_THAN = "must_be_more_than"
    MUST_BE_LESS_THAN = "must_be_less_than"
    MUST_BE_IN_RANGE = "must_be_in_range"
    MUST_BE_EQUAL_TO = "must_be_equal_to"
    CUSTOM = "custom"
    EMAIL = "email"
    OPTIONAL = "optional"


# Signature of a Custom rule predicate: value -> (is_valid, error_message)
CustomPredicate = Callable[[Any], tuple[bool, str | None]]


class _RuleBase(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Parameterless rules ---


class Required(_RuleBase):
    """Value must be present. Text values must also not be blank."""

    kind: Literal[RuleKind.REQUIRED] = RuleKind.REQUIRED


class Email(_RuleBase):
    """Text value must look like an email address. Other kinds always fail."""

    kind: Literal[RuleKind.EMAIL] = RuleKind.EMAIL


class Optional(_RuleBase):
    """Always valid, even when no value is present."""

    kind: Literal[RuleKind.OPTIONAL] = RuleKind.OPTIONAL


# --- Template rules ---


class MustBeMoreThan(_RuleBase):
    """Text must be longer than `str(template)`; numbers greater than `template`.

    Values that are neither text nor numbers always fail.
    """

    kind: Literal[RuleKind.MUST_BE_MORE_THAN] = RuleKind.MUST_BE_MORE_THAN
    template: Any = Field(
        ...,
        description="Reference value; its string length is used for text fields",
    )


class MustBeLessThan(_RuleBase):
    """Text must be shorter than `str(template)`; numbers less than `template`.

    A number compared against a non-numeric template always fails.
    """

    kind: Literal[RuleKind.MUST_BE_LESS_THAN] = RuleKind.MUST_BE_LESS_THAN
    template: Any = Field(
        ...,
        description="Reference value; its string length is used for text fields",
    )


class MustBeEqualTo(_RuleBase):
    """Equality against `template`.

    - text vs text template: exact match
    - text vs numeric template: character length equals the template's digit count
    - number: equal to the template widened to float
    - anything else: plain equality
    """

    kind: Literal[RuleKind.MUST_BE_EQUAL_TO] = RuleKind.MUST_BE_EQUAL_TO
    template: Any = Field(
        ...,
        description="Value (or, for numeric templates on text, length) to match",
    )


class MustBeInRange(_RuleBase):
    """Numeric value must fall within [min, max] inclusive."""

    kind: Literal[RuleKind.MUST_BE_IN_RANGE] = RuleKind.MUST_BE_IN_RANGE
    min: int | float = Field(default=0, description="Inclusive lower bound")
    max: int | float = Field(default=100, description="Inclusive upper bound")

    @model_validator(mode="after")
    def validate_bounds(self) -> "MustBeInRange":
        """The lower bound cannot exceed the upper bound."""
        if self.min > self.max:
            raise ValueError(
                f"MustBeInRange min ({self.min}) must not exceed max ({self.max})"
            )
        return self


class Custom(_RuleBase):
    """Caller-supplied validation.

    The predicate receives the raw value and returns `(is_valid, message)`.
    Return `None` as the message when validation passes.
    """

    kind: Literal[RuleKind.CUSTOM] = RuleKind.CUSTOM
    predicate: CustomPredicate


# --- Union type for all rules ---

Rule = Annotated[
    Required
    | MustBeMoreThan
    | MustBeLessThan
    | MustBeInRange
    | MustBeEqualTo
    | Custom
    | Email
    | Optional,
    Field(discriminator="kind"),
]
