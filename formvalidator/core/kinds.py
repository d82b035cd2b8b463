"""
Value kind classification.

Rules behave differently for text, numbers, and everything else. Rather
than scattering isinstance checks through the rule dispatch, a raw value
is wrapped once in a TaggedValue that records which of the three kinds
it belongs to.
"""

import numbers
from enum import Enum
from typing import Any, NamedTuple


class ValueKind(str, Enum):
    """Semantic kind of a field value, as seen by the rule dispatch."""

    TEXT = "text"
    NUMBER = "number"
    OTHER = "other"


class TaggedValue(NamedTuple):
    """A raw field value paired with its classified kind."""

    kind: ValueKind
    value: Any

    @classmethod
    def of(cls, value: Any) -> "TaggedValue":
        return cls(classify(value), value)


def classify(value: Any) -> ValueKind:
    """Return the kind of a raw value.

    Booleans are OTHER even though `bool` subclasses `int`,
    and complex numbers are OTHER because they cannot be widened to float.
    """
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, bool) or isinstance(value, complex):
        return ValueKind.OTHER
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    return ValueKind.OTHER


def is_numeric(value: Any) -> bool:
    """True if the value would be classified as a number."""
    return classify(value) is ValueKind.NUMBER


def widen(value: Any) -> Any:
    """Widen a number to float for comparison.

    Integers too large for a float are returned unchanged; Python compares
    them against floats exactly.
    """
    try:
        return float(value)
    except OverflowError:
        return value


def to_float(value: Any) -> Any:
    """Widen a template to float, treating anything unparseable as 0.

    Numbers are widened directly; anything else is parsed through
    `str(value)` so that numeric strings such as "18" are accepted.

    Args:
        value: The template to widen.

    Returns:
        The widened value, or 0.0 if it cannot be parsed.
    """
    if is_numeric(value):
        return widen(value)
    try:
        return float(str(value))
    except (ValueError, TypeError, OverflowError):
        return 0.0
