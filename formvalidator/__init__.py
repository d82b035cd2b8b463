"""
Declarative field validation for interactive forms.

Fields pair a value with a rule; a FormValidator runs them under a flow
and reports one overall result plus per-field error messages.
"""

from formvalidator.core.checks import CheckResult, FailureReason
from formvalidator.core.field import ValidationField
from formvalidator.core.form import FALLBACK_ERROR_MESSAGE, Flow, FormValidator
from formvalidator.core.kinds import TaggedValue, ValueKind
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
    RuleKind,
)

__all__ = [
    "ValidationField",
    "FormValidator",
    "Flow",
    "FALLBACK_ERROR_MESSAGE",
    "CheckResult",
    "FailureReason",
    "TaggedValue",
    "ValueKind",
    "Rule",
    "RuleKind",
    "Required",
    "MustBeMoreThan",
    "MustBeLessThan",
    "MustBeInRange",
    "MustBeEqualTo",
    "Custom",
    "Email",
    "Optional",
]
