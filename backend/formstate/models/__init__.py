"""Data model for the field store and validation results."""

from formstate.models.rules import (
    CustomRule,
    FieldAccessor,
    RuleGenerator,
    RuleItem,
    StaticRule,
    as_custom_rule,
    coerce_rule,
    generator,
    static,
)
from formstate.models.fields import FieldError, FieldRecord, FormState, ValidationOutcome
from formstate.models.actions import (
    AddField,
    FieldsAction,
    RemoveField,
    UpdateValidateResult,
    UpdateValue,
)

__all__ = [
    "CustomRule",
    "FieldAccessor",
    "RuleGenerator",
    "RuleItem",
    "StaticRule",
    "as_custom_rule",
    "coerce_rule",
    "generator",
    "static",
    "FieldError",
    "FieldRecord",
    "FormState",
    "ValidationOutcome",
    "AddField",
    "FieldsAction",
    "RemoveField",
    "UpdateValidateResult",
    "UpdateValue",
]
