"""Field and form state models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from formstate.models.rules import CustomRule, StaticRule, as_custom_rule


class FieldError(BaseModel):
    """A single rule violation for one field."""

    model_config = ConfigDict(frozen=True)

    message: str
    field: str


class FieldRecord(BaseModel):
    """Authoritative state of one registered field."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: Optional[str] = None
    value: Any = None
    rules: tuple[CustomRule, ...] = ()
    is_valid: bool = True
    errors: tuple[FieldError, ...] = ()

    @field_validator("rules", mode="before")
    @classmethod
    def tag_rules(cls, value: Any) -> tuple:
        if value is None:
            return ()
        return tuple(as_custom_rule(rule) for rule in value)

    @property
    def is_required(self) -> bool:
        # Generators are not evaluated here; only declared static rules count.
        return any(isinstance(r, StaticRule) and r.rule.required for r in self.rules)

    @property
    def has_rules(self) -> bool:
        return len(self.rules) > 0


class FormState(BaseModel):
    """Aggregate view of a form, as of the last aggregate validation."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool = True
    is_submitting: bool = False
    errors: dict[str, list[FieldError]] = Field(default_factory=dict)


class ValidationOutcome(BaseModel):
    """Result of validating every field in one pass."""

    is_valid: bool
    errors: dict[str, list[FieldError]] = Field(default_factory=dict)
    values: dict[str, Any] = Field(default_factory=dict)
