"""Rule models: static rule descriptors, rule generators, and the field accessor.

A field declares an ordered sequence of CustomRule. Each entry is tagged once,
when the field is registered, as either a StaticRule (consumed as-is) or a
RuleGenerator (called with a FieldAccessor right before every validation).
"""

import re
from typing import Annotated, Any, Callable, Literal, Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from formstate.errors import RuleDefinitionError


class FieldAccessor(Protocol):
    """Read-only capability handed to rule generators."""

    def get_field_value(self, name: str) -> Any:
        ...


class RuleItem(BaseModel):
    """A static rule descriptor understood by the validation engine."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    type: Optional[str] = None               # string, number, integer, float, boolean, array, object, enum, email, url, date, regexp, pattern, any
    required: bool = False
    pattern: Optional[Union[str, re.Pattern]] = None
    min: Optional[Union[int, float]] = None  # length for strings/arrays, value for numbers
    max: Optional[Union[int, float]] = None
    len: Optional[int] = None
    enum: Optional[list[Any]] = None
    whitespace: bool = False
    message: Optional[str] = None            # replaces every message this rule produces
    transform: Optional[Callable[[Any], Any]] = None
    validator: Optional[Callable[[Any], Any]] = None
    async_validator: Optional[Callable[[Any], Any]] = None

    @property
    def has_custom_validator(self) -> bool:
        return self.validator is not None or self.async_validator is not None

    @property
    def is_required_only(self) -> bool:
        """True when the rule declares nothing but `required` (and maybe `message`)."""
        return self.model_fields_set - {"message"} == {"required"}


RuleLike = Union[RuleItem, dict]


class StaticRule(BaseModel):
    """A rule descriptor used as declared."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    rule: RuleItem


class RuleGenerator(BaseModel):
    """A rule computed from the current field values at validation time."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["generator"] = "generator"
    factory: Callable[[Any], Any]


CustomRule = Annotated[Union[StaticRule, RuleGenerator], Field(discriminator="kind")]


def coerce_rule(rule: Any) -> RuleItem:
    """Turn a RuleItem or a plain dict into a RuleItem."""
    if isinstance(rule, RuleItem):
        return rule
    if isinstance(rule, dict):
        try:
            return RuleItem(**rule)
        except PydanticValidationError as e:
            raise RuleDefinitionError(f"Invalid rule descriptor {rule!r}: {e}") from e
    raise RuleDefinitionError(f"Expected a rule descriptor, got {type(rule).__name__}")


def as_custom_rule(rule: Any) -> Union[StaticRule, RuleGenerator]:
    """Tag a raw rule declaration as static or generator."""
    if isinstance(rule, (StaticRule, RuleGenerator)):
        return rule
    if isinstance(rule, (RuleItem, dict)):
        return StaticRule(rule=coerce_rule(rule))
    if callable(rule):
        return RuleGenerator(factory=rule)
    raise RuleDefinitionError(f"Unsupported rule declaration: {rule!r}")


def static(**kwargs: Any) -> StaticRule:
    """Shorthand: static(required=True, message="...")."""
    return StaticRule(rule=coerce_rule(kwargs))


def generator(factory: Callable[[FieldAccessor], RuleLike]) -> RuleGenerator:
    """Shorthand for declaring a cross-field rule; usable as a decorator."""
    return RuleGenerator(factory=factory)
