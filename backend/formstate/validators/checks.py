"""Built-in checks for static rule descriptors."""

import datetime
import re
from typing import Any

from formstate.models.rules import RuleItem
from formstate.validators.base import NATIVE_STRING_TYPES, BaseCheck, is_empty_value
from formstate.validators.messages import format_message

EMAIL_RE = re.compile(r"^[^\s@<>()\[\],;:\"]+@([A-Za-z0-9\-]+\.)+[A-Za-z]{2,}$")
URL_RE = re.compile(
    r"^(?:(?:https?|ftp)://)"
    r"(?:\S+(?::\S*)?@)?"
    r"(?:localhost|(?:[A-Za-z0-9\u00a1-\uffff\-]+\.)*[A-Za-z0-9\u00a1-\uffff\-]+(?:\.[A-Za-z\u00a1-\uffff]{2,}))"
    r"(?::\d{2,5})?"
    r"(?:[/?#]\S*)?$"
)
HEX_RE = re.compile(r"^#?([a-f0-9]{6}|[a-f0-9]{3})$", re.IGNORECASE)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_regexp(value: Any) -> bool:
    if isinstance(value, re.Pattern):
        return True
    if not isinstance(value, str):
        return False
    try:
        re.compile(value)
    except re.error:
        return False
    return True


TYPE_PREDICATES = {
    "string": lambda v: isinstance(v, str),
    "number": _is_number,
    "integer": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "float": lambda v: isinstance(v, float),
    "boolean": lambda v: isinstance(v, bool),
    "array": lambda v: isinstance(v, (list, tuple)),
    "object": lambda v: isinstance(v, dict),
    "method": callable,
    "regexp": _is_regexp,
    "date": lambda v: isinstance(v, (datetime.date, datetime.datetime)),
    "email": lambda v: isinstance(v, str) and EMAIL_RE.match(v) is not None,
    "url": lambda v: isinstance(v, str) and URL_RE.match(v) is not None,
    "hex": lambda v: isinstance(v, str) and HEX_RE.match(v) is not None,
}

# Types with no type predicate of their own
UNTYPED_KINDS = {"any", "enum", "pattern"}

KNOWN_TYPES = set(TYPE_PREDICATES) | UNTYPED_KINDS


class RequiredCheck(BaseCheck):
    """Value must be present (non-empty for its type)."""

    @property
    def name(self) -> str:
        return "required"

    def applies(self, rule: RuleItem, kind: str) -> bool:
        return rule.required

    def check(self, rule: RuleItem, kind: str, value: Any, field: str, messages: dict) -> list[str]:
        if is_empty_value(value, kind):
            return [format_message(messages, "required", field=field)]
        return []


class TypeCheck(BaseCheck):
    """Value must be of the rule's declared type."""

    @property
    def name(self) -> str:
        return "type"

    def applies(self, rule: RuleItem, kind: str) -> bool:
        return kind not in UNTYPED_KINDS

    def check(self, rule: RuleItem, kind: str, value: Any, field: str, messages: dict) -> list[str]:
        if TYPE_PREDICATES[kind](value):
            return []
        return [format_message(messages, f"types.{kind}", field=field, type=kind)]


class RangeCheck(BaseCheck):
    """min / max / len over string length, numeric value, or array length."""

    @property
    def name(self) -> str:
        return "range"

    def applies(self, rule: RuleItem, kind: str) -> bool:
        return rule.min is not None or rule.max is not None or rule.len is not None

    def check(self, rule: RuleItem, kind: str, value: Any, field: str, messages: dict) -> list[str]:
        if kind in NATIVE_STRING_TYPES and isinstance(value, str):
            key, measured = "string", len(value)
        elif kind in ("number", "integer", "float", "any") and _is_number(value):
            key, measured = "number", value
        elif kind in ("array", "any") and isinstance(value, (list, tuple)):
            key, measured = "array", len(value)
        else:
            return []

        params = {"field": field, "min": rule.min, "max": rule.max, "len": rule.len}
        if rule.len is not None:
            if measured != rule.len:
                return [format_message(messages, f"{key}.len", **params)]
        elif rule.min is not None and rule.max is None:
            if measured < rule.min:
                return [format_message(messages, f"{key}.min", **params)]
        elif rule.max is not None and rule.min is None:
            if measured > rule.max:
                return [format_message(messages, f"{key}.max", **params)]
        elif measured < rule.min or measured > rule.max:
            return [format_message(messages, f"{key}.range", **params)]
        return []


class PatternCheck(BaseCheck):
    """String value must match the rule's regular expression."""

    @property
    def name(self) -> str:
        return "pattern"

    def applies(self, rule: RuleItem, kind: str) -> bool:
        return rule.pattern is not None

    def check(self, rule: RuleItem, kind: str, value: Any, field: str, messages: dict) -> list[str]:
        if not isinstance(value, str):
            return []
        pattern = re.compile(rule.pattern) if isinstance(rule.pattern, str) else rule.pattern
        if pattern.search(value):
            return []
        return [
            format_message(
                messages, "pattern.mismatch", field=field, value=value, pattern=pattern.pattern
            )
        ]


class EnumCheck(BaseCheck):
    """Value must be one of the rule's enumerated values."""

    @property
    def name(self) -> str:
        return "enum"

    def applies(self, rule: RuleItem, kind: str) -> bool:
        return rule.enum is not None

    def check(self, rule: RuleItem, kind: str, value: Any, field: str, messages: dict) -> list[str]:
        if value in rule.enum:
            return []
        return [
            format_message(messages, "enum", field=field, enum=", ".join(str(v) for v in rule.enum))
        ]


class WhitespaceCheck(BaseCheck):
    """String value must not be whitespace only."""

    @property
    def name(self) -> str:
        return "whitespace"

    def applies(self, rule: RuleItem, kind: str) -> bool:
        return rule.whitespace

    def check(self, rule: RuleItem, kind: str, value: Any, field: str, messages: dict) -> list[str]:
        if isinstance(value, str) and value.strip() == "":
            return [format_message(messages, "whitespace", field=field)]
        return []
