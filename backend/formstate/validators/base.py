"""Base check: abstract class implementing the Strategy Pattern.

Each check handles one constraint kind of a rule descriptor and is
independently testable. New checks are added without modifying the schema.
"""

from abc import ABC, abstractmethod
from typing import Any

from formstate.models.rules import RuleItem

NATIVE_STRING_TYPES = {"string", "url", "hex", "email", "date", "pattern"}
NUMERIC_TYPES = {"number", "integer", "float"}


def is_empty_value(value: Any, rule_type: str) -> bool:
    """Whether `value` counts as "not filled in" for a rule of `rule_type`."""
    if value is None:
        return True
    if rule_type == "array" and isinstance(value, (list, tuple)) and len(value) == 0:
        return True
    if rule_type in NATIVE_STRING_TYPES and isinstance(value, str) and value == "":
        return True
    return False


def rule_type(rule: RuleItem) -> str:
    """Effective type of a rule; untyped rules are string rules."""
    if rule.type:
        return rule.type
    if rule.pattern is not None and not isinstance(rule.pattern, str):
        return "pattern"
    return "string"


class BaseCheck(ABC):
    """Abstract base for all built-in rule checks.

    Contract:
        - check() is deterministic: same input -> same output
        - check() returns a list of messages (empty = no issues)
        - check() never raises for bad *values*, only reports them
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def applies(self, rule: RuleItem, kind: str) -> bool:
        """Whether this check has anything to say about `rule`."""
        ...

    @abstractmethod
    def check(self, rule: RuleItem, kind: str, value: Any, field: str, messages: dict) -> list[str]:
        """Run the check against one value.

        Args:
            rule: The static rule descriptor
            kind: Effective rule type (see rule_type)
            value: Value after the rule's transform
            field: Field name, used in messages
            messages: Message templates

        Returns:
            List of error messages
        """
        ...
