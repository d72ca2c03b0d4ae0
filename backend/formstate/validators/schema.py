"""Schema: validates a value map against a descriptor of static rules.

This is the validation engine the form validators hand their resolved rules
to. It checks every field of the descriptor, collects messages per field, and
raises ValidationFailed when anything was rejected.

Usage:
    schema = Schema({"email": [{"required": True}, {"type": "email"}]})
    await schema.validate({"email": "someone@example.com"})
"""

import asyncio
import inspect
import time
from typing import Any, Iterable, Optional

import structlog

from formstate.errors import RuleDefinitionError, ValidationFailed
from formstate.models.fields import FieldError
from formstate.models.rules import RuleItem, RuleLike, coerce_rule
from formstate.validators.base import NUMERIC_TYPES, BaseCheck, is_empty_value, rule_type
from formstate.validators.checks import (
    KNOWN_TYPES,
    EnumCheck,
    PatternCheck,
    RangeCheck,
    RequiredCheck,
    TypeCheck,
    WhitespaceCheck,
)
from formstate.validators.messages import format_message, merge_messages

logger = structlog.get_logger()

Descriptor = dict[str, Iterable[RuleLike]]


class Schema:
    """Runs built-in checks and custom validator functions for each field.

    Per rule:
        - a `validator` / `async_validator` function replaces the built-in checks
        - a rule with only `required` runs the required check
        - otherwise: empty + not required -> skipped; required failure stops the
          rule; then type, range, pattern, enum and whitespace checks
        - `message`, when set, replaces whatever the rule reported
    """

    def __init__(
        self,
        descriptor: Descriptor,
        messages: Optional[dict[str, Any]] = None,
        checks: Optional[list[BaseCheck]] = None,
    ):
        """Initialize from a descriptor.

        Args:
            descriptor: Field name -> ordered rule descriptors (dicts or RuleItem)
            messages: Optional message template overrides
            checks: Optional check chain. If None, uses all defaults.

        Raises:
            RuleDefinitionError: a descriptor entry is malformed or has an unknown type
        """
        self.descriptor: dict[str, list[RuleItem]] = {
            name: [coerce_rule(rule) for rule in rules] for name, rules in descriptor.items()
        }
        for name, rules in self.descriptor.items():
            for rule in rules:
                if not rule.has_custom_validator and rule_type(rule) not in KNOWN_TYPES:
                    raise RuleDefinitionError(f"Unknown rule type '{rule.type}' on field '{name}'")
        self.messages = merge_messages(messages)
        self.required_check = RequiredCheck()
        self.checks = checks or self._default_checks()

    @staticmethod
    def _default_checks() -> list[BaseCheck]:
        """Create the default check chain in execution order."""
        return [
            TypeCheck(),        # Must run first; the rest assume the right type
            RangeCheck(),
            PatternCheck(),
            EnumCheck(),
            WhitespaceCheck(),
        ]

    async def validate(self, values: dict[str, Any]) -> None:
        """Validate `values` against the descriptor.

        Raises:
            ValidationFailed: at least one rule rejected its field's value
        """
        start_time = time.perf_counter()

        names = list(self.descriptor)
        results = await asyncio.gather(
            *(self._validate_field(name, self.descriptor[name], values.get(name)) for name in names)
        )

        errors: list[FieldError] = []
        fields: dict[str, list[FieldError]] = {}
        for name, field_errors in zip(names, results):
            if field_errors:
                errors.extend(field_errors)
                fields[name] = field_errors

        logger.debug(
            "schema_validated",
            fields=len(names),
            failed_fields=len(fields),
            total_errors=len(errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        if errors:
            raise ValidationFailed(errors, fields)

    async def _validate_field(self, name: str, rules: list[RuleItem], value: Any) -> list[FieldError]:
        field_errors: list[FieldError] = []
        for rule in rules:
            messages = await self._run_rule(name, rule, value)
            if messages and rule.message is not None:
                messages = [rule.message]
            field_errors.extend(FieldError(message=m, field=name) for m in messages)
        return field_errors

    async def _run_rule(self, name: str, rule: RuleItem, value: Any) -> list[str]:
        if rule.transform is not None:
            try:
                value = rule.transform(value)
            except Exception as e:
                raise RuleDefinitionError(f"Transform for field '{name}' failed: {e}") from e

        if rule.has_custom_validator:
            return await self._run_custom(name, rule, value)

        kind = rule_type(rule)
        if rule.is_required_only:
            # Emptiness follows the value itself when the rule names no type
            required_kind = "array" if rule.type is None and isinstance(value, (list, tuple)) else kind
            return self.required_check.check(rule, required_kind, value, name, self.messages)

        # A blank numeric input means "no value"
        if kind in NUMERIC_TYPES and value == "":
            value = None

        if is_empty_value(value, kind):
            if not rule.required:
                return []
            return self.required_check.check(rule, kind, value, name, self.messages)

        messages: list[str] = []
        for check in self.checks:
            if not check.applies(rule, kind):
                continue
            messages.extend(check.check(rule, kind, value, name, self.messages))
            if messages and isinstance(check, TypeCheck):
                break
        return messages

    async def _run_custom(self, name: str, rule: RuleItem, value: Any) -> list[str]:
        """Run a rule's validator function and normalize what it returns."""
        try:
            if rule.validator is not None:
                result = rule.validator(value)
                if inspect.isawaitable(result):
                    result = await result
            else:
                result = await rule.async_validator(value)
        except Exception as e:
            logger.warning("custom_validator_raised", field=name, error=str(e))
            return [str(e) or format_message(self.messages, "fails", field=name)]

        if result is True or result is None:
            return []
        if result is False:
            return [format_message(self.messages, "fails", field=name)]
        if isinstance(result, str):
            return [result]
        if isinstance(result, Exception):
            return [str(result)]
        if isinstance(result, (list, tuple)):
            return [str(m) for m in result]
        return [format_message(self.messages, "fails", field=name)]
