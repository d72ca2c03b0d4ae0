"""Rule resolution: turns declared rules into static descriptors right before validation.

Generators are called fresh on every validation with a live accessor, so a
rule can depend on another field's current value without re-registering.
"""

from typing import Any, Iterable

from formstate.errors import RuleDefinitionError
from formstate.models.rules import FieldAccessor, RuleGenerator, RuleItem, StaticRule, coerce_rule


def resolve(rules: Iterable[Any], accessor: FieldAccessor) -> list[RuleItem]:
    """Resolve an ordered sequence of CustomRule into static RuleItems.

    Raises:
        RuleDefinitionError: a generator raised or returned something unusable
    """
    resolved = []
    for rule in rules:
        if isinstance(rule, StaticRule):
            resolved.append(rule.rule)
        elif isinstance(rule, RuleGenerator):
            resolved.append(_call_generator(rule, accessor))
        else:
            raise RuleDefinitionError(f"Untagged rule {rule!r}; register rules through FieldRecord")
    return resolved


def _call_generator(rule: RuleGenerator, accessor: FieldAccessor) -> RuleItem:
    try:
        produced = rule.factory(accessor)
    except Exception as e:
        raise RuleDefinitionError(f"Rule generator failed: {e}") from e
    return coerce_rule(produced)
