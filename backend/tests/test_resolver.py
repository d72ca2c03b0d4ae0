"""Rule tagging and resolution tests."""

import pytest

from formstate.engine import resolve
from formstate.errors import RuleDefinitionError
from formstate.models import FieldRecord, RuleGenerator, RuleItem, StaticRule, as_custom_rule, generator, static


class DictAccessor:
    def __init__(self, values):
        self.values = values

    def get_field_value(self, name):
        return self.values.get(name)


def test_dicts_and_rule_items_are_tagged_static():
    assert isinstance(as_custom_rule({"required": True}), StaticRule)
    assert isinstance(as_custom_rule(RuleItem(required=True)), StaticRule)


def test_callables_are_tagged_generators():
    assert isinstance(as_custom_rule(lambda fields: {"required": True}), RuleGenerator)


def test_tagged_rules_pass_through():
    rule = static(required=True)
    assert as_custom_rule(rule) is rule


def test_unsupported_declaration_rejected():
    with pytest.raises(RuleDefinitionError):
        as_custom_rule(42)


def test_unknown_descriptor_key_rejected():
    with pytest.raises(RuleDefinitionError):
        as_custom_rule({"requried": True})


def test_field_record_tags_rules_on_registration():
    record = FieldRecord(name="x", rules=[{"required": True}, lambda fields: {"min": 2}])
    assert [type(r) for r in record.rules] == [StaticRule, RuleGenerator]


def test_is_required_counts_static_rules_only():
    assert FieldRecord(name="x", rules=[{"required": True}]).is_required
    assert not FieldRecord(name="x", rules=[lambda fields: {"required": True}]).is_required
    assert not FieldRecord(name="x").is_required


def test_resolve_passes_static_rules_through():
    record = FieldRecord(name="x", rules=[{"required": True}, {"type": "string", "min": 3}])
    resolved = resolve(record.rules, DictAccessor({}))
    assert resolved == [RuleItem(required=True), RuleItem(type="string", min=3)]


def test_resolve_calls_generators_with_current_values():
    @generator
    def same_as_password(fields):
        return {"enum": [fields.get_field_value("password")]}

    accessor = DictAccessor({"password": "abc"})
    assert resolve([same_as_password], accessor)[0].enum == ["abc"]

    accessor.values["password"] = "xyz"
    assert resolve([same_as_password], accessor)[0].enum == ["xyz"]


def test_generator_failure_is_rule_definition_error():
    def broken(fields):
        raise KeyError("nope")

    with pytest.raises(RuleDefinitionError):
        resolve([generator(broken)], DictAccessor({}))


def test_generator_returning_garbage_is_rule_definition_error():
    with pytest.raises(RuleDefinitionError):
        resolve([generator(lambda fields: "required")], DictAccessor({}))


def test_untagged_rule_rejected():
    with pytest.raises(RuleDefinitionError):
        resolve([{"required": True}], DictAccessor({}))
