"""Aggregate validation tests."""

import asyncio

import pytest

from formstate.engine import validate_all_fields
from formstate.store.form_store import FormStore

from tests.engines import BrokenEngine


def test_failures_redistributed_onto_fields(store):
    store.add_field("a", rules=[{"required": True}], value="")
    store.add_field("b", rules=[{"required": True}], value="filled")
    outcome = asyncio.run(store.validate_all_fields())

    assert outcome.is_valid is False
    assert list(outcome.errors) == ["a"]
    assert outcome.errors["a"][0].message == "a is required"
    assert outcome.values == {"a": "", "b": "filled"}
    assert store.get_record("a").is_valid is False
    assert store.get_record("b").is_valid is True
    assert store.form.is_valid is False
    assert store.form.errors == outcome.errors


def test_all_valid_clears_submitting(store):
    store.add_field("a", rules=[{"required": True}], value="x")
    store.add_field("b", rules=[{"type": "email"}], value="someone@example.com")
    outcome = asyncio.run(validate_all_fields(store))

    assert outcome.is_valid is True
    assert outcome.errors == {}
    assert store.form.is_submitting is False
    assert store.form.is_valid is True


def test_success_clears_stale_failures(store):
    store.add_field("a", rules=[{"required": True}], value="")
    asyncio.run(store.validate_field("a"))
    assert store.get_record("a").is_valid is False

    store.set_field_value("a", "now filled")
    asyncio.run(store.validate_all_fields())
    assert store.get_record("a").is_valid is True
    assert store.get_record("a").errors == ()


def test_fields_without_rules_are_untouched(store):
    store.add_field("a", rules=[{"required": True}], value="")
    store.add_field("note", value="free text")
    before = store.get_record("note")
    asyncio.run(store.validate_all_fields())

    assert store.get_record("note") is before


def test_repeated_validation_gives_same_result(store):
    store.add_field("a", rules=[{"required": True}], value="")
    store.add_field("b", rules=[{"required": True}], value="x")
    first = asyncio.run(store.validate_all_fields())
    second = asyncio.run(store.validate_all_fields())

    assert first == second


def test_cross_field_rules_resolved_for_aggregate(store):
    store.add_field("password", rules=[{"required": True}], value="abc123")
    store.add_field(
        "confirm",
        rules=[lambda fields: {"validator": lambda v: v == fields.get_field_value("password"),
                               "message": "Passwords do not match"}],
        value="abc124",
    )
    outcome = asyncio.run(store.validate_all_fields())
    assert outcome.errors["confirm"][0].message == "Passwords do not match"


def test_submitting_flag_set_while_engine_runs(settings):
    seen = []
    store = FormStore(settings=settings)

    class SpyEngine:
        def __init__(self, descriptor):
            pass

        async def validate(self, values):
            seen.append(store.form.is_submitting)

    store.engine_factory = SpyEngine
    store.add_field("a", rules=[{"required": True}], value="x")
    asyncio.run(store.validate_all_fields())

    assert seen == [True]
    assert store.form.is_submitting is False


def test_unexpected_fault_propagates_and_clears_submitting(settings):
    store = FormStore(engine_factory=BrokenEngine, settings=settings)
    store.add_field("a", rules=[{"required": True}], value="x")

    with pytest.raises(RuntimeError):
        asyncio.run(store.validate_all_fields())
    assert store.form.is_submitting is False


def test_removed_fields_are_not_validated(store):
    store.add_field("a", rules=[{"required": True}], value="")
    store.add_field("b", rules=[{"required": True}], value="x")
    store.remove_field("a")
    outcome = asyncio.run(store.validate_all_fields())

    assert outcome.is_valid is True
    assert outcome.values == {"b": "x"}
