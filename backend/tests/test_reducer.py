"""Field store transition tests."""

import pytest
from pydantic import ValidationError

from formstate.models import AddField, FieldError, FieldRecord, RemoveField, UpdateValidateResult, UpdateValue
from formstate.models.actions import BaseAction
from formstate.store import apply, empty_state, read, read_all, replay


def _add(name, **kwargs):
    return AddField(name=name, record=FieldRecord(name=name, **kwargs))


def test_add_field_twice_last_writer_wins():
    state = apply(empty_state(), _add("x", value="first", rules=[{"required": True}]))
    state = apply(state, _add("x", value="second", label="X"))

    assert list(state) == ["x"]
    assert state["x"] == FieldRecord(name="x", value="second", label="X")
    assert state["x"].rules == ()


def test_add_field_keys_record_by_action_name():
    state = apply(empty_state(), AddField(name="email", record=FieldRecord(name="other", value="a")))
    assert state["email"].name == "email"


def test_read_after_write():
    state = apply(empty_state(), _add("x", value=""))
    state = apply(state, UpdateValue(name="x", value="hello"))
    assert read(state, "x") == "hello"


def test_read_unregistered_is_none():
    assert read(empty_state(), "ghost") is None


def test_update_value_on_unknown_field_is_noop():
    state = apply(empty_state(), _add("x", value="a"))
    assert apply(state, UpdateValue(name="ghost", value=1)) == state
    assert apply(state, UpdateValidateResult(name="ghost", is_valid=False)) == state
    assert apply(state, RemoveField(name="ghost")) == state


def test_update_value_changes_only_value():
    state = apply(empty_state(), _add("x", value="a", rules=[{"required": True}]))
    state = apply(state, UpdateValidateResult(
        name="x", is_valid=False, errors=(FieldError(message="x is required", field="x"),)
    ))
    updated = apply(state, UpdateValue(name="x", value="b"))

    assert updated["x"].value == "b"
    assert updated["x"].rules == state["x"].rules
    assert updated["x"].is_valid is False
    assert updated["x"].errors == state["x"].errors


def test_update_validate_result_changes_only_validity():
    state = apply(empty_state(), _add("x", value="a"))
    state = apply(state, _add("y", value="b"))
    errors = [FieldError(message="bad", field="x")]
    updated = apply(state, UpdateValidateResult(name="x", is_valid=False, errors=errors))

    assert updated["x"].is_valid is False
    assert updated["x"].errors == tuple(errors)
    assert updated["x"].value == "a"
    assert updated["y"] is state["y"]


def test_transitions_never_touch_previous_snapshot():
    before = apply(empty_state(), _add("x", value="a"))
    after = apply(before, UpdateValue(name="x", value="b"))

    assert after is not before
    assert before["x"].value == "a"
    with pytest.raises(ValidationError):
        before["x"].value = "mutated"


def test_noop_still_returns_new_snapshot():
    state = apply(empty_state(), _add("x"))
    assert apply(state, UpdateValue(name="ghost", value=1)) is not state


def test_remove_field():
    state = apply(empty_state(), _add("x"))
    state = apply(state, _add("y"))
    state = apply(state, RemoveField(name="x"))
    assert list(state) == ["y"]


def test_read_all():
    state = replay([_add("a", value=1), _add("b", value=2), UpdateValue(name="a", value=3)])
    assert read_all(state) == {"a": 3, "b": 2}


def test_unsupported_action_raises():
    class Bogus(BaseAction):
        type: str = "bogus"

    with pytest.raises(TypeError):
        apply(empty_state(), Bogus(name="x"))
