"""Field store transitions.

Pure function: (state, action) -> state
No side effects, no IO. The input state is never modified; every call returns
a new top-level mapping, and changed records are replaced, never mutated.
"""

from typing import Any, Iterable, Optional

from formstate.models.actions import (
    AddField,
    BaseAction,
    RemoveField,
    UpdateValidateResult,
    UpdateValue,
)
from formstate.models.fields import FieldRecord

FieldsState = dict[str, FieldRecord]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def empty_state() -> FieldsState:
    """The state of a store with no registered fields."""
    return {}


def apply(state: FieldsState, action: BaseAction) -> FieldsState:
    """Apply one action to the current state and return the new state."""
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unsupported field store action: {type(action).__name__}")
    return handler(dict(state), action)


def read(state: FieldsState, name: str) -> Optional[Any]:
    """Value of a field, or None if it is not registered."""
    record = state.get(name)
    return record.value if record is not None else None


def read_all(state: FieldsState) -> dict[str, Any]:
    """Snapshot of every registered field's value."""
    return {name: record.value for name, record in state.items()}


def replay(actions: Iterable[BaseAction]) -> FieldsState:
    """Rebuild a state by applying actions in order from an empty store."""
    state = empty_state()
    for action in actions:
        state = apply(state, action)
    return state


# ---------------------------------------------------------------------------
# Handlers (each receives a fresh shallow copy of the state)
# ---------------------------------------------------------------------------


def _add_field(state: FieldsState, action: AddField) -> FieldsState:
    state[action.name] = action.record.model_copy(update={"name": action.name})
    return state


def _update_value(state: FieldsState, action: UpdateValue) -> FieldsState:
    record = state.get(action.name)
    if record is None:
        return state
    state[action.name] = record.model_copy(update={"value": action.value})
    return state


def _update_validate_result(state: FieldsState, action: UpdateValidateResult) -> FieldsState:
    record = state.get(action.name)
    if record is None:
        return state
    state[action.name] = record.model_copy(
        update={"is_valid": action.is_valid, "errors": tuple(action.errors)}
    )
    return state


def _remove_field(state: FieldsState, action: RemoveField) -> FieldsState:
    state.pop(action.name, None)
    return state


_HANDLERS = {
    AddField: _add_field,
    UpdateValue: _update_value,
    UpdateValidateResult: _update_validate_result,
    RemoveField: _remove_field,
}
