"""Field store handle: owns the current snapshot and serializes every mutation."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

import structlog

from formstate.config import Settings, get_settings
from formstate.models.actions import AddField, BaseAction, RemoveField, UpdateValue
from formstate.models.fields import FieldRecord
from formstate.store import reducer

logger = structlog.get_logger()

# Called after every dispatch with the applied action and the new snapshot
StoreListener = Callable[[BaseAction, dict[str, FieldRecord]], None]

# Actions that make an in-flight validation of the same field stale
_VALUE_CHANGING = (AddField, UpdateValue, RemoveField)


@dataclass(frozen=True)
class ValidationTicket:
    """What a validation saw of its field when it started."""

    name: str
    value_generation: int
    sequence: int


class StoreAccessor:
    """Live accessor over a store: always reads the snapshot current at call time."""

    def __init__(self, store: "FieldStore"):
        self._store = store

    def get_field_value(self, name: str) -> Any:
        return self._store.get_field_value(name)


class FieldStore:
    """Explicit handle to a form's field state.

    The snapshot in `fields` is replaced, never mutated, so readers may hold on
    to it freely. `dispatch` is the single place state changes.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.fields: dict[str, FieldRecord] = reducer.empty_state()
        self._listeners: list[StoreListener] = []
        self._value_generations: dict[str, int] = {}
        self._validation_sequences: dict[str, int] = {}

    # ── Dispatch ──

    def dispatch(self, action: BaseAction) -> None:
        """Apply an action, then notify listeners."""
        self.fields = reducer.apply(self.fields, action)
        if isinstance(action, _VALUE_CHANGING):
            self._value_generations[action.name] = self._value_generations.get(action.name, 0) + 1

        dead_listeners = []
        for listener in list(self._listeners):
            try:
                listener(action, self.fields)
            except Exception as e:
                logger.warning("store_listener_failed", action=action.type, error=str(e))
                dead_listeners.append(listener)

        for dead in dead_listeners:
            self.unsubscribe(dead)

    def subscribe(self, listener: StoreListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: StoreListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ── Reads ──

    def get_record(self, name: str) -> Optional[FieldRecord]:
        return self.fields.get(name)

    def get_field_value(self, name: str) -> Any:
        return reducer.read(self.fields, name)

    def get_fields_value(self) -> dict[str, Any]:
        return reducer.read_all(self.fields)

    def accessor(self) -> StoreAccessor:
        return StoreAccessor(self)

    # ── Stale-result tracking ──

    def begin_validation(self, name: str) -> ValidationTicket:
        """Record that a validation of `name` is starting and return its ticket."""
        sequence = self._validation_sequences.get(name, 0) + 1
        self._validation_sequences[name] = sequence
        return ValidationTicket(
            name=name,
            value_generation=self._value_generations.get(name, 0),
            sequence=sequence,
        )

    def is_current(self, ticket: ValidationTicket) -> bool:
        """False once the field's value changed or a newer validation began."""
        return (
            self._value_generations.get(ticket.name, 0) == ticket.value_generation
            and self._validation_sequences.get(ticket.name, 0) == ticket.sequence
        )
