"""Field state: pure transitions, the store handle, and the form store."""

from formstate.store.reducer import apply, empty_state, read, read_all, replay
from formstate.store.field_store import FieldStore, StoreAccessor, ValidationTicket

__all__ = [
    "apply",
    "empty_state",
    "read",
    "read_all",
    "replay",
    "FieldStore",
    "StoreAccessor",
    "ValidationTicket",
]
