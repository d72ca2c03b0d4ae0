"""Form store: field store plus form-level state and the operations a form exposes."""

from typing import Any, Iterable, Optional

import structlog

from formstate.config import Settings
from formstate.engine.field_validator import EngineFactory, validate_field
from formstate.engine.form_validator import validate_all_fields
from formstate.models.actions import AddField, RemoveField, UpdateValue
from formstate.models.fields import FieldError, FieldRecord, FormState, ValidationOutcome
from formstate.models.rules import as_custom_rule
from formstate.store.field_store import FieldStore

logger = structlog.get_logger()

_UNSET = object()


class FormStore(FieldStore):
    """State and validation entry points for one form instance."""

    def __init__(
        self,
        initial_values: Optional[dict[str, Any]] = None,
        engine_factory: Optional[EngineFactory] = None,
        settings: Optional[Settings] = None,
    ):
        super().__init__(settings)
        self.initial_values = dict(initial_values or {})
        self.engine_factory = engine_factory
        self.form = FormState()

    # ── Form state ──

    def set_submitting(self, flag: bool) -> None:
        self.form = self.form.model_copy(update={"is_submitting": flag})

    def record_outcome(self, is_valid: bool, errors: dict[str, list[FieldError]]) -> None:
        """Store the aggregate result of the latest full validation."""
        self.form = self.form.model_copy(update={"is_valid": is_valid, "errors": dict(errors)})

    # ── Field lifecycle ──

    def add_field(
        self,
        name: str,
        label: Optional[str] = None,
        rules: Optional[Iterable[Any]] = None,
        value: Any = _UNSET,
    ) -> FieldRecord:
        """Register a field, taking its value from initial_values unless given."""
        if value is _UNSET:
            value = self.initial_values.get(name, self.settings.DEFAULT_FIELD_VALUE)
        tagged = tuple(as_custom_rule(rule) for rule in rules or ())
        record = FieldRecord(name=name, label=label, value=value, rules=tagged)
        self.dispatch(AddField(name=name, record=record))
        return self.fields[name]

    def remove_field(self, name: str) -> None:
        self.dispatch(RemoveField(name=name))

    # ── Values ──

    def set_field_value(self, name: str, value: Any) -> None:
        """Set a registered field's value; unknown names are ignored."""
        if name in self.fields:
            self.dispatch(UpdateValue(name=name, value=value))

    def reset_fields(self) -> None:
        """Restore initial values on every registered field that has one."""
        for name, value in self.initial_values.items():
            if name in self.fields:
                self.dispatch(UpdateValue(name=name, value=value))
        logger.debug("fields_reset", fields=sorted(n for n in self.initial_values if n in self.fields))

    # ── Validation ──

    async def validate_field(self, name: str) -> None:
        await validate_field(self, name, self.engine_factory)

    async def validate_all_fields(self) -> ValidationOutcome:
        return await validate_all_fields(self, self.engine_factory)
