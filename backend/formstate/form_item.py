"""Form item: the binding a rendering layer uses for one field.

The rendering layer creates one item per field element: it mounts/unmounts the
item with the element, forwards input and the validation trigger, and reads
value/errors back to render them.
"""

from typing import Any, Callable, Iterable, Optional

from formstate.models.fields import FieldError, FieldRecord
from formstate.store.form_store import FormStore


def value_from_event(event: Any) -> Any:
    """Default extraction: `event.target.value`, or the event itself when it has none."""
    target = getattr(event, "target", None)
    if target is not None and hasattr(target, "value"):
        return target.value
    return event


class FormItem:
    """Binding between one field element and the form store."""

    def __init__(
        self,
        store: FormStore,
        name: str,
        label: Optional[str] = None,
        rules: Optional[Iterable[Any]] = None,
        get_value_from_event: Optional[Callable[[Any], Any]] = None,
    ):
        self.store = store
        self.name = name
        self.label = label
        self.rules = list(rules) if rules is not None else None
        self.get_value_from_event = get_value_from_event or value_from_event

    # ── Lifecycle ──

    def mount(self) -> None:
        """Register the field with its initial value."""
        self.store.add_field(self.name, label=self.label, rules=self.rules or ())

    def unmount(self) -> None:
        self.store.remove_field(self.name)

    # ── Event bindings ──

    def on_value_update(self, value: Any) -> None:
        self.store.set_field_value(self.name, value)

    def on_change(self, event: Any) -> None:
        """Turn a raw input event into the field value and store it."""
        self.on_value_update(self.get_value_from_event(event))

    async def on_validate_trigger(self) -> None:
        """Validate this field; only wired up when the item declares rules."""
        if self.rules is None:
            return
        await self.store.validate_field(self.name)

    # ── Read access ──

    @property
    def record(self) -> Optional[FieldRecord]:
        return self.store.get_record(self.name)

    @property
    def value(self) -> Any:
        record = self.record
        return record.value if record else None

    @property
    def errors(self) -> tuple[FieldError, ...]:
        record = self.record
        return record.errors if record else ()

    @property
    def is_valid(self) -> bool:
        record = self.record
        return record.is_valid if record else True

    @property
    def is_required(self) -> bool:
        record = self.record
        return record.is_required if record else False

    @property
    def has_error(self) -> bool:
        return len(self.errors) > 0

    @property
    def error_message(self) -> Optional[str]:
        """The message shown under the field: the first error, if any."""
        errors = self.errors
        return errors[0].message if errors else None
