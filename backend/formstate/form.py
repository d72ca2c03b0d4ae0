"""Form: binds a submission to aggregate validation and the outcome callbacks.

Usage:
    form = Form(initial_values={"email": ""}, on_finish=save, on_finish_failed=report)
    email = form.item("email", label="Email", rules=[{"required": True}, {"type": "email"}])
    email.mount()
    ...
    await form.submit(event)
"""

import inspect
from typing import Any, Awaitable, Callable, Iterable, Optional, Union

import structlog

from formstate.config import Settings, get_settings
from formstate.engine.field_validator import EngineFactory
from formstate.form_item import FormItem
from formstate.models.fields import FieldError, FormState, ValidationOutcome
from formstate.store.form_store import FormStore

logger = structlog.get_logger()

FinishCallback = Callable[[dict[str, Any]], Union[None, Awaitable[None]]]
FinishFailedCallback = Callable[
    [dict[str, Any], dict[str, list[FieldError]]], Union[None, Awaitable[None]]
]


class Form:
    """One form instance: owns its store and dispatches submission outcomes."""

    def __init__(
        self,
        name: Optional[str] = None,
        initial_values: Optional[dict[str, Any]] = None,
        on_finish: Optional[FinishCallback] = None,
        on_finish_failed: Optional[FinishFailedCallback] = None,
        store: Optional[FormStore] = None,
        engine_factory: Optional[EngineFactory] = None,
        settings: Optional[Settings] = None,
    ):
        """Create a form.

        Args:
            store: An existing store to share. It already carries its own
                initial values and engine, so passing either alongside it is an error.

        Raises:
            ValueError: `store` given together with `initial_values` or `engine_factory`
        """
        if store is not None and (initial_values is not None or engine_factory is not None):
            raise ValueError("Pass initial_values and engine_factory to the FormStore, not alongside it")

        self.settings = settings or get_settings()
        self.name = name or self.settings.DEFAULT_FORM_NAME
        self.store = store or FormStore(
            initial_values=initial_values,
            engine_factory=engine_factory,
            settings=self.settings,
        )
        self.on_finish = on_finish
        self.on_finish_failed = on_finish_failed

    @property
    def state(self) -> FormState:
        return self.store.form

    def item(
        self,
        name: str,
        label: Optional[str] = None,
        rules: Optional[Iterable[Any]] = None,
        get_value_from_event: Optional[Callable[[Any], Any]] = None,
    ) -> FormItem:
        """Create the binding for one field of this form."""
        return FormItem(self.store, name, label=label, rules=rules, get_value_from_event=get_value_from_event)

    async def submit(self, event: Any = None) -> Optional[ValidationOutcome]:
        """Handle a submission: validate everything, then call one of the callbacks.

        Args:
            event: Optional submit event; its default action and propagation
                are suppressed when it supports that

        Returns:
            The validation outcome, or None if the submission was ignored
        """
        if event is not None:
            for method in ("prevent_default", "stop_propagation"):
                handler = getattr(event, method, None)
                if callable(handler):
                    handler()

        if self.settings.GUARD_CONCURRENT_SUBMIT and self.store.form.is_submitting:
            logger.warning("submit_ignored_in_flight", form=self.name)
            return None

        outcome = await self.store.validate_all_fields()

        if outcome.is_valid:
            if self.on_finish:
                await _maybe_await(self.on_finish(outcome.values))
        elif self.on_finish_failed:
            await _maybe_await(self.on_finish_failed(outcome.values, outcome.errors))

        logger.info("form_submitted", form=self.name, is_valid=outcome.is_valid)
        return outcome

    # ── Store operations exposed to form owners ──

    def get_field_value(self, name: str) -> Any:
        return self.store.get_field_value(name)

    def get_fields_value(self) -> dict[str, Any]:
        return self.store.get_fields_value()

    def set_field_value(self, name: str, value: Any) -> None:
        self.store.set_field_value(name, value)

    def reset_fields(self) -> None:
        self.store.reset_fields()

    async def validate_field(self, name: str) -> None:
        await self.store.validate_field(name)

    async def validate_all_fields(self) -> ValidationOutcome:
        return await self.store.validate_all_fields()


async def _maybe_await(result: Any) -> None:
    if inspect.isawaitable(result):
        await result
