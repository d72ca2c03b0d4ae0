"""formstate: form field-state and validation orchestration engine.

Usage:
    from formstate import Form

    form = Form(on_finish=handle_values, on_finish_failed=handle_errors)
    password = form.item("password", rules=[{"required": True}])
    confirm = form.item("confirm", rules=[
        lambda fields: {"validator": lambda v: v == fields.get_field_value("password")},
    ])
    password.mount()
    confirm.mount()
    await form.submit()
"""

from formstate.errors import FormEngineError, RuleDefinitionError, ValidationFailed
from formstate.form import Form
from formstate.form_item import FormItem
from formstate.models import (
    FieldError,
    FieldRecord,
    FormState,
    RuleGenerator,
    RuleItem,
    StaticRule,
    ValidationOutcome,
    generator,
    static,
)
from formstate.store.form_store import FormStore
from formstate.validators import Schema

__all__ = [
    "FormEngineError",
    "RuleDefinitionError",
    "ValidationFailed",
    "Form",
    "FormItem",
    "FieldError",
    "FieldRecord",
    "FormState",
    "RuleGenerator",
    "RuleItem",
    "StaticRule",
    "ValidationOutcome",
    "generator",
    "static",
    "FormStore",
    "Schema",
]
