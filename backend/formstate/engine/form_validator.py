"""Aggregate validation: validates every field in one engine call.

Used for submission. The engine's per-field error mapping is fanned back out
onto the fields so the store always agrees with the returned outcome.
"""

import time
from typing import TYPE_CHECKING, Optional

import structlog

from formstate.errors import ValidationFailed
from formstate.engine.field_validator import EngineFactory
from formstate.engine.resolver import resolve
from formstate.models.actions import UpdateValidateResult
from formstate.models.fields import FieldError, FieldRecord, ValidationOutcome
from formstate.store import reducer
from formstate.validators import Schema

if TYPE_CHECKING:
    from formstate.store.form_store import FormStore

logger = structlog.get_logger()


async def validate_all_fields(
    store: "FormStore",
    engine_factory: Optional[EngineFactory] = None,
) -> ValidationOutcome:
    """Validate all registered fields and redistribute the results.

    Returns:
        ValidationOutcome with is_valid, per-field errors (failing fields only)
        and the values that were validated

    Raises:
        Whatever unexpected fault the engine raises; is_submitting is cleared first
    """
    engine_factory = engine_factory or Schema
    start_time = time.perf_counter()

    fields = store.fields
    values = reducer.read_all(fields)
    accessor = store.accessor()
    descriptor = {name: resolve(record.rules, accessor) for name, record in fields.items()}

    # Results of single-field validations still in flight are now outdated
    for name in fields:
        store.begin_validation(name)

    is_valid = True
    errors: dict[str, list[FieldError]] = {}

    store.set_submitting(True)
    try:
        await engine_factory(descriptor).validate(values)
    except ValidationFailed as e:
        is_valid = False
        errors = {name: list(field_errors) for name, field_errors in e.fields.items()}
    finally:
        store.set_submitting(False)

    _redistribute(store, fields, errors)
    store.record_outcome(is_valid, errors)

    logger.info(
        "form_validated",
        is_valid=is_valid,
        total_fields=len(fields),
        failed_fields=sorted(errors),
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )

    return ValidationOutcome(is_valid=is_valid, errors=errors, values=values)


def _redistribute(
    store: "FormStore",
    fields: dict[str, FieldRecord],
    errors: dict[str, list[FieldError]],
) -> None:
    """Write each field's share of the aggregate result into the store.

    Fields with an error entry fail; fields with rules but no entry pass;
    fields without rules are left alone.
    """
    for name, record in fields.items():
        if name in errors:
            store.dispatch(UpdateValidateResult(name=name, is_valid=False, errors=tuple(errors[name])))
        elif record.has_rules:
            store.dispatch(UpdateValidateResult(name=name, is_valid=True, errors=()))
