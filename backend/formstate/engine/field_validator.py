"""Single-field validation: checks one field and stores the result.

Never raises to its caller: UI event handlers can await it without exception
handling. Every failure ends up as the field's stored errors.
"""

import time
from typing import Any, Callable, Optional

import structlog

from formstate.errors import ValidationFailed
from formstate.engine.resolver import resolve
from formstate.models.actions import UpdateValidateResult
from formstate.models.fields import FieldError
from formstate.store.field_store import FieldStore
from formstate.validators import Schema

logger = structlog.get_logger()

# Builds an engine from a descriptor; the engine exposes `async validate(values)`
EngineFactory = Callable[[dict[str, list]], Any]


async def validate_field(
    store: FieldStore,
    name: str,
    engine_factory: Optional[EngineFactory] = None,
) -> None:
    """Validate field `name` against its resolved rules and dispatch the result."""
    record = store.get_record(name)
    if record is None:
        logger.warning("validate_unknown_field", field=name)
        return

    engine_factory = engine_factory or Schema
    ticket = store.begin_validation(name)
    start_time = time.perf_counter()

    is_valid = True
    errors: tuple[FieldError, ...] = ()
    try:
        # Resolve against the live store so cross-field rules see current values
        rules = resolve(record.rules, store.accessor())
        engine = engine_factory({name: rules})
        await engine.validate({name: record.value})
    except ValidationFailed as e:
        is_valid = False
        errors = tuple(e.fields.get(name, e.errors))
    except Exception as e:
        logger.error("field_validation_crashed", field=name, error=str(e), error_type=type(e).__name__)
        is_valid = False
        errors = (FieldError(message=str(e), field=name),)

    if not store.is_current(ticket) and store.settings.DISCARD_STALE_RESULTS:
        logger.info("stale_validation_dropped", field=name, is_valid=is_valid)
        return

    store.dispatch(UpdateValidateResult(name=name, is_valid=is_valid, errors=errors))

    logger.debug(
        "field_validated",
        field=name,
        is_valid=is_valid,
        total_errors=len(errors),
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )
