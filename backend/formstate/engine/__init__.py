"""Validation orchestration: rule resolution, single-field and aggregate validators."""

from formstate.engine.resolver import resolve
from formstate.engine.field_validator import EngineFactory, validate_field
from formstate.engine.form_validator import validate_all_fields

__all__ = ["resolve", "EngineFactory", "validate_field", "validate_all_fields"]
