"""Descriptor validation engine: checks a value map against static rules.

Usage:
    from formstate.validators import Schema

    await Schema({"name": [{"required": True}]}).validate({"name": ""})
    # raises ValidationFailed with .errors and .fields
"""

from formstate.validators.schema import Descriptor, Schema
from formstate.validators.base import BaseCheck, is_empty_value
from formstate.validators.messages import DEFAULT_MESSAGES

__all__ = [
    "Descriptor",
    "Schema",
    "BaseCheck",
    "is_empty_value",
    "DEFAULT_MESSAGES",
]
