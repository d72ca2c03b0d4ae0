"""Default error message templates for the built-in checks."""

import copy
from typing import Any, Optional

DEFAULT_MESSAGES: dict[str, Any] = {
    "default": "Validation error on field {field}",
    "required": "{field} is required",
    "enum": "{field} must be one of {enum}",
    "whitespace": "{field} cannot be empty",
    "fails": "{field} fails",
    "types": {
        "string": "{field} is not a {type}",
        "method": "{field} is not a {type} (function)",
        "array": "{field} is not an {type}",
        "object": "{field} is not an {type}",
        "number": "{field} is not a {type}",
        "date": "{field} is not a {type}",
        "boolean": "{field} is not a {type}",
        "integer": "{field} is not an {type}",
        "float": "{field} is not a {type}",
        "regexp": "{field} is not a valid {type}",
        "email": "{field} is not a valid {type}",
        "url": "{field} is not a valid {type}",
        "hex": "{field} is not a valid {type}",
    },
    "string": {
        "len": "{field} must be exactly {len} characters",
        "min": "{field} must be at least {min} characters",
        "max": "{field} cannot be longer than {max} characters",
        "range": "{field} must be between {min} and {max} characters",
    },
    "number": {
        "len": "{field} must equal {len}",
        "min": "{field} cannot be less than {min}",
        "max": "{field} cannot be greater than {max}",
        "range": "{field} must be between {min} and {max}",
    },
    "array": {
        "len": "{field} must be exactly {len} in length",
        "min": "{field} cannot be less than {min} in length",
        "max": "{field} cannot be greater than {max} in length",
        "range": "{field} must be between {min} and {max} in length",
    },
    "pattern": {
        "mismatch": "{field} value {value} does not match pattern {pattern}",
    },
}


def merge_messages(overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Defaults with `overrides` merged in, one level of nesting deep."""
    merged = copy.deepcopy(DEFAULT_MESSAGES)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def format_message(messages: dict[str, Any], path: str, **params: Any) -> str:
    """Look up a dotted template path (e.g. 'string.min') and fill it in."""
    template: Any = messages
    for part in path.split("."):
        template = template.get(part) if isinstance(template, dict) else None
    if not isinstance(template, str):
        template = messages.get("default", "Validation error on field {field}")
    try:
        return template.format(**params)
    except (KeyError, IndexError):
        return template
