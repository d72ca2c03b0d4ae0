"""Engine exceptions."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from formstate.models.fields import FieldError


class FormEngineError(Exception):
    """Base class for all engine errors."""


class RuleDefinitionError(FormEngineError, ValueError):
    """A rule descriptor or rule generator is malformed."""


class ValidationFailed(FormEngineError):
    """Aggregate rejection raised by the validation engine.

    Attributes:
        errors: Flat, ordered list of every violated-rule error
        fields: Field name -> that field's own ordered errors (failing fields only)
    """

    def __init__(
        self,
        errors: list["FieldError"],
        fields: Optional[dict[str, list["FieldError"]]] = None,
    ):
        self.errors = list(errors)
        if fields is None:
            fields = {}
            for err in self.errors:
                fields.setdefault(err.field, []).append(err)
        self.fields = fields
        first = self.errors[0].message if self.errors else "validation failed"
        super().__init__(f"{len(self.errors)} validation error(s): {first}")
