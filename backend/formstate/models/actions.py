"""Field store actions: the only legal mutations of the field store."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from formstate.models.fields import FieldError, FieldRecord


class BaseAction(BaseModel):
    """Base for all field store actions."""

    model_config = ConfigDict(frozen=True)

    type: str
    name: str


class AddField(BaseAction):
    """Register a field; overwrites an existing record with the same name."""

    type: Literal["addField"] = "addField"
    record: FieldRecord


class UpdateValue(BaseAction):
    """Replace a field's value."""

    type: Literal["updateValue"] = "updateValue"
    value: Any = None


class UpdateValidateResult(BaseAction):
    """Store the outcome of a validation for one field."""

    type: Literal["updateValidateResult"] = "updateValidateResult"
    is_valid: bool
    errors: tuple[FieldError, ...] = ()


class RemoveField(BaseAction):
    """Deregister a field (its owning element went away)."""

    type: Literal["removeField"] = "removeField"


FieldsAction = Annotated[
    Union[AddField, UpdateValue, UpdateValidateResult, RemoveField],
    Field(discriminator="type"),
]
