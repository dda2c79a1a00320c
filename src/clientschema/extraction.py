"""Typed settings model to field list extraction."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from clientschema.descriptors import field_descriptors
from clientschema.exceptions import InvalidArgumentError
from clientschema.select_options import resolve_select_options
from clientschema.typing.enums import FieldType
from clientschema.typing.models import Field

if TYPE_CHECKING:
    from clientschema.descriptors import FieldDescriptor


def to_schema(model: BaseModel) -> list[Field]:
    """Build the UI field list of a settings model.

    Only attributes carrying a `FieldDefinition` are exposed. The result is
    sorted by `order`; fields sharing an order keep their declaration order.

    Args:
        model (BaseModel): Settings instance to describe.

    Raises:
        InvalidArgumentError: If `model` is None or not a pydantic model.

    Returns:
        list[Field]: Ordered fields carrying the model's current values.
    """
    if model is None:
        raise InvalidArgumentError(argument="model")
    if not isinstance(model, BaseModel):
        raise InvalidArgumentError(
            argument="model",
            message=f"expected a settings model, got {type(model).__name__}",
        )

    fields = [_build_field(model, descriptor) for descriptor in field_descriptors(type(model))]
    return sorted(fields, key=lambda field: field.order)


def _build_field(model: BaseModel, descriptor: FieldDescriptor) -> Field:
    definition = descriptor.definition
    payload: dict[str, Any] = {
        "name": descriptor.name,
        "label": definition.label,
        "help_text": definition.help_text,
        "help_link": definition.help_link,
        "order": definition.order,
        "advanced": definition.advanced,
        "type": definition.type.value,
    }

    value = getattr(model, descriptor.name)
    if value is not None:
        payload["value"] = _wire_value(value)

    if definition.type == FieldType.SELECT and definition.select_options is not None:
        payload["select_options"] = resolve_select_options(definition.select_options)

    return Field(**payload)


def _wire_value(value: object) -> object:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_wire_value(item) for item in value]
    return value
