"""UI-facing field schema models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from clientschema.typing.enums import FieldType

FieldValue = str | bool | int | float | list[int | str]

_OPTIONAL_WIRE_KEYS = ("value", "select_options")


class SelectOption(BaseModel):
    """One choice in a select field."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    value: int


class Field(BaseModel):
    """Generic descriptor for one configurable setting."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str
    label: str
    help_text: str | None = None
    help_link: str | None = None
    order: int = 0
    advanced: bool = False
    type: str = FieldType.TEXTBOX.value
    value: FieldValue | None = None
    select_options: list[SelectOption] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the camelCase JSON payload handed to the UI.

        `value` and `selectOptions` are left out when absent.

        Returns:
            dict[str, Any]: JSON-compatible payload.
        """
        exclude = {key for key in _OPTIONAL_WIRE_KEYS if getattr(self, key) is None}
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)


@dataclass(frozen=True)
class FieldDefinition:
    """Field metadata attached to a settings attribute with `typing.Annotated`.

    Example:
        ``port: Annotated[int, FieldDefinition(order=1, label="Port", type=FieldType.NUMBER)] = 8080``
    """

    order: int
    label: str
    type: FieldType
    help_text: str | None = None
    help_link: str | None = None
    advanced: bool = False
    select_options: type | None = None

    def __post_init__(self) -> None:
        """Reject select fields declared without a catalog.

        Raises:
            ValueError: If `type` is select and `select_options` is missing.
        """
        if self.type == FieldType.SELECT and self.select_options is None:
            raise ValueError(f"Select field '{self.label}' requires a select_options catalog")
