"""Core domain model exports."""

from clientschema.typing.models.definition import (
    IndexerDefinition,
    LoginBlock,
    SearchBlock,
    SearchPathBlock,
    SettingsField,
)
from clientschema.typing.models.schema import Field, FieldDefinition, FieldValue, SelectOption

__all__ = [
    "Field",
    "FieldDefinition",
    "FieldValue",
    "IndexerDefinition",
    "LoginBlock",
    "SearchBlock",
    "SearchPathBlock",
    "SelectOption",
    "SettingsField",
]
