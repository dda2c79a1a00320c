"""Typing-centric domain modules."""

from clientschema.typing.enums import FieldType
from clientschema.typing.models import (
    Field,
    FieldDefinition,
    FieldValue,
    IndexerDefinition,
    LoginBlock,
    SearchBlock,
    SearchPathBlock,
    SelectOption,
    SettingsField,
)
from clientschema.typing.protocol import RankedEntry

__all__ = [
    "Field",
    "FieldDefinition",
    "FieldType",
    "FieldValue",
    "IndexerDefinition",
    "LoginBlock",
    "RankedEntry",
    "SearchBlock",
    "SearchPathBlock",
    "SelectOption",
    "SettingsField",
]
