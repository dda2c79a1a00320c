"""Field lists derived from declarative indexer definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clientschema.definition_loader import load_definition
from clientschema.exceptions import InvalidArgumentError
from clientschema.processing.normalization import default_settings
from clientschema.typing.enums import FieldType
from clientschema.typing.models import Field

if TYPE_CHECKING:
    from clientschema.providers.cardigann import CardigannSettings
    from clientschema.settings import Settings
    from clientschema.typing.models import IndexerDefinition

# Storage-level setting type that the UI renders as a textbox.
_STORAGE_TEXT_TYPE = "text"


def definition_to_schema(definition: IndexerDefinition) -> list[Field]:
    """Build the UI field list of a normalized definition.

    Fields follow the document order of `settings`. Their type is the
    definition's overall `type`, with `"text"` rendered as `"textbox"`.

    Args:
        definition (IndexerDefinition): Normalized definition.

    Raises:
        InvalidArgumentError: If `definition` is None.

    Returns:
        list[Field]: Fields numbered 0, 1, 2, ... in document order.
    """
    if definition is None:
        raise InvalidArgumentError(argument="definition")

    field_type = definition.type
    if field_type == _STORAGE_TEXT_TYPE:
        field_type = FieldType.TEXTBOX.value

    settings = definition.settings if definition.settings is not None else default_settings()
    return [
        Field(
            name=setting.name,
            label=setting.label or setting.name,
            help_text="",
            help_link="",
            order=order,
            advanced=False,
            type=field_type or FieldType.TEXTBOX.value,
        )
        for order, setting in enumerate(settings)
    ]


def schema_for_settings(settings: CardigannSettings, *, runtime: Settings | None = None) -> list[Field]:
    """Load the definition referenced by Cardigann settings and build its fields.

    Args:
        settings (CardigannSettings): Settings holding the definition location.
        runtime (Settings | None): Runtime settings forwarded to the loader.

    Raises:
        InvalidArgumentError: If `settings` is None or has no definition location.

    Returns:
        list[Field]: Fields of the referenced definition.
    """
    if settings is None:
        raise InvalidArgumentError(argument="settings")
    if not settings.definition_location:
        raise InvalidArgumentError(argument="settings", message="definition_location is empty")
    return definition_to_schema(load_definition(settings.definition_location, settings=runtime))
