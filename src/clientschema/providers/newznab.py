"""Newznab indexer settings."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from clientschema.typing.enums import FieldType
from clientschema.typing.models import FieldDefinition


class NewznabSettings(BaseModel):
    """Connection settings of a Newznab-compatible usenet indexer."""

    model_config = ConfigDict(extra="forbid")

    base_url: Annotated[str | None, FieldDefinition(order=0, label="URL", type=FieldType.URL)] = None
    api_path: Annotated[
        str,
        FieldDefinition(
            order=1,
            label="API Path",
            type=FieldType.TEXTBOX,
            help_text="Path to the api, usually /api",
            advanced=True,
        ),
    ] = "/api"
    api_key: Annotated[str | None, FieldDefinition(order=2, label="API Key", type=FieldType.TEXTBOX)] = None
    categories: Annotated[
        list[int],
        FieldDefinition(
            order=3,
            label="Categories",
            type=FieldType.TEXTBOX,
            help_text="Comma Separated list, leave blank to disable standard/daily shows",
            advanced=True,
        ),
    ] = Field(default_factory=lambda: [5030, 5040])
    anime_categories: Annotated[
        list[int],
        FieldDefinition(
            order=4,
            label="Anime Categories",
            type=FieldType.TEXTBOX,
            help_text="Comma Separated list, leave blank to disable anime",
            advanced=True,
        ),
    ] = Field(default_factory=list)
    additional_parameters: Annotated[
        str | None,
        FieldDefinition(
            order=5,
            label="Additional Parameters",
            type=FieldType.TEXTBOX,
            help_text="Additional Newznab parameters",
            advanced=True,
        ),
    ] = None
