"""Settings of indexers described by a declarative definition."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict

from clientschema.typing.enums import FieldType
from clientschema.typing.models import FieldDefinition


class CardigannSettings(BaseModel):
    """Points at the YAML definition describing the indexer."""

    model_config = ConfigDict(extra="forbid")

    definition_location: Annotated[
        str,
        FieldDefinition(
            order=0,
            label="Definition",
            type=FieldType.PATH,
            help_text="Path or URL of the indexer definition file",
        ),
    ] = ""
