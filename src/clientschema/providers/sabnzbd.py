"""SABnzbd download client settings."""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict

from clientschema.typing.enums import FieldType
from clientschema.typing.models import FieldDefinition


class SabnzbdPriority(IntEnum):
    """Queue priorities understood by SABnzbd."""

    DEFAULT = -100
    PAUSED = -2
    LOW = -1
    NORMAL = 0
    HIGH = 1
    FORCE = 2


class SabnzbdSettings(BaseModel):
    """Connection settings of a SABnzbd download client."""

    model_config = ConfigDict(extra="forbid")

    host: Annotated[str, FieldDefinition(order=0, label="Host", type=FieldType.TEXTBOX)] = "localhost"
    port: Annotated[int, FieldDefinition(order=1, label="Port", type=FieldType.NUMBER)] = 8080
    api_key: Annotated[str | None, FieldDefinition(order=2, label="API Key", type=FieldType.TEXTBOX)] = None
    username: Annotated[str | None, FieldDefinition(order=3, label="Username", type=FieldType.TEXTBOX)] = None
    password: Annotated[str | None, FieldDefinition(order=4, label="Password", type=FieldType.PASSWORD)] = None
    tv_category: Annotated[str, FieldDefinition(order=5, label="Category", type=FieldType.TEXTBOX)] = "tv"
    recent_tv_priority: Annotated[
        int,
        FieldDefinition(
            order=6,
            label="Recent Priority",
            type=FieldType.SELECT,
            select_options=SabnzbdPriority,
            help_text="Priority to use when grabbing episodes that aired within the last 14 days",
        ),
    ] = SabnzbdPriority.DEFAULT.value
    older_tv_priority: Annotated[
        int,
        FieldDefinition(
            order=7,
            label="Older Priority",
            type=FieldType.SELECT,
            select_options=SabnzbdPriority,
            help_text="Priority to use when grabbing episodes that aired over 14 days ago",
        ),
    ] = SabnzbdPriority.DEFAULT.value
    use_ssl: Annotated[bool, FieldDefinition(order=8, label="Use SSL", type=FieldType.CHECKBOX, advanced=True)] = False
