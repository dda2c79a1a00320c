"""Torrent RSS feed indexer settings."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from clientschema.catalogs import Profile, Quality
from clientschema.typing.enums import FieldType
from clientschema.typing.models import FieldDefinition


class TorrentRssSettings(BaseModel):
    """Settings of a generic torrent RSS feed."""

    model_config = ConfigDict(extra="forbid")

    base_url: Annotated[str, FieldDefinition(order=0, label="Full RSS Feed URL", type=FieldType.URL)] = ""
    cookie: Annotated[
        str | None,
        FieldDefinition(
            order=1,
            label="Cookie",
            type=FieldType.TEXTBOX,
            help_text=(
                "If your site requires a login cookie to access the rss, "
                "you'll have to retrieve it via a browser."
            ),
            advanced=True,
        ),
    ] = None
    minimum_seeders: Annotated[
        int | None,
        FieldDefinition(order=2, label="Minimum Seeders", type=FieldType.NUMBER, advanced=True),
    ] = None
    minimum_quality: Annotated[
        int,
        FieldDefinition(order=3, label="Minimum Quality", type=FieldType.SELECT, select_options=Quality),
    ] = Quality.UNKNOWN.id
    profile_id: Annotated[
        int | None,
        FieldDefinition(order=4, label="Profile", type=FieldType.SELECT, select_options=Profile),
    ] = None
    tags: Annotated[
        list[str],
        FieldDefinition(order=5, label="Tags", type=FieldType.TAG, advanced=True),
    ] = Field(default_factory=list)
