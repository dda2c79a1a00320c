from __future__ import annotations

from typing import Annotated

import pytest
from pydantic import BaseModel
from pydantic import Field as ModelField

from clientschema.binding import read_from_schema
from clientschema.catalogs import Quality
from clientschema.extraction import to_schema
from clientschema.providers import (
    CardigannSettings,
    NewznabSettings,
    SabnzbdPriority,
    SabnzbdSettings,
    TorrentRssSettings,
)
from clientschema.typing.enums import FieldType
from clientschema.typing.models import Field, FieldDefinition


class _QueueSettings(BaseModel):
    priorities: Annotated[
        list[SabnzbdPriority],
        FieldDefinition(order=0, label="Priorities", type=FieldType.TAG),
    ] = ModelField(default_factory=list)
    fallback: Annotated[
        tuple[SabnzbdPriority, ...],
        FieldDefinition(order=1, label="Fallback", type=FieldType.TAG),
    ] = ()


_CONFIGURED_SETTINGS: list[BaseModel] = [
    NewznabSettings(
        base_url="https://indexer.example",
        api_key="abc123",
        categories=[5030, 5040, 5045],
        anime_categories=[5070],
        additional_parameters="&extended=1",
    ),
    SabnzbdSettings(
        host="nas.local",
        port=9090,
        api_key="key",
        username="user",
        password="pass",
        tv_category="series",
        recent_tv_priority=SabnzbdPriority.HIGH.value,
        older_tv_priority=SabnzbdPriority.LOW.value,
        use_ssl=True,
    ),
    TorrentRssSettings(
        base_url="https://feed.example/rss",
        cookie="uid=1",
        minimum_seeders=3,
        minimum_quality=Quality.HDTV_720P.id,
        profile_id=2,
        tags=["hd", "x264"],
    ),
    TorrentRssSettings(),
    CardigannSettings(definition_location="/srv/definitions/demo.yml"),
    _QueueSettings(
        priorities=[SabnzbdPriority.HIGH, SabnzbdPriority.PAUSED],
        fallback=(SabnzbdPriority.DEFAULT,),
    ),
]


@pytest.mark.parametrize("settings", _CONFIGURED_SETTINGS, ids=lambda model: type(model).__name__)
def test_bind_after_extract_restores_settings(settings: BaseModel) -> None:
    restored = read_from_schema(to_schema(settings), type(settings), strict=True)

    assert restored.model_dump() == settings.model_dump()


@pytest.mark.parametrize("settings", _CONFIGURED_SETTINGS, ids=lambda model: type(model).__name__)
def test_round_trip_through_json_payload(settings: BaseModel) -> None:
    posted = [Field.model_validate(field.to_payload()) for field in to_schema(settings)]

    restored = read_from_schema(posted, type(settings), strict=True)

    assert restored.model_dump() == settings.model_dump()


def test_form_submission_with_flat_text_values() -> None:
    posted = [
        Field(name="base_url", label="URL", value="https://indexer.example"),
        Field(name="api_path", label="API Path", value="/api"),
        Field(name="api_key", label="API Key", value="k"),
        Field(name="categories", label="Categories", value="5030,,5040"),
        Field(name="anime_categories", label="Anime Categories", value=""),
        Field(name="additional_parameters", label="Additional Parameters"),
    ]

    restored = read_from_schema(posted, NewznabSettings, strict=True)

    assert isinstance(restored, NewznabSettings)
    assert restored.categories == [5030, 5040]
    assert restored.anime_categories == []
    assert restored.additional_parameters is None
