"""User-defined quality profiles."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from clientschema.catalogs.base import UserDataCatalog


class Profile(UserDataCatalog, BaseModel):
    """Saved quality profile; select options are filled from user records."""

    model_config = ConfigDict(extra="forbid")

    id: int
    name: str
    cutoff: int = 0
    allowed: list[int] = Field(default_factory=list)
