"""Declarative indexer definition models.

Definitions are YAML documents contributed by third parties. Keys are camelCase
and unknown keys are ignored so newer documents still load. Cardigann-style
documents also spell some compound keys in lowercase (`inheritinputs`,
`submitpath`, `legacylinks`), which are accepted as aliases.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _DefinitionModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SettingsField(_DefinitionModel):
    """One user-configurable setting declared by a definition."""

    name: str
    label: str | None = None
    type: str | None = None


class LoginBlock(_DefinitionModel):
    """How the execution engine authenticates against the indexer."""

    path: str | None = None
    submit_path: str | None = Field(default=None, validation_alias=AliasChoices("submitpath", "submitPath"))
    method: str | None = None
    cookies: list[str] | None = None
    form: str | None = None
    inputs: dict[str, Any] | None = None
    error: list[dict[str, Any]] | None = None
    test: dict[str, Any] | None = None


class SearchPathBlock(_DefinitionModel):
    """One search request rule."""

    path: str
    method: str | None = None
    inputs: dict[str, Any] | None = None
    categories: list[Any] | None = None
    inherit_inputs: bool = Field(
        default=False,
        validation_alias=AliasChoices("inheritinputs", "inheritInputs"),
    )


class SearchBlock(_DefinitionModel):
    """Search section; `path` is the legacy single-path form of `paths`."""

    path: str | None = None
    paths: list[SearchPathBlock] | None = None
    inputs: dict[str, Any] | None = None
    rows: dict[str, Any] | None = None
    fields: dict[str, Any] | None = None


class IndexerDefinition(_DefinitionModel):
    """In-memory tree of one declarative indexer definition."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    language: str | None = None
    type: str | None = None
    encoding: str | None = None
    links: list[str] | None = None
    legacy_links: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("legacylinks", "legacyLinks"),
    )
    settings: list[SettingsField] | None = None
    caps: dict[str, Any] | None = None
    login: LoginBlock | None = None
    search: SearchBlock | None = None
    download: dict[str, Any] | None = None
