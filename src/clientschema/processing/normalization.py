"""Defaulting and backward-compatibility rules for declarative definitions."""

from __future__ import annotations

from clientschema.typing.models import IndexerDefinition, SearchBlock, SearchPathBlock, SettingsField

DEFAULT_ENCODING = "UTF-8"
DEFAULT_LOGIN_METHOD = "form"


def default_settings() -> list[SettingsField]:
    """Return the settings used by definitions that declare none.

    Returns:
        list[SettingsField]: Username and password settings.
    """
    return [
        SettingsField(name="username", label="Username", type="text"),
        SettingsField(name="password", label="Password", type="password"),
    ]


def normalize_definition(definition: IndexerDefinition) -> IndexerDefinition:
    """Apply defaults to a parsed definition in place.

    Rules, in order: synthesize username/password settings, default the
    encoding, default the login method, ensure a search path list, and append
    the legacy single `search.path` as a path block inheriting the parent
    inputs. The legacy `search.path` is kept. Every rule is idempotent.

    Args:
        definition (IndexerDefinition): Parsed definition.

    Returns:
        IndexerDefinition: The same definition, normalized.
    """
    if definition.settings is None:
        definition.settings = default_settings()

    if definition.encoding is None:
        definition.encoding = DEFAULT_ENCODING

    if definition.login is not None and definition.login.method is None:
        definition.login.method = DEFAULT_LOGIN_METHOD

    if definition.search is None:
        definition.search = SearchBlock()
    if definition.search.paths is None:
        definition.search.paths = []

    legacy_path = definition.search.path
    if legacy_path is not None and not _has_legacy_block(definition.search.paths, legacy_path):
        definition.search.paths.append(SearchPathBlock(path=legacy_path, inherit_inputs=True))

    return definition


def _has_legacy_block(paths: list[SearchPathBlock], legacy_path: str) -> bool:
    return any(block.path == legacy_path and block.inherit_inputs for block in paths)
