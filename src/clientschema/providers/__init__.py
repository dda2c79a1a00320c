"""Typed settings of the supported indexers and download clients."""

from __future__ import annotations

from pydantic import BaseModel

from clientschema.exceptions import UnknownProviderError
from clientschema.providers.cardigann import CardigannSettings
from clientschema.providers.newznab import NewznabSettings
from clientschema.providers.sabnzbd import SabnzbdPriority, SabnzbdSettings
from clientschema.providers.torrent_rss import TorrentRssSettings

PROVIDER_SETTINGS: dict[str, type[BaseModel]] = {
    "cardigann": CardigannSettings,
    "newznab": NewznabSettings,
    "sabnzbd": SabnzbdSettings,
    "torrentrss": TorrentRssSettings,
}


def get_provider_settings(provider: str) -> type[BaseModel]:
    """Return the settings type registered for a provider key.

    Args:
        provider (str): Provider key, case-insensitive.

    Raises:
        UnknownProviderError: If no settings type is registered.

    Returns:
        type[BaseModel]: Settings model class.
    """
    try:
        return PROVIDER_SETTINGS[provider.lower()]
    except KeyError as exc:
        raise UnknownProviderError(provider=provider, supported=tuple(sorted(PROVIDER_SETTINGS))) from exc


__all__ = [
    "PROVIDER_SETTINGS",
    "CardigannSettings",
    "NewznabSettings",
    "SabnzbdPriority",
    "SabnzbdSettings",
    "TorrentRssSettings",
    "get_provider_settings",
]
