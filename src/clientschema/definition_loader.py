"""Declarative indexer definition loading."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from clientschema.dependencies import ensure_remote_dependencies
from clientschema.exceptions import DefinitionParseError
from clientschema.logging import get_logger
from clientschema.processing.normalization import normalize_definition
from clientschema.settings import build_httpx_client_kwargs, get_settings, is_remote_location
from clientschema.typing.models import IndexerDefinition

if TYPE_CHECKING:
    from clientschema.settings import Settings

logger = get_logger(__name__)


def load_definition(location: str | Path, *, settings: Settings | None = None) -> IndexerDefinition:
    """Read, parse and normalize one definition document.

    Relative paths are resolved against `DEFINITIONS_DIR` when it is set;
    http(s) locations are fetched with httpx. Nothing is cached.

    Args:
        location (str | Path): File path or URL of the YAML document.
        settings (Settings | None): Runtime settings, defaults to `get_settings()`.

    Returns:
        IndexerDefinition: Normalized definition.
    """
    config = settings or get_settings()
    resolved = config.resolve_definition_location(location)
    text = _read_text(resolved, config)
    definition = normalize_definition(parse_definition(text, location=resolved))
    logger.debug(
        "Definition loaded",
        extra={"location": resolved, "definition_id": definition.id, "settings_count": len(definition.settings or [])},
    )
    return definition


def parse_definition(text: str, *, location: str = "<string>") -> IndexerDefinition:
    """Parse YAML text into a definition without normalizing it.

    Args:
        text (str): YAML document.
        location (str): Location used in error messages.

    Raises:
        DefinitionParseError: If the text is not a valid definition mapping.

    Returns:
        IndexerDefinition: Parsed definition.
    """
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DefinitionParseError(location=location, message=f"invalid YAML: {exc}") from exc

    if not isinstance(payload, dict):
        raise DefinitionParseError(location=location, message="document root must be a mapping")

    try:
        return IndexerDefinition.model_validate(payload)
    except ValidationError as exc:
        raise DefinitionParseError(location=location, message=f"invalid definition: {exc}") from exc


def _read_text(location: str, settings: Settings) -> str:
    if is_remote_location(location):
        return _fetch_text(location, settings)
    try:
        return Path(location).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DefinitionParseError(location=location, message=str(exc)) from exc


def _fetch_text(url: str, settings: Settings) -> str:
    ensure_remote_dependencies()
    import httpx  # noqa: PLC0415

    try:
        with httpx.Client(**build_httpx_client_kwargs(settings, target_url=url)) as client:
            response = client.get(url)
            response.raise_for_status()
    except httpx.HTTPError as exc:
        raise DefinitionParseError(location=url, message=str(exc)) from exc
    return response.text
