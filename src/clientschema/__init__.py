"""clientschema package."""

from clientschema.binding import read_from_schema, read_from_schema_as
from clientschema.definition_loader import load_definition, parse_definition
from clientschema.definition_schema import definition_to_schema, schema_for_settings
from clientschema.exceptions import (
    DefinitionParseError,
    DependencyError,
    FieldFormatError,
    FieldTypeError,
    InvalidArgumentError,
    MissingFieldError,
    PackageError,
    SettingsError,
    UnknownProviderError,
    UnsupportedCatalogError,
)
from clientschema.extraction import to_schema
from clientschema.logging import configure_logging, get_logger
from clientschema.processing import normalize_definition
from clientschema.select_options import resolve_select_options
from clientschema.settings import Settings, get_settings
from clientschema.typing.models import Field, FieldDefinition, SelectOption

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("clientschema")

__all__ = [
    "DefinitionParseError",
    "DependencyError",
    "Field",
    "FieldDefinition",
    "FieldFormatError",
    "FieldTypeError",
    "InvalidArgumentError",
    "MissingFieldError",
    "PackageError",
    "SelectOption",
    "Settings",
    "SettingsError",
    "UnknownProviderError",
    "UnsupportedCatalogError",
    "__version__",
    "configure_logging",
    "definition_to_schema",
    "get_logger",
    "get_settings",
    "load_definition",
    "logger",
    "normalize_definition",
    "parse_definition",
    "read_from_schema",
    "read_from_schema_as",
    "resolve_select_options",
    "schema_for_settings",
    "to_schema",
]
