"""Definition processing helpers."""

from clientschema.processing.normalization import default_settings, normalize_definition

__all__ = [
    "default_settings",
    "normalize_definition",
]
