"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class DependencyError(PackageError):
    """Raised when optional runtime dependencies are missing."""

    missing_package: list[str]
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Missing runtime dependencies for '{self.message}': {', '.join(self.missing_package)}"


@dataclass(frozen=True)
class InvalidArgumentError(PackageError):
    """Raised when a schema operation receives an unusable argument."""

    argument: str
    message: str = "must not be None"

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Invalid argument '{self.argument}': {self.message}"


@dataclass(frozen=True)
class DefinitionParseError(PackageError):
    """Raised when a declarative indexer definition cannot be read or parsed."""

    location: str
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Cannot load definition '{self.location}': {self.message}"


@dataclass(frozen=True)
class MissingFieldError(PackageError):
    """Raised in strict binding mode when an annotated attribute has no submitted field."""

    field_name: str
    target_type: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"No field named '{self.field_name}' was submitted for {self.target_type}"


@dataclass(frozen=True)
class FieldFormatError(PackageError):
    """Raised when a sequence field holds a malformed or out-of-range element."""

    field_name: str
    token: object

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Field '{self.field_name}' contains a malformed sequence element: {self.token!r}"


@dataclass(frozen=True)
class FieldTypeError(PackageError):
    """Raised when a raw field value cannot be assigned to the attribute type."""

    field_name: str
    expected: str
    actual: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Field '{self.field_name}' expects {self.expected}, got {self.actual}"


@dataclass(frozen=True)
class UnsupportedCatalogError(PackageError):
    """Raised when select options are requested for an unknown catalog kind."""

    catalog: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Unsupported select option catalog: {self.catalog}"


@dataclass(frozen=True)
class UnknownProviderError(PackageError):
    """Raised when a provider key has no registered settings type."""

    provider: str
    supported: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Unknown provider '{self.provider}'. Expected one of: {', '.join(self.supported)}"
