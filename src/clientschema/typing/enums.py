"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string, ignoring case.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value.lower())
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class FieldType(_EnumMixin):
    """UI rendering hint attached to a field."""

    TEXTBOX = "textbox"
    PASSWORD = "password"  # noqa: S105
    CHECKBOX = "checkbox"
    SELECT = "select"
    NUMBER = "number"
    PATH = "path"
    HIDDEN = "hidden"
    TAG = "tag"
    ACTION = "action"
    URL = "url"
