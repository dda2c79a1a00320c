"""Structural interfaces."""

from __future__ import annotations

from typing import Protocol


class RankedEntry(Protocol):
    """Entry of a ranked domain catalog, such as one rung of the quality ladder."""

    @property
    def id(self) -> int:
        """Stable numeric rank used as the select option value."""

    @property
    def name(self) -> str:
        """Display name used as the select option label."""
