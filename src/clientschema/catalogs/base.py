"""Catalog kinds understood by the select option resolver."""

from __future__ import annotations

from typing import Self


class UserDataCatalog:
    """Catalog whose entries are user records resolved outside the schema layer."""


class RankedCatalog:
    """Catalog made of static, ranked entries declared as class attributes."""

    @classmethod
    def entries(cls) -> list[Self]:
        """Return every entry declared on the catalog class, in declaration order.

        Returns:
            list[Self]: Catalog entries.
        """
        return [value for value in vars(cls).values() if isinstance(value, cls)]
