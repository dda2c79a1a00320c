"""Select option resolution for catalog-backed select fields."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING

from clientschema.catalogs.base import RankedCatalog, UserDataCatalog
from clientschema.exceptions import InvalidArgumentError, UnsupportedCatalogError
from clientschema.typing.models import SelectOption

if TYPE_CHECKING:
    from clientschema.typing.protocol import RankedEntry


def resolve_select_options(catalog: type) -> list[SelectOption]:
    """Return the ordered options of a select catalog.

    User-data catalogs resolve to an empty list and are populated by the caller
    from stored records. Ranked catalogs and integer enums are sorted ascending
    by value.

    Args:
        catalog (type): Catalog type referenced by the field metadata.

    Raises:
        InvalidArgumentError: If `catalog` is None.

    Returns:
        list[SelectOption]: Options sorted by value.
    """
    if catalog is None:
        raise InvalidArgumentError(argument="catalog")
    return list(_resolve_cached(catalog))


@lru_cache(maxsize=128)
def _resolve_cached(catalog: type) -> tuple[SelectOption, ...]:
    if not isinstance(catalog, type):
        raise UnsupportedCatalogError(catalog=repr(catalog))

    if issubclass(catalog, UserDataCatalog):
        return ()

    if issubclass(catalog, RankedCatalog):
        options = [_ranked_option(entry) for entry in catalog.entries()]
    elif issubclass(catalog, Enum):
        options = [_enum_option(catalog, member) for member in catalog]
    else:
        raise UnsupportedCatalogError(catalog=catalog.__name__)

    return tuple(sorted(options, key=lambda option: option.value))


def _ranked_option(entry: RankedEntry) -> SelectOption:
    return SelectOption(name=entry.name, value=entry.id)


def _enum_option(catalog: type[Enum], member: Enum) -> SelectOption:
    value = member.value
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnsupportedCatalogError(catalog=f"{catalog.__name__} (non-integer member {member.name})")
    return SelectOption(name=member.name, value=value)
