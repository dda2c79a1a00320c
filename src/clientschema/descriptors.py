"""Field descriptor tables declared on settings models."""

from __future__ import annotations

import types
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel

from clientschema.typing.models import FieldDefinition

_SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool)
_SEQUENCE_ORIGINS: tuple[Any, ...] = (list, tuple, Sequence, Iterable, Collection)


@dataclass(frozen=True)
class FieldDescriptor:
    """One annotated attribute of a settings model."""

    name: str
    annotation: Any
    definition: FieldDefinition


def field_descriptors(model_type: type[BaseModel]) -> tuple[FieldDescriptor, ...]:
    """Return the annotated simple attributes of a settings model.

    Attributes are returned in declaration order. Attributes without a
    `FieldDefinition`, or whose type is not simple, are skipped.

    Args:
        model_type (type[BaseModel]): Settings model class.

    Returns:
        tuple[FieldDescriptor, ...]: Descriptor table.
    """
    return _field_descriptors(model_type)


@lru_cache(maxsize=256)
def _field_descriptors(model_type: type[BaseModel]) -> tuple[FieldDescriptor, ...]:
    descriptors: list[FieldDescriptor] = []
    for name, info in model_type.model_fields.items():
        definition = next((item for item in info.metadata if isinstance(item, FieldDefinition)), None)
        if definition is None or not is_simple_annotation(info.annotation):
            continue
        descriptors.append(FieldDescriptor(name=name, annotation=info.annotation, definition=definition))
    return tuple(descriptors)


def strip_optional(annotation: Any) -> tuple[Any, bool]:
    """Split `X | None` into `X` and whether None is allowed.

    Args:
        annotation (Any): Declared attribute type.

    Returns:
        tuple[Any, bool]: Inner annotation and nullability flag.
    """
    if get_origin(annotation) not in (Union, types.UnionType):
        return annotation, annotation is type(None)

    args = get_args(annotation)
    non_null = tuple(arg for arg in args if arg is not type(None))
    nullable = len(non_null) != len(args)
    if len(non_null) == 1:
        return non_null[0], nullable
    return Union[non_null], nullable  # noqa: UP007


def sequence_item_type(annotation: Any) -> Any | None:
    """Return the element type of a homogeneous sequence annotation.

    Args:
        annotation (Any): Declared attribute type, already stripped of None.

    Returns:
        Any | None: Element type, or None when the annotation is not a sequence.
    """
    origin = get_origin(annotation)
    if origin not in _SEQUENCE_ORIGINS:
        return None
    args = get_args(annotation)
    if origin is tuple:
        return args[0] if len(args) == 2 and args[1] is Ellipsis else None  # noqa: PLR2004
    return args[0] if len(args) == 1 else None


def is_simple_annotation(annotation: Any) -> bool:
    """Return whether a type is scalar, an enum, or a sequence of those."""
    inner, _ = strip_optional(annotation)
    item_type = sequence_item_type(inner)
    if item_type is not None:
        inner = item_type
    return _is_scalar(inner)


def _is_scalar(annotation: Any) -> bool:
    if not isinstance(annotation, type):
        return False
    return issubclass(annotation, _SCALAR_TYPES) or issubclass(annotation, Enum)
