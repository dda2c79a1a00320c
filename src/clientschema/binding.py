"""Field list to typed settings model binding."""

from __future__ import annotations

import re
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar, cast, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from clientschema.descriptors import field_descriptors, sequence_item_type, strip_optional
from clientschema.exceptions import (
    FieldFormatError,
    FieldTypeError,
    InvalidArgumentError,
    MissingFieldError,
)
from clientschema.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from clientschema.descriptors import FieldDescriptor
    from clientschema.typing.models import Field

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def read_from_schema(
    fields: Iterable[Field],
    target_type: type[BaseModel],
    *,
    strict: bool = False,
) -> BaseModel:
    """Build a settings model from a submitted field list.

    The target is created with no arguments, then every attribute carrying a
    `FieldDefinition` is set from the field with the same name. Integer
    attributes are parsed leniently (`0`, or `None` when nullable). Integer,
    string and enum sequences are parsed strictly: a malformed, null or
    out-of-range element raises.

    An annotated attribute with no submitted field keeps its default value. In
    strict mode it raises `MissingFieldError` instead.

    Args:
        fields (Iterable[Field]): Submitted fields.
        target_type (type[BaseModel]): Settings model class to build.
        strict (bool): Raise when an annotated attribute has no field.

    Raises:
        InvalidArgumentError: If `target_type` is None, not a settings model, or
            cannot be built without arguments.
        MissingFieldError: In strict mode, when a field is missing.
        FieldFormatError: If a sequence element is malformed.
        FieldTypeError: If a value cannot be assigned to its attribute.

    Returns:
        BaseModel: Populated settings instance.
    """
    if target_type is None:
        raise InvalidArgumentError(argument="target_type")
    if not isinstance(target_type, type) or not issubclass(target_type, BaseModel):
        raise InvalidArgumentError(argument="target_type", message=f"expected a settings model, got {target_type!r}")

    try:
        target = target_type()
    except ValidationError as exc:
        raise InvalidArgumentError(
            argument="target_type",
            message=f"{target_type.__name__} cannot be built without arguments",
        ) from exc

    submitted: dict[str, Field] = {}
    for field in fields or ():
        submitted.setdefault(field.name, field)

    for descriptor in field_descriptors(target_type):
        field = submitted.get(descriptor.name)
        if field is None:
            if strict:
                raise MissingFieldError(field_name=descriptor.name, target_type=target_type.__name__)
            logger.warning(
                "Submitted schema has no field for attribute; keeping default",
                extra={"field_name": descriptor.name, "target_type": target_type.__name__},
            )
            continue
        setattr(target, descriptor.name, _coerce(descriptor, field.value))

    return target


def read_from_schema_as(fields: Iterable[Field], target_type: type[T], *, strict: bool = False) -> T:
    """Typed variant of `read_from_schema`."""
    return cast("T", read_from_schema(fields, target_type, strict=strict))


def parse_int64(raw: object) -> int | None:
    """Parse a value's text as a signed 64-bit integer.

    Args:
        raw (object): Raw field value.

    Returns:
        int | None: Parsed integer, or None when the text is not an integer in range.
    """
    if raw is None:
        return None
    text = str(raw)
    if not _INTEGER_PATTERN.match(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _coerce(descriptor: FieldDescriptor, raw: object) -> object:
    inner, nullable = strip_optional(descriptor.annotation)

    if inner is int:
        value = parse_int64(raw)
        if value is None and not nullable:
            return 0
        return value

    item_type = sequence_item_type(inner)
    if item_type is int or item_type is str or _is_enum(item_type):
        if raw is None:
            return None if nullable else _as_sequence(inner, [])
        if item_type is int:
            items: list[Any] = _int_items(descriptor.name, raw)
        elif item_type is str:
            items = _str_items(descriptor.name, raw)
        else:
            items = _enum_items(descriptor.name, item_type, raw)
        return _as_sequence(inner, items)

    return _assignable_value(descriptor, raw)


def _int_items(field_name: str, raw: object) -> list[int]:
    if isinstance(raw, (list, tuple)):
        return [_structured_int(field_name, element) for element in raw]
    return [_int_token(field_name, segment) for segment in str(raw).split(",") if segment]


def _structured_int(field_name: str, element: object) -> int:
    if isinstance(element, int) and not isinstance(element, bool):
        return _in_range(field_name, element, element)
    if isinstance(element, float) and element.is_integer():
        return _in_range(field_name, element, int(element))
    if isinstance(element, str):
        return _int_token(field_name, element)
    raise FieldFormatError(field_name=field_name, token=element)


def _int_token(field_name: str, token: str) -> int:
    if not _INTEGER_PATTERN.match(token):
        raise FieldFormatError(field_name=field_name, token=token)
    return _in_range(field_name, token, int(token))


def _in_range(field_name: str, token: object, value: int) -> int:
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise FieldFormatError(field_name=field_name, token=token)
    return value


def _str_items(field_name: str, raw: object) -> list[str]:
    if isinstance(raw, (list, tuple)):
        items: list[str] = []
        for element in raw:
            # null elements are rejected, never bound as the text "None"
            if element is None:
                raise FieldFormatError(field_name=field_name, token=element)
            items.append(str(element))
        return items
    return [segment for segment in str(raw).split(",") if segment]


def _enum_items(field_name: str, item_type: type[Enum], raw: object) -> list[Enum]:
    elements = raw if isinstance(raw, (list, tuple)) else [segment for segment in str(raw).split(",") if segment]
    return [_enum_member(field_name, item_type, element) for element in elements]


def _enum_member(field_name: str, item_type: type[Enum], element: object) -> Enum:
    if isinstance(element, item_type):
        return element
    # flat text carries integer members as their digits
    digits = int(element) if isinstance(element, str) and _INTEGER_PATTERN.match(element) else None
    for member in item_type:
        if member.value == element or (digits is not None and member.value == digits):
            return member
    raise FieldTypeError(field_name=field_name, expected=item_type.__name__, actual=repr(element))


def _is_enum(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, Enum)


def _as_sequence(annotation: Any, items: list[Any]) -> object:
    # tuple annotations bind as tuples; every other sequence binds as a list.
    if get_origin(annotation) is tuple:
        return tuple(items)
    return items


def _assignable_value(descriptor: FieldDescriptor, raw: object) -> object:
    inner, nullable = strip_optional(descriptor.annotation)
    if raw is None and nullable:
        return None

    if _is_enum(inner) and raw is not None:
        if isinstance(raw, inner):
            return raw
        try:
            return inner(raw)
        except ValueError as exc:
            raise FieldTypeError(
                field_name=descriptor.name,
                expected=inner.__name__,
                actual=repr(raw),
            ) from exc

    try:
        _adapter(descriptor.annotation).validate_python(raw, strict=True)
    except ValidationError as exc:
        raise FieldTypeError(
            field_name=descriptor.name,
            expected=_type_name(descriptor.annotation),
            actual=type(raw).__name__,
        ) from exc
    return raw


@lru_cache(maxsize=256)
def _adapter(annotation: Any) -> TypeAdapter[Any]:
    return TypeAdapter(annotation)


def _type_name(annotation: Any) -> str:
    return getattr(annotation, "__name__", None) or repr(annotation)
