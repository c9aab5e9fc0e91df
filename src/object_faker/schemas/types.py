"""Helpers for classifying type annotations.

These answer the structural questions the matcher asks about a field type:
is it optional, is it a collection and of what, is it copied by value, and
what is its zero value.
"""

import collections
import collections.abc
import dataclasses
import enum
import types
import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel


PRIMITIVE_TYPES: tuple[type, ...] = (
    int,
    float,
    bool,
    str,
    bytes,
    Decimal,
    uuid.UUID,
    datetime,
    date,
    time,
    timedelta,
)

_ZERO_VALUES: dict[type, Any] = {
    int: 0,
    float: 0.0,
    bool: False,
    str: "",
    bytes: b"",
    Decimal: Decimal(0),
    uuid.UUID: uuid.UUID(int=0),
    timedelta: timedelta(0),
}

# Containers that can be built straight from a list of elements.
_CONCRETE_COLLECTIONS: tuple[type, ...] = (list, set, frozenset, tuple, collections.deque)

_ABSTRACT_COLLECTIONS: tuple[type, ...] = (
    collections.abc.Iterable,
    collections.abc.Collection,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
)


def unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Strip ``None`` from ``Optional[X]`` / ``X | None``.

    Returns:
        Tuple of (inner annotation, whether ``None`` was part of it)
    """
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(annotation) if a is not type(None)]
        nullable = len(args) != len(get_args(annotation))
        if nullable and len(args) == 1:
            return args[0], True
        return annotation, nullable
    return annotation, False


def union_members(annotation: Any) -> list[Any]:
    """Non-None members of a union annotation (empty for anything else)."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return [a for a in get_args(annotation) if a is not type(None)]
    return []


def runtime_class(annotation: Any) -> type | None:
    """Return the class behind an annotation (``list[int]`` -> ``list``)."""
    if annotation is Any:
        return None
    if isinstance(annotation, type):
        return annotation
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return None
    if isinstance(origin, type):
        return origin
    return None


def is_collection(annotation: Any) -> bool:
    """True for single-element-type containers such as ``list[int]``.

    Bare ``list`` carries no element type and is treated as a plain object.
    """
    origin = get_origin(annotation)
    if origin is None:
        return False
    args = get_args(annotation)
    if origin is tuple:
        return len(args) == 2 and args[1] is Ellipsis
    if len(args) != 1:
        return False
    return origin in _CONCRETE_COLLECTIONS or origin in _ABSTRACT_COLLECTIONS


def element_type(annotation: Any) -> Any:
    """Element type of a collection annotation."""
    return get_args(annotation)[0]


def collection_factory(annotation: Any) -> type:
    """Container class to instantiate for a collection annotation."""
    origin = get_origin(annotation)
    if origin in _CONCRETE_COLLECTIONS:
        return origin
    return list


def is_choice_type(annotation: Any) -> bool:
    """True for enums and ``Literal[...]`` annotations."""
    if get_origin(annotation) is Literal:
        return True
    return isinstance(annotation, type) and issubclass(annotation, enum.Enum)


def choices_of(annotation: Any) -> list[Any]:
    if get_origin(annotation) is Literal:
        return list(get_args(annotation))
    return list(annotation)


def is_named_tuple(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, tuple) and hasattr(tp, "_fields")


def is_frozen_dataclass(tp: Any) -> bool:
    if not (isinstance(tp, type) and dataclasses.is_dataclass(tp)):
        return False
    return tp.__dataclass_params__.frozen


def is_frozen_model(tp: Any) -> bool:
    return (
        isinstance(tp, type)
        and issubclass(tp, BaseModel)
        and bool(tp.model_config.get("frozen", False))
    )


def is_value_type(tp: Any) -> bool:
    """True for types populated by copy rather than in place.

    Covers primitives and immutable records: frozen dataclasses,
    NamedTuples and frozen pydantic models.
    """
    if not isinstance(tp, type):
        return False
    if issubclass(tp, PRIMITIVE_TYPES):
        return True
    return is_named_tuple(tp) or is_frozen_dataclass(tp) or is_frozen_model(tp)


def is_object_type(tp: Any) -> bool:
    """True for classes whose fields can be populated individually."""
    cls = runtime_class(tp)
    if cls is None or is_collection(tp) or is_choice_type(tp):
        return False
    return not issubclass(cls, PRIMITIVE_TYPES)


def zero_value(tp: Any) -> Any:
    """The value used when an instance of ``tp`` cannot be built."""
    cls = runtime_class(tp)
    if cls is None:
        return None
    for primitive, value in _ZERO_VALUES.items():
        if cls is primitive:
            return value
    return None


def is_assignable(target_type: Any, candidate: Any) -> bool:
    """True if a value of ``target_type`` may be stored where ``candidate`` is declared."""
    if target_type is candidate or target_type is Any:
        return True
    if isinstance(target_type, type) and isinstance(candidate, type):
        return issubclass(candidate, target_type)
    return target_type == candidate


def type_name(tp: Any) -> str:
    """Readable name for a type or annotation."""
    if isinstance(tp, type) and get_origin(tp) is None:
        return tp.__qualname__
    return repr(tp).replace("typing.", "")
