"""Read type descriptions from dataclasses, pydantic models, NamedTuples and plain classes.

Descriptions are computed once per type and cached. Types whose shape cannot
be inferred (or should be overridden) can be registered up front with
``register_type_description``.
"""

import dataclasses
import inspect
import logging
import typing
from typing import Any, ClassVar, Iterable, get_origin

from pydantic import BaseModel

from object_faker.schemas.base import FieldDescriptor
from object_faker.schemas.types import (
    PRIMITIVE_TYPES,
    is_collection,
    is_frozen_dataclass,
    is_named_tuple,
    is_value_type,
    runtime_class,
)

logger = logging.getLogger(__name__)

_descriptions: dict[type, list[FieldDescriptor]] = {}

_OPAQUE_TYPES: tuple[type, ...] = PRIMITIVE_TYPES + (dict, list, set, frozenset, tuple, object)


def register_type_description(tp: type, fields: Iterable[FieldDescriptor]) -> None:
    """Register the field layout of a type explicitly.

    Args:
        tp: The type being described
        fields: Its populatable fields, in population order
    """
    _descriptions[tp] = list(fields)


def clear_type_descriptions() -> None:
    """Forget all cached and registered descriptions."""
    _descriptions.clear()


def describe_type(tp: Any) -> list[FieldDescriptor]:
    """Get the populatable fields of a type.

    Unknown, primitive and container types describe as an empty list.
    """
    cls = runtime_class(tp)
    if cls is None or is_collection(tp):
        return []

    cached = _descriptions.get(cls)
    if cached is not None:
        return cached

    if cls in _OPAQUE_TYPES or issubclass(cls, PRIMITIVE_TYPES):
        fields: list[FieldDescriptor] = []
    elif dataclasses.is_dataclass(cls):
        fields = _describe_dataclass(cls)
    elif issubclass(cls, BaseModel):
        fields = _describe_model(cls)
    elif is_named_tuple(cls):
        fields = _describe_named_tuple(cls)
    else:
        fields = _describe_plain_class(cls)

    _descriptions[cls] = fields
    return fields


def _resolve_hints(target: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError, AttributeError) as e:
        logger.debug("Could not resolve annotations of %r: %s", target, e)
        return dict(getattr(target, "__annotations__", {}))


def _is_class_var(annotation: Any) -> bool:
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _describe_dataclass(cls: type) -> list[FieldDescriptor]:
    hints = _resolve_hints(cls)
    frozen = is_frozen_dataclass(cls)
    fields = []
    for f in dataclasses.fields(cls):
        has_default = (
            f.default is not dataclasses.MISSING
            or f.default_factory is not dataclasses.MISSING
        )
        fields.append(
            FieldDescriptor(
                name=f.name,
                field_type=hints.get(f.name, f.type),
                # frozen dataclasses are rebuilt through their __init__
                writable=f.init if frozen else True,
                has_default=has_default,
            )
        )
    return fields


def _describe_model(cls: type[BaseModel]) -> list[FieldDescriptor]:
    frozen_model = is_value_type(cls)
    return [
        FieldDescriptor(
            name=name,
            field_type=info.annotation,
            writable=frozen_model or not info.frozen,
            has_default=not info.is_required(),
        )
        for name, info in cls.model_fields.items()
    ]


def _describe_named_tuple(cls: type) -> list[FieldDescriptor]:
    hints = _resolve_hints(cls)
    defaults = getattr(cls, "_field_defaults", {})
    return [
        FieldDescriptor(
            name=name,
            field_type=hints.get(name, Any),
            has_default=name in defaults,
        )
        for name in cls._fields
    ]


def _describe_plain_class(cls: type) -> list[FieldDescriptor]:
    fields: dict[str, FieldDescriptor] = {}

    for name, annotation in _resolve_hints(cls).items():
        if name.startswith("_") or _is_class_var(annotation):
            continue
        fields[name] = FieldDescriptor(
            name=name,
            field_type=annotation,
            has_default=hasattr(cls, name),
        )

    for name, member in inspect.getmembers(cls, lambda m: isinstance(m, property)):
        if name.startswith("_") or name in fields:
            continue
        returns = _resolve_hints(member.fget).get("return", Any) if member.fget else Any
        fields[name] = FieldDescriptor(
            name=name,
            field_type=returns,
            writable=member.fset is not None,
            has_default=True,
        )

    return list(fields.values())
