"""Schemas module - how target types are described.

A type is reduced to an ordered list of field descriptors (name, declared
type, writability). Everything downstream works from these descriptions.
"""

from object_faker.schemas.base import FieldDescriptor, StructDraft
from object_faker.schemas.introspect import (
    clear_type_descriptions,
    describe_type,
    register_type_description,
)
from object_faker.schemas.types import (
    is_collection,
    is_value_type,
    unwrap_optional,
    zero_value,
)

__all__ = [
    "FieldDescriptor",
    "StructDraft",
    "describe_type",
    "register_type_description",
    "clear_type_descriptions",
    "is_collection",
    "is_value_type",
    "unwrap_optional",
    "zero_value",
]
