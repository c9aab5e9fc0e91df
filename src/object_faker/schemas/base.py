"""Field descriptors - the canonical view of a type's populatable fields.

A type description is the ordered list of ``FieldDescriptor`` objects for a
type. The matcher only ever sees descriptors, never the class machinery
(dataclass fields, pydantic model fields, annotations) they were read from.
"""

import dataclasses
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from object_faker.schemas.types import is_named_tuple, type_name, unwrap_optional


class FieldDescriptor(BaseModel):
    """A single populatable field of a type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Attribute name")
    field_type: Any = Field(..., description="Declared annotation")
    writable: bool = Field(default=True, description="Whether the field may be assigned")
    has_default: bool = Field(default=False, description="Whether the field declares a default")

    @property
    def value_type(self) -> Any:
        """The declared annotation with ``Optional`` removed."""
        return unwrap_optional(self.field_type)[0]

    @property
    def nullable(self) -> bool:
        return unwrap_optional(self.field_type)[1]

    def set(self, target: Any, value: Any) -> None:
        setattr(target, self.name, value)

    def __str__(self) -> str:
        return f"{self.name}: {type_name(self.field_type)}"


class StructDraft:
    """Mutable stand-in for an immutable record while it is being populated.

    Assignments are collected and applied by ``build``, which returns a new
    instance and leaves the source untouched.
    """

    def __init__(self, source: Any):
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_changes", {})

    @property
    def source_type(self) -> type:
        return type(self._source)

    def __getattr__(self, name: str) -> Any:
        changes = object.__getattribute__(self, "_changes")
        if name in changes:
            return changes[name]
        return getattr(object.__getattribute__(self, "_source"), name)

    def __setattr__(self, name: str, value: Any) -> None:
        self._changes[name] = value

    def build(self) -> Any:
        """Create the updated record."""
        source = self._source
        if not self._changes:
            return source
        if isinstance(source, BaseModel):
            return source.model_copy(update=self._changes)
        if is_named_tuple(type(source)):
            return source._replace(**self._changes)
        if dataclasses.is_dataclass(source):
            return dataclasses.replace(source, **self._changes)
        raise TypeError(f"Cannot rebuild value of type {type_name(type(source))}")
