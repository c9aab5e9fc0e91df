"""Base classes for value selectors.

A selector knows how to produce a value for one target type, and decides
whether it applies to a given field (or bare type). Selectors are created at
setup time, registered in a ``TypeTable`` and reused across every population
call, so they must not keep per-call state.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Callable

from object_faker.schemas.base import FieldDescriptor
from object_faker.schemas.types import is_assignable, type_name, unwrap_optional


class SelectorPriority(IntEnum):
    """Ranks used to order selectors registered for the same type.

    Higher values are tried first.
    """

    DEFAULT = 0
    NAME_HINT = 1
    CUSTOM_TYPE = 2
    CUSTOM_NAMED_PROPERTY = 3


class TypeSelector(ABC):
    """Abstract base class for all selectors."""

    target_type: Any = object
    priority: int = SelectorPriority.DEFAULT

    def can_bind(self, target: FieldDescriptor | Any) -> bool:
        """Check whether this selector applies to a field or a bare type.

        Args:
            target: A field descriptor, or a type when no field name exists

        Returns:
            True if this selector can produce the value
        """
        if isinstance(target, FieldDescriptor):
            return self.can_bind_field(target)
        return self.can_bind_type(target)

    def can_bind_type(self, tp: Any) -> bool:
        return is_assignable(self.target_type, unwrap_optional(tp)[0])

    def can_bind_field(self, field: FieldDescriptor) -> bool:
        return self.can_bind_type(field.value_type)

    @abstractmethod
    def generate(self) -> Any:
        """Produce a new value."""
        pass

    def bind(self, target: Any, field: FieldDescriptor) -> None:
        """Produce a value and assign it to ``field`` on ``target``."""
        field.set(target, self.generate())

    def replace(self, value: Any) -> Any:
        """Produce a value standing in for ``value``.

        Used for by-value binding (immutable records, primitives and
        whole-object replacement). The default ignores the current value.
        """
        return self.generate()

    @property
    def name(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{self.name}({type_name(self.target_type)}, priority={int(self.priority)})"


class FunctionSelector(TypeSelector):
    """Selector backed by a zero-argument callable."""

    def __init__(
        self,
        target_type: Any,
        func: Callable[[], Any],
        priority: int = SelectorPriority.CUSTOM_TYPE,
    ):
        self.target_type = target_type
        self.priority = priority
        self._func = func

    def generate(self) -> Any:
        return self._func()


class DerivedPropertySelector(TypeSelector):
    """Narrows another selector to fields with one exact name.

    Production is delegated to the wrapped selector, so registering
    ``DerivedPropertySelector(int_selector, "age")`` means "the normal int
    generator, but only for fields called ``age``".
    """

    priority = SelectorPriority.CUSTOM_NAMED_PROPERTY

    def __init__(self, base: TypeSelector, field_name: str):
        self.base = base
        self.field_name = field_name
        self.target_type = base.target_type

    def can_bind_type(self, tp: Any) -> bool:
        # no field name to compare against
        return False

    def can_bind_field(self, field: FieldDescriptor) -> bool:
        return self.base.can_bind_type(field.value_type) and field.name == self.field_name

    def generate(self) -> Any:
        return self.base.generate()

    def replace(self, value: Any) -> Any:
        return self.base.replace(value)

    def __repr__(self) -> str:
        return f"{self.name}({self.field_name!r} -> {self.base!r})"
