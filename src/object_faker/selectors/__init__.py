"""Selectors module - where values come from.

Selectors produce values for one target type and decide whether they apply
to a field:
- Primitive selectors (Faker-backed ints, strings, dates, ...)
- Name-hint selectors (email, first_name, city, ...)
- Function selectors (user-supplied callables)
- Derived property selectors (another selector, narrowed to one field name)

The TypeTable stores them per type and ranks them by priority.
"""

from object_faker.selectors.base import (
    DerivedPropertySelector,
    FunctionSelector,
    SelectorPriority,
    TypeSelector,
)
from object_faker.selectors.names import NameHintSelector
from object_faker.selectors.primitives import FakerSelector
from object_faker.selectors.registry import TypeTable, get_global_type_table

__all__ = [
    "TypeSelector",
    "SelectorPriority",
    "FunctionSelector",
    "DerivedPropertySelector",
    "FakerSelector",
    "NameHintSelector",
    "TypeTable",
    "get_global_type_table",
]
