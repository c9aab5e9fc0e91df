"""
object-faker - populate arbitrary Python data types with synthetic values for test fixtures.

Given a dataclass, pydantic model, NamedTuple or plain annotated class, every
writable field is filled from a registry of value selectors, or built
recursively as a sub-object or collection.
"""

__version__ = "0.1.0"

from object_faker.schemas.base import FieldDescriptor
from object_faker.selectors.base import (
    DerivedPropertySelector,
    FunctionSelector,
    SelectorPriority,
    TypeSelector,
)
from object_faker.selectors.registry import TypeTable
from object_faker.engine.matcher import Matcher
from object_faker.engine.fake import Fake
from object_faker.profiles.base import FakeProfile

__all__ = [
    "FieldDescriptor",
    "TypeSelector",
    "SelectorPriority",
    "FunctionSelector",
    "DerivedPropertySelector",
    "TypeTable",
    "Matcher",
    "Fake",
    "FakeProfile",
]
