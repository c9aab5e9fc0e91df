"""Engine module - population runtime.

Contains:
- Matcher: selects selectors for fields and populates objects recursively
- Construction helpers: constructor discovery and guarded invocation
- Fake: builder producing populated instances of a model
"""

from object_faker.engine.construction import (
    ConstructionResult,
    MatchResult,
    get_simplest_constructor,
    try_construct,
)
from object_faker.engine.fake import Fake
from object_faker.engine.matcher import Matcher

__all__ = [
    "Matcher",
    "Fake",
    "MatchResult",
    "ConstructionResult",
    "get_simplest_constructor",
    "try_construct",
]
