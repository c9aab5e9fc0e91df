"""Utility functions for object-faker."""

from object_faker.utils.helpers import (
    generate_seed,
    load_target,
    to_primitive,
)

__all__ = [
    "generate_seed",
    "load_target",
    "to_primitive",
]
