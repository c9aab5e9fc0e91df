"""Profiles module - generation settings loaded from YAML."""

from object_faker.profiles.base import DEFAULT_NULL_PROBABILITY, FakeProfile
from object_faker.profiles.loader import ProfileLoader, load_profile

__all__ = [
    "DEFAULT_NULL_PROBABILITY",
    "FakeProfile",
    "ProfileLoader",
    "load_profile",
]
