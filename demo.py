#!/usr/bin/env python3
"""
Demo script showing basic usage of object-faker.

Run this script after installing the package:
    pip install -e .
    python demo.py
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from object_faker import Fake
from object_faker.profiles.base import FakeProfile
from object_faker.utils.helpers import to_primitive


@dataclass
class Address:
    street: str = ""
    city: str = ""
    postcode: str = ""


@dataclass
class Customer:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    age: int = 0
    address: Address = field(default_factory=Address)
    tags: list[str] = field(default_factory=list)
    referrer: Optional["Customer"] = None


class Coordinate(NamedTuple):
    latitude: float
    longitude: float


def demo_basic_generation():
    """Demonstrate populating a nested object graph."""
    print("=" * 60)
    print("1. GENERATING CUSTOMERS")
    print("=" * 60)

    for customer in Fake(Customer, seed=42).generate_many(2):
        print(to_primitive(customer))
    print()


def demo_overrides():
    """Demonstrate per-field and per-type overrides."""
    print("=" * 60)
    print("2. OVERRIDING VALUES")
    print("=" * 60)

    fake = (
        Fake(Customer, seed=42)
        .set_property("age", lambda: 30)
        .set_type(Address, lambda: Address("1 Main St", "Springfield", "00001"))
    )
    customer = fake.generate()

    print(f"Age: {customer.age}")
    print(f"Address: {customer.address}")
    print()


def demo_nullable():
    """Demonstrate None values for Optional fields."""
    print("=" * 60)
    print("3. NULLABLE FIELDS")
    print("=" * 60)

    profile = FakeProfile(name="sparse", seed=7, nullable=True, null_probability=0.5)

    @dataclass
    class Preferences:
        newsletter: Optional[bool] = None
        language: Optional[str] = None
        theme: Optional[str] = None

    for preferences in Fake(Preferences, profile=profile).stream(3):
        print(preferences)
    print()


def demo_value_types():
    """Demonstrate immutable records."""
    print("=" * 60)
    print("4. IMMUTABLE RECORDS")
    print("=" * 60)

    for coordinate in Fake(Coordinate, seed=1).generate_many(3):
        print(coordinate)
    print()


def main():
    """Run all demos."""
    print()
    print("OBJECT FAKER DEMO")
    print("=" * 60)
    print()

    demo_basic_generation()
    demo_overrides()
    demo_nullable()
    demo_value_types()

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print()
    print("To use the CLI, install the package and run:")
    print("  pip install -e .")
    print("  object-faker --help")
    print()


if __name__ == "__main__":
    main()
