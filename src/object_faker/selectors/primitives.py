"""Faker-backed selectors for primitive and standard-library value types."""

import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any

from faker import Faker

from object_faker.selectors.base import TypeSelector


class FakerSelector(TypeSelector):
    """Base for selectors that draw values from a shared Faker instance."""

    def __init__(self, faker: Faker):
        self._faker = faker


class IntSelector(FakerSelector):
    target_type = int

    def generate(self) -> int:
        return self._faker.pyint(min_value=0, max_value=9999)


class FloatSelector(FakerSelector):
    target_type = float

    def generate(self) -> float:
        return self._faker.pyfloat(left_digits=5, right_digits=4)


class BoolSelector(FakerSelector):
    target_type = bool

    def generate(self) -> bool:
        return self._faker.pybool()


class StrSelector(FakerSelector):
    target_type = str

    def generate(self) -> str:
        return self._faker.pystr(min_chars=4, max_chars=20)


class BytesSelector(FakerSelector):
    target_type = bytes

    def generate(self) -> bytes:
        return self._faker.binary(length=16)


class DecimalSelector(FakerSelector):
    target_type = Decimal

    def generate(self) -> Decimal:
        return self._faker.pydecimal(left_digits=6, right_digits=2)


class UUIDSelector(FakerSelector):
    target_type = uuid.UUID

    def generate(self) -> uuid.UUID:
        return self._faker.uuid4(cast_to=None)


class DateTimeSelector(FakerSelector):
    target_type = datetime

    def generate(self) -> datetime:
        return self._faker.date_time()


class DateSelector(FakerSelector):
    target_type = date

    def generate(self) -> date:
        return self._faker.date_object()


class TimeSelector(FakerSelector):
    target_type = time

    def generate(self) -> time:
        return self._faker.time_object()


class TimeDeltaSelector(FakerSelector):
    target_type = timedelta

    def generate(self) -> timedelta:
        # up to 30 days
        return timedelta(seconds=self._faker.pyint(min_value=0, max_value=30 * 86400))


PRIMITIVE_SELECTORS: tuple[type[FakerSelector], ...] = (
    IntSelector,
    FloatSelector,
    BoolSelector,
    StrSelector,
    BytesSelector,
    DecimalSelector,
    UUIDSelector,
    DateTimeSelector,
    DateSelector,
    TimeSelector,
    TimeDeltaSelector,
)


def primitive_selectors(faker: Faker) -> list[tuple[Any, TypeSelector]]:
    """Build the default (type, selector) pairs for primitive types."""
    return [(cls.target_type, cls(faker)) for cls in PRIMITIVE_SELECTORS]
