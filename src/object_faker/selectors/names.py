"""Selectors that pick realistic string values from a field's name.

A ``str`` field named ``email`` gets an email address, ``first_name`` a first
name, and so on. Name hints only apply to named fields; collections of
strings and bare ``str`` lookups fall back to the plain string selector.
"""

from typing import Any

from faker import Faker

from object_faker.schemas.base import FieldDescriptor
from object_faker.selectors.base import SelectorPriority
from object_faker.selectors.primitives import FakerSelector


# Faker provider -> normalized field names it serves
NAME_HINTS: dict[str, tuple[str, ...]] = {
    "email": ("email", "emailaddress"),
    "first_name": ("firstname", "givenname"),
    "last_name": ("lastname", "surname", "familyname"),
    "name": ("name", "fullname"),
    "user_name": ("username", "login"),
    "phone_number": ("phone", "phonenumber", "mobile"),
    "street_address": ("address", "streetaddress", "street"),
    "city": ("city", "town"),
    "state": ("state", "province"),
    "country": ("country",),
    "postcode": ("postcode", "postalcode", "zip", "zipcode"),
    "company": ("company", "companyname", "employer"),
    "url": ("url", "website", "homepage"),
    "job": ("job", "jobtitle", "occupation"),
}


def normalize_field_name(name: str) -> str:
    """Lower-case a field name and drop separators (``First_Name`` -> ``firstname``)."""
    return name.lower().replace("_", "").replace("-", "")


class NameHintSelector(FakerSelector):
    """String selector that binds only to fields with a matching name."""

    target_type = str
    priority = SelectorPriority.NAME_HINT

    def __init__(self, faker: Faker, provider: str, hints: tuple[str, ...]):
        super().__init__(faker)
        self.provider = provider
        self.hints = frozenset(hints)

    def can_bind_type(self, tp: Any) -> bool:
        return False

    def can_bind_field(self, field: FieldDescriptor) -> bool:
        return (
            super().can_bind_type(field.value_type)
            and normalize_field_name(field.name) in self.hints
        )

    def generate(self) -> str:
        return getattr(self._faker, self.provider)()

    def __repr__(self) -> str:
        return f"{self.name}({self.provider})"


def name_hint_selectors(faker: Faker) -> list[NameHintSelector]:
    return [
        NameHintSelector(faker, provider, hints)
        for provider, hints in NAME_HINTS.items()
    ]
