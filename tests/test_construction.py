"""Tests for constructor discovery and safe object creation."""

import uuid
from typing import Literal, Union

import pytest
from pydantic import BaseModel

from object_faker.engine.construction import get_simplest_constructor, try_construct
from object_faker.engine.matcher import Matcher
from object_faker.selectors.registry import TypeTable


class Connection:
    def __init__(self, host: str, port: int, retries: int = 3):
        self.host = host
        self.port = port
        self.retries = retries


class Window:
    def __init__(self, width: int, /, *, title: str, modal: bool = False):
        self.width = width
        self.title = title
        self.modal = modal


class Buffer:
    def __init__(self, size: int = 4, /):
        self.size = size


class Temperature:
    def __init__(self, degrees: float, scale: str):
        self.degrees = degrees
        self.scale = scale

    @classmethod
    def freezing(cls) -> "Temperature":
        return cls(0.0, "C")

    @classmethod
    def parse(cls, text: str) -> "Temperature":
        return cls(float(text[:-1]), text[-1])


class Fragile:
    def __init__(self):
        raise RuntimeError("boom")


class Chicken:
    def __init__(self, egg: "Egg"):
        self.egg = egg


class Egg:
    def __init__(self, chicken: Chicken):
        self.chicken = chicken


class Loose:
    def __init__(self, anything):
        self.anything = anything


class Badge(BaseModel):
    size: Literal["S", "M"]
    level: int | str
    rank: Union[float, str]


class Ticket:
    def __init__(self, seat: Literal["aisle", "window"], row: int | None):
        self.seat = seat
        self.row = row


@pytest.fixture
def matcher():
    return Matcher(TypeTable(seed=8), seed=8)


@pytest.fixture
def bare_matcher():
    return Matcher(TypeTable(register_defaults=False), seed=8)


class TestGetSimplestConstructor:
    """Tests for constructor selection."""

    def test_class_itself(self):
        constructor = get_simplest_constructor(Connection)
        assert constructor.factory is Connection
        assert [p.name for p in constructor.parameters] == ["host", "port", "retries"]

    def test_fewest_parameters_wins(self):
        constructor = get_simplest_constructor(Temperature)
        assert constructor.factory.__name__ == "freezing"
        assert constructor.parameters == []

    def test_forward_reference_resolved(self):
        constructor = get_simplest_constructor(Chicken)
        assert constructor.annotation(constructor.parameters[0]) is Egg


class TestTryConstruct:
    """Tests for guarded invocation."""

    def test_success(self):
        result = try_construct(Connection, ["db", 5432])
        assert result.ok
        assert result.instance.port == 5432

    def test_failure_is_captured(self):
        result = try_construct(Fragile)
        assert not result.ok
        assert result.instance is None
        assert result.error == "RuntimeError: boom"


class TestSafeObjectCreate:
    """Tests for Matcher.safe_object_create."""

    def test_required_arguments_synthesized(self, matcher):
        connection = matcher.safe_object_create(Connection)

        assert isinstance(connection.host, str)
        assert connection.host
        assert isinstance(connection.port, int)
        assert connection.retries == 3

    def test_keyword_and_positional_only(self, matcher):
        window = matcher.safe_object_create(Window)

        assert isinstance(window.width, int)
        assert isinstance(window.title, str)
        assert window.modal is False

    def test_positional_default_passed(self, matcher):
        assert matcher.safe_object_create(Buffer).size == 4

    def test_alternate_constructor_used(self, matcher):
        temperature = matcher.safe_object_create(Temperature)
        assert temperature.degrees == 0.0
        assert temperature.scale == "C"

    def test_raising_constructor(self, matcher):
        assert matcher.safe_object_create(Fragile) is None

    def test_zero_values_without_selectors(self, bare_matcher):
        assert bare_matcher.safe_object_create(str) == ""
        assert bare_matcher.safe_object_create(uuid.UUID) == uuid.UUID(int=0)
        assert bare_matcher.safe_object_create(int) == 0

    def test_selector_used_when_registered(self, matcher):
        assert isinstance(matcher.safe_object_create(uuid.UUID), uuid.UUID)
        assert matcher.safe_object_create(uuid.UUID) != uuid.UUID(int=0)

    def test_constructor_cycle(self, matcher):
        chicken = matcher.safe_object_create(Chicken)

        assert isinstance(chicken.egg, Egg)
        assert chicken.egg.chicken is None

    def test_unannotated_parameter(self, matcher):
        assert matcher.safe_object_create(Loose).anything is None

    def test_collection(self, matcher):
        values = matcher.safe_object_create(list[int])
        assert 1 <= len(values) <= 10

    def test_literal_argument_uses_first_choice(self, matcher):
        ticket = matcher.safe_object_create(Ticket)

        assert ticket.seat == "aisle"
        assert isinstance(ticket.row, int)

    def test_model_with_required_choice_and_union_fields(self, matcher):
        badge = matcher.safe_object_create(Badge)

        assert badge.size == "S"
        assert isinstance(badge.level, int)
        assert isinstance(badge.rank, float)
