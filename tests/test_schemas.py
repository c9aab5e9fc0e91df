"""Tests for the Schemas module."""

import collections
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, List, NamedTuple, Optional, Union

import pytest
from pydantic import BaseModel, ConfigDict, Field

from object_faker.schemas.base import FieldDescriptor, StructDraft
from object_faker.schemas.introspect import describe_type, register_type_description
from object_faker.schemas.types import (
    collection_factory,
    element_type,
    is_collection,
    is_value_type,
    runtime_class,
    unwrap_optional,
    zero_value,
)


@dataclass
class Address:
    street: str = ""
    city: str = ""


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


class Pair(NamedTuple):
    left: int
    right: str = ""


class Account(BaseModel):
    owner: str = ""
    balance: float = 0.0
    account_id: str = Field(default="", frozen=True)


class FrozenCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = ""


class Plain:
    count: int
    label: Optional[str] = None
    kind: ClassVar[str] = "plain"

    def __init__(self):
        self._settable = ""

    @property
    def computed(self) -> int:
        return 1

    @property
    def settable(self) -> str:
        return self._settable

    @settable.setter
    def settable(self, value: str) -> None:
        self._settable = value


class Described:
    def __init__(self):
        self.size = 0


class TestTypeHelpers:
    """Tests for annotation classification helpers."""

    def test_unwrap_optional(self):
        assert unwrap_optional(Optional[int]) == (int, True)
        assert unwrap_optional(int | None) == (int, True)
        assert unwrap_optional(int) == (int, False)

    def test_unwrap_multi_union_is_left_alone(self):
        inner, nullable = unwrap_optional(Union[int, str, None])
        assert nullable is True
        assert inner == Union[int, str, None]

    @pytest.mark.parametrize("annotation", [
        list[int],
        List[int],
        Sequence[str],
        set[int],
        tuple[int, ...],
        collections.deque[int],
    ])
    def test_collections_detected(self, annotation):
        assert is_collection(annotation)

    @pytest.mark.parametrize("annotation", [
        list,
        dict[str, int],
        tuple[int, str],
        int,
        Address,
    ])
    def test_non_collections(self, annotation):
        assert not is_collection(annotation)

    def test_runtime_class(self):
        assert runtime_class(list[int]) is list
        assert runtime_class(Address) is Address
        assert runtime_class(Any) is None

    @pytest.mark.parametrize("annotation", [int | str, Union[int, str]])
    def test_unions_have_no_runtime_class(self, annotation):
        assert runtime_class(annotation) is None

    def test_element_type(self):
        assert element_type(list[Address]) is Address
        assert element_type(tuple[int, ...]) is int

    def test_collection_factory(self):
        assert collection_factory(Sequence[int]) is list
        assert collection_factory(set[int]) is set
        assert collection_factory(tuple[int, ...]) is tuple
        assert collection_factory(collections.deque[int]) is collections.deque

    def test_value_types(self):
        assert is_value_type(int)
        assert is_value_type(str)
        assert is_value_type(Point)
        assert is_value_type(Pair)
        assert is_value_type(FrozenCode)
        assert not is_value_type(Address)
        assert not is_value_type(Account)

    def test_zero_values(self):
        assert zero_value(int) == 0
        assert zero_value(float) == 0.0
        assert zero_value(str) == ""
        assert zero_value(uuid.UUID) == uuid.UUID(int=0)
        assert zero_value(Address) is None


class TestDescribeType:
    """Tests for type description."""

    def test_dataclass_fields_in_order(self):
        fields = describe_type(Address)
        assert [f.name for f in fields] == ["street", "city"]
        assert all(f.writable for f in fields)
        assert all(f.has_default for f in fields)

    def test_frozen_dataclass_fields_are_writable(self):
        fields = describe_type(Point)
        assert [f.name for f in fields] == ["x", "y"]
        assert all(f.writable for f in fields)

    def test_pydantic_frozen_field(self):
        fields = {f.name: f for f in describe_type(Account)}
        assert fields["owner"].writable
        assert not fields["account_id"].writable

    def test_frozen_model(self):
        fields = describe_type(FrozenCode)
        assert fields[0].writable

    def test_named_tuple(self):
        fields = {f.name: f for f in describe_type(Pair)}
        assert fields["left"].field_type is int
        assert not fields["left"].has_default
        assert fields["right"].has_default

    def test_plain_class(self):
        fields = {f.name: f for f in describe_type(Plain)}

        assert "kind" not in fields
        assert "_settable" not in fields
        assert fields["count"].field_type is int
        assert fields["label"].nullable
        assert fields["label"].value_type is str
        assert not fields["computed"].writable
        assert fields["settable"].writable

    def test_primitives_have_no_fields(self):
        assert describe_type(int) == []
        assert describe_type(list[int]) == []
        assert describe_type(dict) == []

    def test_registered_description_wins(self):
        register_type_description(Described, [FieldDescriptor(name="size", field_type=int)])

        fields = describe_type(Described)
        assert [f.name for f in fields] == ["size"]


class TestFieldDescriptor:
    """Tests for FieldDescriptor."""

    def test_set(self):
        address = Address()
        field = FieldDescriptor(name="city", field_type=str)

        field.set(address, "Lisbon")
        assert address.city == "Lisbon"

    def test_is_immutable(self):
        field = FieldDescriptor(name="city", field_type=str)
        with pytest.raises(Exception):
            field.name = "other"

    def test_str(self):
        assert str(FieldDescriptor(name="age", field_type=int)) == "age: int"


class TestStructDraft:
    """Tests for StructDraft."""

    def test_build_dataclass(self):
        original = Point(1, 2)
        draft = StructDraft(original)
        draft.x = 5

        assert draft.x == 5
        assert draft.y == 2
        assert draft.build() == Point(5, 2)
        assert original == Point(1, 2)

    def test_build_named_tuple(self):
        draft = StructDraft(Pair(1, "a"))
        draft.right = "b"
        assert draft.build() == Pair(1, "b")

    def test_build_frozen_model(self):
        draft = StructDraft(FrozenCode(code="a"))
        draft.code = "b"
        assert draft.build() == FrozenCode(code="b")

    def test_no_changes_returns_source(self):
        original = Point(1, 2)
        assert StructDraft(original).build() is original

    def test_source_type(self):
        assert StructDraft(Point()).source_type is Point
