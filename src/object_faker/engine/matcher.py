"""Matcher - binds selectors from a TypeTable onto the fields of an object.

For each object the matcher:
- Tries to replace the whole object with a selector for its own type
- Otherwise walks its writable fields, binding the best matching selector
- Falls back to building sub-objects and collections recursively

The chain of types currently being populated (``lineage``) is passed down
each call. A field, element or constructor argument whose type is already
on that chain is left at its default, which bounds recursion on
self-referencing and cyclic types.
"""

import logging
import random
import uuid
from typing import Any, Iterable, TypeVar

from object_faker.engine.construction import (
    MatchResult,
    get_simplest_constructor,
    try_construct,
)
from object_faker.schemas.base import FieldDescriptor, StructDraft
from object_faker.schemas.introspect import describe_type
from object_faker.schemas.types import (
    choices_of,
    collection_factory,
    element_type,
    is_choice_type,
    is_collection,
    is_object_type,
    is_value_type,
    runtime_class,
    type_name,
    union_members,
    unwrap_optional,
    zero_value,
)
from object_faker.selectors.base import TypeSelector
from object_faker.selectors.registry import TypeTable

logger = logging.getLogger(__name__)

T = TypeVar("T")

Lineage = tuple[Any, ...]

MIN_COLLECTION_SIZE = 1
MAX_COLLECTION_SIZE = 10


class Matcher:
    """Populates objects using the selectors of a TypeTable."""

    def __init__(
        self,
        type_map: TypeTable | None = None,
        null_probability: float = 0.0,
        seed: int | None = None,
    ):
        """Initialize the matcher.

        Args:
            type_map: Selector registry; a fresh default table if omitted
            null_probability: Chance (0.0-1.0) that an ``Optional`` field is set to None
            seed: Optional random seed for structural choices
        """
        if not 0.0 <= null_probability <= 1.0:
            raise ValueError(f"null_probability must be within [0, 1], got {null_probability}")
        self.type_map = type_map if type_map is not None else TypeTable(seed=seed)
        self.null_probability = null_probability
        self._rng = random.Random(seed)

    def match(self, target_object: T, lineage: Lineage = ()) -> T:
        """Populate every writable field of an object.

        If a selector exists for the object's own type, its value replaces
        the object and no field is visited.

        Args:
            target_object: An instance to populate
            lineage: Types already being populated further up the call chain

        Returns:
            The populated instance (the same object unless it was replaced)
        """
        if target_object is None:
            return None

        target_type = type(target_object)
        if is_value_type(target_type):
            return self.match_struct(target_object, lineage)

        result = self.map_object(target_object, target_type)
        if result.matched:
            return result.value

        self.process_properties(describe_type(target_type), target_object, lineage)
        return target_object

    def match_struct(self, target_struct: T, lineage: Lineage = ()) -> T:
        """Populate an immutable value, returning a new one.

        The input is never modified.
        """
        struct_type = type(target_struct)
        selector = self.evaluate_selectors(struct_type, self.type_map.get_selectors(struct_type))
        if selector is not None:
            return selector.replace(target_struct)

        draft = StructDraft(target_struct)
        self.process_properties(describe_type(struct_type), draft, lineage, struct_type)
        return draft.build()

    def process_properties(
        self,
        properties: Iterable[FieldDescriptor],
        target_object: Any,
        lineage: Lineage = (),
        target_type: Any = None,
    ) -> Any:
        """Populate each writable field of ``target_object``.

        Args:
            properties: Field descriptors of the target's type
            target_object: The object (or struct draft) receiving values
            lineage: Types already being populated further up the call chain
            target_type: The type being populated; defaults to the object's type

        Returns:
            The target object
        """
        target_type = target_type or type(target_object)
        lineage = lineage + (target_type,)

        for field in properties:
            if not field.writable:
                continue

            if field.value_type in lineage:
                # tree structures (Node.parent: Node) would recurse forever
                logger.debug(
                    "Skipping %s.%s: type already being populated",
                    type_name(target_type),
                    field.name,
                )
                continue

            self.process_property(field, target_object, lineage)

        return target_object

    def process_property(self, field: FieldDescriptor, target_object: Any, lineage: Lineage = ()) -> None:
        """Populate a single field, trying selectors before building values structurally."""
        field_type = field.value_type

        if field.nullable and self._roll_null():
            field.set(target_object, None)
            return

        if self.map_from_selector(field, target_object, field_type):
            return

        if is_collection(field_type):
            field.set(target_object, self.create_array_instance(field_type, lineage))
            return

        if is_choice_type(field_type):
            field.set(target_object, self._rng.choice(choices_of(field_type)))
            return

        if runtime_class(field_type) is None:
            # Any, unions and type variables are left untouched
            return

        sub_instance = self.safe_object_create(field_type, lineage)
        if sub_instance is not None:
            if is_value_type(type(sub_instance)):
                sub_instance = self.match_struct(sub_instance, lineage)
            elif is_object_type(field_type):
                self.process_properties(
                    describe_type(field_type), sub_instance, lineage, type(sub_instance)
                )

        field.set(target_object, sub_instance)

    def map_from_selector(self, field: FieldDescriptor, target_object: Any, field_type: Any) -> bool:
        """Bind a field from the best matching selector.

        Returns:
            True if a selector was found and bound, False otherwise
        """
        if self.type_map.count_selectors(field_type) == 0:
            return False

        selector = self.evaluate_selectors(field, self.type_map.get_selectors(field_type))
        if selector is None:
            return False

        selector.bind(target_object, field)
        return True

    def map_object(self, target_object: Any, target_type: Any) -> MatchResult:
        """Replace an object wholesale from a selector for its own type."""
        if self.type_map.count_selectors(target_type) == 0:
            return MatchResult(value=target_object, matched=False)

        selector = self.evaluate_selectors(target_type, self.type_map.get_selectors(target_type))
        if selector is None:
            return MatchResult(value=target_object, matched=False)

        return MatchResult(value=selector.replace(target_object), matched=True)

    def evaluate_selectors(
        self,
        target: FieldDescriptor | Any,
        selectors: Iterable[TypeSelector],
    ) -> TypeSelector | None:
        """Pick the first selector that can bind the field or type.

        Args:
            target: A field descriptor, or a bare type when no field name exists
            selectors: Candidates, already in priority order

        Returns:
            The first matching selector, or None if none applies
        """
        for selector in selectors:
            if selector.can_bind(target):
                return selector
        return None

    def create_array_instance(self, collection_type: Any, lineage: Lineage = ()) -> Any:
        """Build a collection of 1-10 populated elements.

        The container is the declared collection class when it is concrete
        (``list``, ``set``, ``tuple``, ``deque``, ...), otherwise a list. If
        the element type is already being populated the container is empty.
        Enum and ``Literal`` elements are drawn at random from their choices.
        """
        item_type = unwrap_optional(element_type(collection_type))[0]
        factory = collection_factory(collection_type)

        if item_type in lineage:
            return factory([])

        element_count = self._rng.randint(MIN_COLLECTION_SIZE, MAX_COLLECTION_SIZE)
        if is_choice_type(item_type):
            choices = choices_of(item_type)
            if not choices:
                return factory([])
            return factory([self._rng.choice(choices) for _ in range(element_count)])

        selector = self.evaluate_selectors(item_type, self.type_map.get_selectors(item_type))

        elements = []
        for _ in range(element_count):
            element = self.safe_object_create(item_type, lineage)

            if selector is not None:
                element = selector.replace(element)
            elif element is not None and is_value_type(type(element)):
                element = self.match_struct(element, lineage)
            elif element is not None and is_object_type(item_type):
                self.process_properties(describe_type(item_type), element, lineage, type(element))

            elements.append(element)

        return factory(elements)

    def safe_object_create(self, tp: Any, lineage: Lineage = ()) -> Any:
        """Create an instance of a type, synthesizing constructor arguments.

        Never raises: when an instance cannot be built the type's zero value
        (``0``, ``""``, ...) or None is returned.

        Args:
            tp: The type to instantiate
            lineage: Types already being populated further up the call chain

        Returns:
            A new instance, or a zero value / None
        """
        tp = unwrap_optional(tp)[0]

        selector = self.evaluate_selectors(tp, self.type_map.get_selectors(tp))
        if selector is not None:
            return selector.generate()

        if tp is str:
            return ""
        if tp is uuid.UUID:
            return uuid.UUID(int=0)
        if is_collection(tp):
            return self.create_array_instance(tp, lineage)
        if is_choice_type(tp):
            choices = choices_of(tp)
            return choices[0] if choices else None

        cls = runtime_class(tp)
        if cls is None:
            return None
        if tp in lineage or cls in lineage:
            logger.debug("Not constructing %s: type already being populated", type_name(tp))
            return zero_value(cls)

        constructor = get_simplest_constructor(cls)
        if constructor is None or not constructor.parameters:
            factory = constructor.factory if constructor is not None else cls
            return self._construct_or_default(cls, factory)

        lineage = lineage + (cls,)
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter in constructor.parameters:
            positional = parameter.kind is parameter.POSITIONAL_ONLY
            if parameter.default is not parameter.empty:
                # keyword parameters are omitted so the callee applies its own default
                if positional:
                    args.append(parameter.default)
                continue

            value = self._create_argument(constructor.annotation(parameter), lineage)
            if positional:
                args.append(value)
            else:
                kwargs[parameter.name] = value

        return self._construct_or_default(cls, constructor.factory, args, kwargs)

    def _create_argument(self, annotation: Any, lineage: Lineage) -> Any:
        inner, nullable = unwrap_optional(annotation)
        if is_choice_type(inner):
            choices = choices_of(inner)
            return choices[0] if choices else None
        members = union_members(inner)
        if members:
            # a required union argument is built as its first member
            return self._create_argument(members[0], lineage)
        if runtime_class(inner) is None:
            return None
        if inner in lineage:
            return None if nullable else zero_value(inner)

        argument = self.safe_object_create(inner, lineage)
        if argument is None:
            return None
        if is_value_type(type(argument)):
            return self.match_struct(argument, lineage)
        return self.match(argument, lineage)

    def _construct_or_default(
        self,
        cls: type,
        factory: Any,
        args: list[Any] | None = None,
        kwargs: dict[str, Any] | None = None,
    ) -> Any:
        result = try_construct(factory, args, kwargs)
        if result.ok:
            return result.instance
        logger.debug("Could not construct %s (%s); using default", type_name(cls), result.error)
        return zero_value(cls)

    def _roll_null(self) -> bool:
        return self.null_probability > 0 and self._rng.random() < self.null_probability
