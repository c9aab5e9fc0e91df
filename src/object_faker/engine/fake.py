"""Fake - builder for generating populated instances of a model type."""

from typing import Any, Callable, Generic, Iterator, TypeVar

from object_faker.engine.matcher import Matcher
from object_faker.profiles.base import FakeProfile
from object_faker.schemas.introspect import describe_type
from object_faker.schemas.types import type_name
from object_faker.selectors.base import FunctionSelector
from object_faker.selectors.registry import TypeTable

T = TypeVar("T")


class Fake(Generic[T]):
    """Generates populated instances of ``model``.

    Example:
        fake = Fake(Customer, nullable=True).set_property("age", lambda: 42)
        customers = fake.generate_many(100)
    """

    def __init__(
        self,
        model: type[T],
        *,
        nullable: bool | None = None,
        null_probability: float | None = None,
        seed: int | None = None,
        table: TypeTable | None = None,
        profile: FakeProfile | None = None,
    ):
        """Initialize the builder.

        Explicit arguments take precedence over the profile.

        Args:
            model: The type to generate
            nullable: Whether ``Optional`` fields may be generated as None
            null_probability: Chance of None for nullable fields (default 0.1)
            seed: Optional random seed for deterministic generation
            table: Selector registry; a new default table if omitted
            profile: Optional settings to start from
        """
        profile = profile or FakeProfile()
        overrides = {
            key: value
            for key, value in (
                ("nullable", nullable),
                ("null_probability", null_probability),
                ("seed", seed),
            )
            if value is not None
        }
        self.profile = profile.model_copy(update=overrides)

        self.model = model
        self._seed = self.profile.seed
        self.table = table if table is not None else TypeTable(
            seed=self._seed, locale=self.profile.locale
        )
        self._matcher = Matcher(
            self.table,
            null_probability=self.profile.effective_null_probability,
            seed=self._seed,
        )

    @property
    def matcher(self) -> Matcher:
        return self._matcher

    @property
    def seed(self) -> int | None:
        return self._seed

    def set_property(
        self,
        name: str,
        func: Callable[[], Any],
        target_type: Any = None,
    ) -> "Fake[T]":
        """Generate values for fields called ``name`` with ``func``.

        Args:
            name: Exact field name
            func: Zero-argument callable producing the value
            target_type: Field type; looked up on the model if omitted

        Raises:
            ValueError: If the model has no such field and no type is given
        """
        if target_type is None:
            field = next((f for f in describe_type(self.model) if f.name == name), None)
            if field is None:
                raise ValueError(f"'{type_name(self.model)}' has no field '{name}'")
            target_type = field.value_type

        self.table.register(target_type, FunctionSelector(target_type, func), name=name)
        return self

    def set_type(self, target_type: Any, func: Callable[[], Any]) -> "Fake[T]":
        """Generate every value of ``target_type`` with ``func``."""
        self.table.register(target_type, FunctionSelector(target_type, func))
        return self

    def generate(self) -> T:
        """Generate one populated instance.

        Raises:
            ValueError: If the model itself cannot be constructed
        """
        instance = self._matcher.safe_object_create(self.model)
        if instance is None:
            raise ValueError(f"Could not construct an instance of '{type_name(self.model)}'")
        return self._matcher.match(instance)

    def generate_many(self, count: int) -> list[T]:
        """Generate ``count`` independently populated instances."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.generate() for _ in range(count)]

    def stream(self, count: int | None = None) -> Iterator[T]:
        """Yield instances one at a time.

        Args:
            count: Optional limit (None for infinite)
        """
        generated = 0
        while count is None or generated < count:
            yield self.generate()
            generated += 1
