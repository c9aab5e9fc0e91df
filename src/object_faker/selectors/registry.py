"""Type table - the registry of selectors, keyed by target type."""

import logging
from typing import Any

from faker import Faker

from object_faker.schemas.types import type_name
from object_faker.selectors.base import DerivedPropertySelector, TypeSelector

logger = logging.getLogger(__name__)


class TypeTable:
    """Registry of value selectors.

    Each type maps to the selectors registered for it, in registration
    order. Lookups re-rank them by priority; among equal priorities the
    first registered wins. The table is filled at setup time and only read
    while objects are being populated.
    """

    def __init__(
        self,
        faker: Faker | None = None,
        seed: int | None = None,
        locale: str | None = None,
        register_defaults: bool = True,
    ):
        """Initialize the table.

        Args:
            faker: Faker instance shared by the default selectors
            seed: Optional seed applied to the Faker instance
            locale: Faker locale, used when no instance is supplied
            register_defaults: Whether to register the built-in selectors
        """
        self._selectors: dict[Any, list[TypeSelector]] = {}
        self.faker = faker or Faker(locale)
        if seed is not None:
            self.faker.seed_instance(seed)
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register the primitive and name-hint selectors."""
        from object_faker.selectors.names import name_hint_selectors
        from object_faker.selectors.primitives import primitive_selectors

        for target_type, selector in primitive_selectors(self.faker):
            self.register(target_type, selector)
        for selector in name_hint_selectors(self.faker):
            self.register(str, selector)

    def register(
        self,
        target_type: Any,
        selector: TypeSelector | None = None,
        name: str | None = None,
    ) -> TypeSelector:
        """Register a selector for a type.

        Args:
            target_type: The type the selector produces values for
            selector: The selector; may be omitted when ``name`` is given,
                in which case the type's base selector is narrowed
            name: Optional field name the selector is restricted to

        Returns:
            The selector actually stored in the table

        Raises:
            ValueError: If the selector cannot produce ``target_type``, or no
                selector is given and the type has no base selector
        """
        if selector is None:
            if name is None:
                raise ValueError("A selector or a field name is required")
            selector = self.get_base_selector(target_type)
            if selector is None:
                raise ValueError(
                    f"No base selector registered for '{type_name(target_type)}'"
                )

        if not _produces(selector, target_type):
            raise ValueError(
                f"Selector {selector!r} cannot produce '{type_name(target_type)}'"
            )

        if name is not None:
            selector = DerivedPropertySelector(selector, name)

        self._selectors.setdefault(target_type, []).append(selector)
        logger.debug("Registered %r for %s", selector, type_name(target_type))
        return selector

    def count_selectors(self, target_type: Any) -> int:
        """Number of selectors registered for a type (0 if unknown)."""
        return len(self._selectors.get(target_type, ()))

    def get_selectors(self, target_type: Any) -> list[TypeSelector]:
        """Selectors for a type, highest priority first.

        The sort is stable, so registration order breaks ties.
        """
        selectors = self._selectors.get(target_type, [])
        return sorted(selectors, key=lambda s: s.priority, reverse=True)

    def get_base_selector(self, target_type: Any) -> TypeSelector | None:
        """The first selector registered for a type, if any."""
        selectors = self._selectors.get(target_type)
        if not selectors:
            return None
        return selectors[0]

    def unregister(self, target_type: Any, selector: TypeSelector | None = None) -> bool:
        """Remove one selector, or every selector, for a type.

        Returns:
            True if something was removed, False otherwise
        """
        if target_type not in self._selectors:
            return False

        if selector is None:
            del self._selectors[target_type]
            return True

        selectors = self._selectors[target_type]
        if selector not in selectors:
            return False
        selectors.remove(selector)
        if not selectors:
            del self._selectors[target_type]
        return True

    def clear(self) -> None:
        """Remove every registered selector."""
        self._selectors.clear()

    def registered_types(self) -> list[Any]:
        """List all types with at least one selector."""
        return list(self._selectors.keys())

    def __contains__(self, target_type: Any) -> bool:
        return target_type in self._selectors

    def __len__(self) -> int:
        """Return the total number of registered selectors."""
        return sum(len(selectors) for selectors in self._selectors.values())


def _produces(selector: TypeSelector, target_type: Any) -> bool:
    # checked on the declared target type; name-hint selectors refuse bare-type binds
    produced = selector.target_type
    if produced is Any:
        return True
    if isinstance(produced, type) and isinstance(target_type, type):
        return issubclass(target_type, produced)
    return produced == target_type


_global_table: TypeTable | None = None


def get_global_type_table() -> TypeTable:
    """Get the global type table singleton."""
    global _global_table
    if _global_table is None:
        _global_table = TypeTable()
    return _global_table
