"""Constructor discovery and guarded invocation.

Python classes have a single ``__init__``, so "overloads" are the class
itself plus any public alternate-constructor classmethods annotated to
return the class (``Money.zero() -> "Money"``).
"""

import inspect
import logging
import typing
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from object_faker.schemas.introspect import describe_type

logger = logging.getLogger(__name__)


class MatchResult(BaseModel):
    """Outcome of a whole-object selector lookup."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: Any = Field(default=None, description="The replacement value, if matched")
    matched: bool = Field(default=False, description="Whether a selector was applied")


class ConstructionResult(BaseModel):
    """Outcome of a constructor invocation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    instance: Any = Field(default=None, description="The constructed instance")
    ok: bool = Field(default=False, description="Whether construction succeeded")
    error: str | None = Field(default=None, description="Failure description")


class Constructor:
    """A callable that builds instances of a type, with its signature."""

    def __init__(self, factory: Callable[..., Any], signature: inspect.Signature, owner: type):
        self.factory = factory
        self.signature = signature
        self.owner = owner
        self._hints = _constructor_hints(factory, owner)

    @property
    def parameters(self) -> list[inspect.Parameter]:
        """Parameters that need a value (``*args``/``**kwargs`` excluded)."""
        return [
            p for p in self.signature.parameters.values()
            if p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        ]

    def annotation(self, parameter: inspect.Parameter) -> Any:
        """Resolved annotation of a parameter (``Any`` when unknown)."""
        annotation = parameter.annotation
        if annotation is inspect.Parameter.empty or isinstance(annotation, str):
            return self._hints.get(parameter.name, Any)
        return annotation

    def __repr__(self) -> str:
        return f"Constructor({getattr(self.factory, '__qualname__', self.factory)}{self.signature})"


def _constructor_hints(factory: Callable[..., Any], owner: type) -> dict[str, Any]:
    hints: dict[str, Any] = {
        field.name: field.field_type for field in describe_type(owner)
    }
    target = owner.__init__ if factory is owner else factory
    try:
        hints.update(typing.get_type_hints(target))
    except Exception as e:
        logger.debug("Could not resolve constructor annotations of %r: %s", target, e)
    return hints


def _signature(factory: Callable[..., Any]) -> inspect.Signature | None:
    try:
        return inspect.signature(factory)
    except (ValueError, TypeError):
        return None


def _alternate_constructors(tp: type) -> list[Callable[..., Any]]:
    factories = []
    for name, member in vars(tp).items():
        if name.startswith("_") or not isinstance(member, classmethod):
            continue
        bound = getattr(tp, name)
        try:
            returns = typing.get_type_hints(bound).get("return")
        except Exception:
            returns = None
        if returns is tp:
            factories.append(bound)
    return factories


def get_simplest_constructor(tp: type) -> Constructor | None:
    """Pick the public constructor with the fewest parameters.

    Ties go to the class itself, then to classmethods in definition order.

    Returns:
        The chosen constructor, or None if no signature can be read
    """
    candidates = []
    for factory in [tp, *_alternate_constructors(tp)]:
        signature = _signature(factory)
        if signature is not None:
            candidates.append(Constructor(factory, signature, tp))

    if not candidates:
        return None
    return min(candidates, key=lambda c: len(c.parameters))


def try_construct(
    factory: Callable[..., Any],
    args: list[Any] | None = None,
    kwargs: dict[str, Any] | None = None,
) -> ConstructionResult:
    """Invoke a constructor, capturing any failure in the result."""
    try:
        instance = factory(*(args or []), **(kwargs or {}))
    except Exception as e:
        return ConstructionResult(ok=False, error=f"{type(e).__name__}: {e}")
    return ConstructionResult(instance=instance, ok=True)
