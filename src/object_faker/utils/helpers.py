"""Utility helper functions."""

import dataclasses
import enum
import importlib
import random
import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any

from pydantic import BaseModel


def generate_seed() -> int:
    """Generate a random seed value."""
    return random.randint(0, 2**31 - 1)


def load_target(reference: str) -> Any:
    """Import an object from a ``package.module:Name`` reference.

    Dotted attribute paths after the colon are followed
    (``models:Outer.Inner``).

    Raises:
        ValueError: If the reference is malformed or cannot be resolved
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected 'module:Name', got '{reference}'")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import module '{module_name}': {e}") from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ValueError(f"'{module_name}' has no attribute '{attr_path}'") from e
    return target


def to_primitive(value: Any) -> Any:
    """Convert a populated object graph into JSON-friendly values.

    Args:
        value: Any generated value

    Returns:
        Nested dicts, lists, strings and numbers
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, enum.Enum):
        return to_primitive(value.value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, (Decimal, uuid.UUID)):
        return str(value)
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, BaseModel):
        return {k: to_primitive(getattr(value, k)) for k in type(value).model_fields}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_primitive(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return {k: to_primitive(getattr(value, k)) for k in value._fields}
    if isinstance(value, dict):
        return {str(k): to_primitive(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)) or hasattr(value, "__iter__"):
        return [to_primitive(v) for v in value]
    if hasattr(value, "__dict__"):
        return {k: to_primitive(v) for k, v in vars(value).items() if not k.startswith("_")}
    return str(value)
