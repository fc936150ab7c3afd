"""Core domain models for performance events."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from perfevents.core.exceptions import AttributeValidationError

ATTRIBUTES_KEY = "attributes"
COUNTERS_KEY = "counters"

T = TypeVar("T")

Number = int | float


@dataclass(frozen=True)
class Attribute(Generic[T]):
    """A named value sent as performance metadata.

    Attributes:
        name: Identifier, unique within its containing list.
        value: Text for attributes, a number for counters.
    """

    name: str
    value: T


def _check_names(attributes: tuple[Attribute[Any], ...], kind: str) -> None:
    seen: set[str] = set()
    for attr in attributes:
        if not isinstance(attr, Attribute):
            raise AttributeValidationError(
                f"{kind} entries must be Attribute, got {type(attr).__name__}"
            )
        if not isinstance(attr.name, str) or not attr.name:
            raise AttributeValidationError(
                f"{kind} name must be a non-empty string, got {attr.name!r}"
            )
        if attr.name in seen:
            raise AttributeValidationError(f"duplicate {kind} name {attr.name!r}")
        seen.add(attr.name)


def validate_attributes(
    attributes: Iterable[Attribute[str]],
) -> tuple[Attribute[str], ...]:
    """Validate a list of text attributes.

    Args:
        attributes: Attributes with string values.

    Returns:
        The attributes as a tuple, in input order.

    Raises:
        AttributeValidationError: On a bad name or a non-string value.
    """
    result = tuple(attributes)
    _check_names(result, "attribute")
    for attr in result:
        if not isinstance(attr.value, str):
            raise AttributeValidationError(
                f"attribute {attr.name!r} must have a str value, "
                f"got {type(attr.value).__name__}"
            )
    return result


def validate_counters(
    counters: Iterable[Attribute[Number]],
) -> tuple[Attribute[Number], ...]:
    """Validate a list of numeric counters.

    Booleans are rejected even though they are ints, and so are NaN and
    infinities, which JSON cannot carry.

    Args:
        counters: Attributes with int or float values.

    Returns:
        The counters as a tuple, in input order.

    Raises:
        AttributeValidationError: On a bad name or a non-numeric value.
    """
    result = tuple(counters)
    _check_names(result, "counter")
    for attr in result:
        value = attr.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise AttributeValidationError(
                f"counter {attr.name!r} must have an int or float value, "
                f"got {type(value).__name__}"
            )
        if isinstance(value, float) and not math.isfinite(value):
            raise AttributeValidationError(
                f"counter {attr.name!r} must be finite, got {value!r}"
            )
    return result


def _to_attributes(
    pairs: Mapping[str, T] | Iterable[tuple[str, T]],
) -> list[Attribute[T]]:
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    return [Attribute(name, value) for name, value in items]


@dataclass(frozen=True)
class PerformanceEvent:
    """A performance event: text attributes plus numeric counters.

    Both sequences keep their input order and are validated on
    construction.

    Attributes:
        attributes: Attributes with string values.
        counters: Attributes with int or float values.
    """

    attributes: tuple[Attribute[str], ...] = field(default_factory=tuple)
    counters: tuple[Attribute[Number], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # frozen, so bypass __setattr__ to normalise lists into tuples
        object.__setattr__(self, "attributes", validate_attributes(self.attributes))
        object.__setattr__(self, "counters", validate_counters(self.counters))

    @classmethod
    def from_pairs(
        cls,
        attributes: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        counters: Mapping[str, Number] | Iterable[tuple[str, Number]] = (),
    ) -> "PerformanceEvent":
        """Build an event from plain (name, value) pairs or mappings."""
        return cls(
            attributes=tuple(_to_attributes(attributes)),
            counters=tuple(_to_attributes(counters)),
        )
