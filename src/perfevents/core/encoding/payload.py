"""JSON encoder for attribute lists and the two-key event payload.

Each list is encoded as a compact JSON array of ``{"name", "value"}``
objects. The payload handed to a sink is a flat map holding the two
encoded arrays under ``"attributes"`` and ``"counters"``.
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any

from perfevents.core.exceptions import PayloadDecodeError
from perfevents.core.models import (
    ATTRIBUTES_KEY,
    COUNTERS_KEY,
    Attribute,
    PerformanceEvent,
)

_SEPARATORS = (",", ":")


def _reject_constant(token: str) -> Any:
    raise PayloadDecodeError(f"attribute list contains non-JSON constant {token}")


def encode_attributes(attributes: Iterable[Attribute[Any]]) -> str:
    """Encode attributes to a JSON array, preserving order.

    Args:
        attributes: Attributes to encode. Validation is the caller's job;
            PerformanceEvent does it on construction.

    Returns:
        Compact JSON text, e.g. ``[{"name":"frames","value":362}]``.
    """
    items = [{"name": attr.name, "value": attr.value} for attr in attributes]
    return json.dumps(
        items,
        separators=_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    )


def decode_attributes(text: str) -> list[Attribute[Any]]:
    """Decode a JSON array produced by encode_attributes.

    Args:
        text: JSON array of ``{"name", "value"}`` objects.

    Returns:
        Attributes in the order they appear in the array.

    Raises:
        PayloadDecodeError: If the text is not such an array.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (TypeError, json.JSONDecodeError) as exc:
        raise PayloadDecodeError(f"attribute list is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise PayloadDecodeError(
            f"attribute list must be a JSON array, got {type(data).__name__}"
        )

    result: list[Attribute[Any]] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or set(item) != {"name", "value"}:
            raise PayloadDecodeError(
                f"element {index} must be an object with name and value"
            )
        name = item["name"]
        if not isinstance(name, str) or not name:
            raise PayloadDecodeError(f"element {index} has an invalid name {name!r}")
        result.append(Attribute(name, item["value"]))
    return result


def encode_payload(event: PerformanceEvent) -> dict[str, str]:
    """Encode an event to the carrier map handed to a telemetry sink.

    Returns:
        A new dict with exactly the keys "attributes" and "counters".
    """
    return {
        ATTRIBUTES_KEY: encode_attributes(event.attributes),
        COUNTERS_KEY: encode_attributes(event.counters),
    }


def decode_payload(payload: Mapping[str, str]) -> PerformanceEvent:
    """Decode a carrier map back into a PerformanceEvent.

    Raises:
        PayloadDecodeError: If the map does not hold exactly the two keys
            or either value cannot be decoded.
        AttributeValidationError: If the decoded values have the wrong kind.
    """
    keys = set(payload)
    if keys != {ATTRIBUTES_KEY, COUNTERS_KEY}:
        raise PayloadDecodeError(
            f"payload must have keys {ATTRIBUTES_KEY!r} and {COUNTERS_KEY!r}, "
            f"got {sorted(keys)}"
        )
    return PerformanceEvent(
        attributes=tuple(decode_attributes(payload[ATTRIBUTES_KEY])),
        counters=tuple(decode_attributes(payload[COUNTERS_KEY])),
    )
