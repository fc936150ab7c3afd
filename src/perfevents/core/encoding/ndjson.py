"""NDJSON encoder for recorded event payloads."""

import json
from collections.abc import Iterable, Mapping


def encode_payloads(payloads: Iterable[Mapping[str, str]]) -> str:
    """Encode payload maps to newline-delimited JSON.

    Args:
        payloads: An iterable of payload maps as given to a sink.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no payloads.
    """
    lines = [
        json.dumps(dict(payload), separators=(",", ":"), ensure_ascii=False)
        for payload in payloads
    ]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
