"""Encoders for performance event payloads."""

from perfevents.core.encoding.ndjson import encode_payloads
from perfevents.core.encoding.payload import (
    decode_attributes,
    decode_payload,
    encode_attributes,
    encode_payload,
)

__all__ = [
    "decode_attributes",
    "decode_payload",
    "encode_attributes",
    "encode_payload",
    "encode_payloads",
]
