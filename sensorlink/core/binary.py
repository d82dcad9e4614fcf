from __future__ import annotations

import base64
from typing import Iterable

from sensorlink.errors import InvalidPayload


def read_short(value: int) -> int:
    """
    Reinterpret a 16-bit unsigned word as a two's-complement signed integer.

    Args:
        value: The word, high-order byte first (0..65535).

    Returns:
        The signed value in the range -32768..32767.
    """
    result = value & 0xFFFF
    if result & 0x8000:
        result -= 0x10000
    return result


def read_word(data: bytes, index: int) -> int:
    return (data[index] << 8) | data[index + 1]


def as_payload(data: Iterable[int] | bytes) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (str, int)):
        raise InvalidPayload(f"Payload must be bytes or a sequence of ints, not {type(data).__name__}")
    try:
        return bytes(data)
    except (TypeError, ValueError) as exc:
        raise InvalidPayload(f"Payload is not a byte sequence: {exc}") from exc


def payload_from_hex(hex_data: str) -> bytes:
    cleaned = "".join(hex_data.split())
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise InvalidPayload(f"Failed to decode hex payload: {exc}") from exc


def payload_from_b64(b64_data: str) -> bytes:
    cleaned = "".join(b64_data.split())
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(cleaned, validate=True)
    except ValueError as exc:
        raise InvalidPayload(f"Failed to decode base64 payload: {exc}") from exc
