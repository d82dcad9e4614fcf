"""
Exceptions raised by the sensorlink codec.

Every error aborts the decode or encode call that raised it; no partial
results are returned. All of them are ``ValueError`` subclasses so callers
rejecting malformed device payloads can catch a single type.
"""
from __future__ import annotations


class CodecError(ValueError):
    """Base class for every codec failure."""


class InvalidPayload(CodecError):
    """The input could not be interpreted as a sequence of bytes."""


class PayloadTooLarge(CodecError):
    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Invalid uplink payload: length {length} exceeds {limit} bytes")


class TruncatedField(CodecError):
    def __init__(self, field: str, direction: str = "uplink") -> None:
        self.field = field
        self.direction = direction
        super().__init__(f"Invalid {direction} payload: index out of bounds when reading {field}")


class UnknownFieldTag(CodecError):
    def __init__(self, tag: int, direction: str = "uplink") -> None:
        self.tag = tag
        self.direction = direction
        super().__init__(f"Invalid {direction} payload: unknown id '{tag}' (0x{tag:02x})")


class ValueOutOfRange(CodecError):
    def __init__(self, field: str, value: int, low: int = 0, high: int = 255) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid downlink: {field} must be between {low} and {high}, got {value}")


class InvalidCommand(CodecError):
    """The downlink command mapping failed validation."""
