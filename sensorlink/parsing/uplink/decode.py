"""
Decoder for sensor uplink payloads.

An uplink is at most 8 bytes of concatenated TLV fields, in any order:
``[0x00] [hi] [lo]`` temperature, ``[0x01] [hi] [lo]`` humidity (both signed
16-bit big-endian in hundredths) and ``[0x02] [value]`` pulse counter.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

from sensorlink.config import CodecSettings, get_settings
from sensorlink.core.binary import as_payload, read_short, read_word
from sensorlink.errors import CodecError, PayloadTooLarge, TruncatedField, UnknownFieldTag
from sensorlink.logging import get_codec_logger
from sensorlink.models import UplinkReading
from sensorlink.parsing.tlv import (
    FIXED_POINT_SCALE,
    TAG_HUMIDITY,
    TAG_PULSE_COUNTER,
    TAG_TEMPERATURE,
    UPLINK_FIELDS,
    UPLINK_MAX_LENGTH,
)


def parse_uplink_fields(data: bytes, strict_pulse_counter: bool = True) -> dict[str, Any]:
    """
    Scan an uplink byte stream into a mapping of wire field name -> value.

    A field repeated later in the payload overwrites the earlier value.

    Args:
        data: Raw uplink bytes, already length-checked.
        strict_pulse_counter: Whether a pulse counter tag without its value
            byte is an error. When ``False`` the field is left out and the
            scan ends.

    Returns:
        A dict holding only the fields present in ``data``.

    Raises:
        TruncatedField: A field needs bytes beyond the end of ``data``.
        UnknownFieldTag: A tag byte is not part of the uplink grammar.
    """
    fields: dict[str, Any] = {}
    i = 0
    while i < len(data):
        tag = data[i]
        if tag not in UPLINK_FIELDS:
            raise UnknownFieldTag(tag, direction="uplink")
        name, width = UPLINK_FIELDS[tag]
        if i + width >= len(data):
            if tag == TAG_PULSE_COUNTER and not strict_pulse_counter:
                break
            raise TruncatedField(name, direction="uplink")

        if tag in (TAG_TEMPERATURE, TAG_HUMIDITY):
            fields[name] = read_short(read_word(data, i + 1)) / FIXED_POINT_SCALE
        else:
            fields[name] = data[i + 1]
        i += 1 + width
    return fields


def decode_uplink(
    payload: Iterable[int] | bytes,
    settings: Optional[CodecSettings] = None,
) -> UplinkReading:
    """
    Decode a raw uplink payload into an ``UplinkReading``.

    Args:
        payload: The uplink bytes, or a sequence of ints in 0..255.
        settings: Overrides the cached ``CodecSettings``.

    Returns:
        The reading with only the fields present in the payload set.

    Raises:
        PayloadTooLarge: The payload is longer than 8 bytes.
        TruncatedField: A field is cut off by the end of the payload.
        UnknownFieldTag: The payload contains an unrecognized tag.
        InvalidPayload: ``payload`` is not a byte sequence.
    """
    settings = settings or get_settings()
    logger = get_codec_logger()
    data = as_payload(payload)
    try:
        if len(data) > UPLINK_MAX_LENGTH:
            raise PayloadTooLarge(len(data), UPLINK_MAX_LENGTH)
        fields = parse_uplink_fields(data, strict_pulse_counter=settings.strict_pulse_counter)
    except CodecError as exc:
        logger.warning("uplink_rejected", extra={"details": {"payload": data.hex(), "error": str(exc)}})
        raise

    logger.debug("uplink_decoded", extra={"details": {"payload": data.hex(), "fields": sorted(fields)}})
    return UplinkReading.model_validate(fields)
