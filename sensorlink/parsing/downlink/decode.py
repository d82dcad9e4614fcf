from __future__ import annotations

from typing import Any, Iterable

from sensorlink.core.binary import as_payload
from sensorlink.errors import CodecError, TruncatedField, UnknownFieldTag
from sensorlink.logging import get_codec_logger
from sensorlink.models import DownlinkCommand
from sensorlink.parsing.tlv import DOWNLINK_FIELDS, DOWNLINK_STRIDE, TAG_ALARM


def parse_downlink_fields(data: bytes) -> dict[str, Any]:
    """
    Decode a downlink byte stream into a mapping of wire field name -> value.

    Fields are read in fixed two-byte strides (tag, value).
    """
    fields: dict[str, Any] = {}
    for i in range(0, len(data), DOWNLINK_STRIDE):
        tag = data[i]
        if tag not in DOWNLINK_FIELDS:
            raise UnknownFieldTag(tag, direction="downlink")
        name = DOWNLINK_FIELDS[tag]
        if i + 1 >= len(data):
            raise TruncatedField(name, direction="downlink")
        value = data[i + 1]
        fields[name] = value == 1 if tag == TAG_ALARM else value
    return fields


def decode_downlink(payload: Iterable[int] | bytes) -> DownlinkCommand:
    """
    Decode a raw downlink payload into a ``DownlinkCommand``.

    Raises:
        TruncatedField: The last tag has no value byte.
        UnknownFieldTag: The payload contains an unrecognized tag.
        InvalidPayload: ``payload`` is not a byte sequence.
    """
    logger = get_codec_logger()
    data = as_payload(payload)
    try:
        fields = parse_downlink_fields(data)
    except CodecError as exc:
        logger.warning("downlink_rejected", extra={"details": {"payload": data.hex(), "error": str(exc)}})
        raise

    logger.debug("downlink_decoded", extra={"details": {"payload": data.hex(), "fields": sorted(fields)}})
    return DownlinkCommand.model_validate(fields)
