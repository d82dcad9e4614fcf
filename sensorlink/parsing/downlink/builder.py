"""
Downlink payload builder.

Produces ``[0x00] [threshold]`` and ``[0x01] [0x00|0x01]`` fields in canonical
order, sent on fPort 16. Byte order of a previously decoded command is not
preserved.
"""
from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import ValidationError

from sensorlink.errors import CodecError, InvalidCommand, ValueOutOfRange
from sensorlink.logging import get_codec_logger
from sensorlink.models import DownlinkCommand, EncodedDownlink
from sensorlink.parsing.tlv import DOWNLINK_FPORT, TAG_ALARM, TAG_PULSE_COUNTER_THRESHOLD


def _coerce_command(command: Union[DownlinkCommand, Mapping[str, Any]]) -> DownlinkCommand:
    if isinstance(command, DownlinkCommand):
        return command
    try:
        return DownlinkCommand.model_validate(dict(command))
    except (ValidationError, TypeError, ValueError) as exc:
        raise InvalidCommand(f"Invalid downlink command: {exc}") from exc


def build_downlink_payload(command: DownlinkCommand) -> bytes:
    """
    Serialize a command into TLV bytes.

    Args:
        command: The command; unset fields produce no output.

    Returns:
        The encoded payload.

    Raises:
        ValueOutOfRange: The threshold does not fit in one byte.
    """
    buf = bytearray()
    threshold = command.pulse_counter_threshold
    if threshold is not None:
        if threshold < 0 or threshold > 0xFF:
            raise ValueOutOfRange("pulseCounterThreshold", threshold)
        buf.extend([TAG_PULSE_COUNTER_THRESHOLD, threshold])
    if command.alarm is not None:
        buf.extend([TAG_ALARM, 0x01 if command.alarm else 0x00])
    return bytes(buf)


def encode_downlink(command: Union[DownlinkCommand, Mapping[str, Any]]) -> EncodedDownlink:
    """
    Encode a downlink command for transmission.

    Args:
        command: A ``DownlinkCommand`` or a mapping using either wire names
            (``pulseCounterThreshold``) or attribute names. Unknown keys are
            ignored.

    Returns:
        The payload bytes together with the fixed fPort.

    Raises:
        ValueOutOfRange: The threshold does not fit in one byte.
        InvalidCommand: A known field holds a value of the wrong type.
    """
    logger = get_codec_logger()
    try:
        cmd = _coerce_command(command)
        data = build_downlink_payload(cmd)
    except CodecError as exc:
        logger.warning("downlink_encode_rejected", extra={"details": {"error": str(exc)}})
        raise

    logger.debug("downlink_encoded", extra={"details": {"payload": data.hex(), "fport": DOWNLINK_FPORT}})
    return EncodedDownlink(data=data, fport=DOWNLINK_FPORT)
