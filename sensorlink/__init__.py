from sensorlink.config import CodecSettings, get_settings
from sensorlink.core.binary import payload_from_b64, payload_from_hex, read_short
from sensorlink.errors import (
    CodecError,
    InvalidCommand,
    InvalidPayload,
    PayloadTooLarge,
    TruncatedField,
    UnknownFieldTag,
    ValueOutOfRange,
)
from sensorlink.models import DataPoint, DownlinkCommand, EncodedDownlink, PointSet, UplinkReading
from sensorlink.parsing.downlink import decode_downlink, encode_downlink
from sensorlink.parsing.points import extract_points
from sensorlink.parsing.uplink import decode_uplink
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "decode_uplink",
    "decode_downlink",
    "encode_downlink",
    "extract_points",
    "read_short",
    "payload_from_hex",
    "payload_from_b64",
    "UplinkReading",
    "DownlinkCommand",
    "EncodedDownlink",
    "DataPoint",
    "PointSet",
    "CodecSettings",
    "get_settings",
    "CodecError",
    "InvalidCommand",
    "InvalidPayload",
    "PayloadTooLarge",
    "TruncatedField",
    "UnknownFieldTag",
    "ValueOutOfRange",
]

try:
    __version__ = version("sensorlink")
except PackageNotFoundError:
    __version__ = "0.0.0"
