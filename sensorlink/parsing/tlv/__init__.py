"""
TLV (Tag-Length-Value) grammar for the sensor uplink and downlink payloads.

This sub-package holds the tag tables and protocol constants shared by the
uplink decoder and the downlink codec.
"""
from sensorlink.parsing.tlv.tables import (
    DOWNLINK_FIELDS,
    DOWNLINK_FPORT,
    DOWNLINK_ORDER,
    DOWNLINK_STRIDE,
    FIXED_POINT_SCALE,
    TAG_ALARM,
    TAG_HUMIDITY,
    TAG_PULSE_COUNTER,
    TAG_PULSE_COUNTER_THRESHOLD,
    TAG_TEMPERATURE,
    UPLINK_FIELDS,
    UPLINK_MAX_LENGTH,
)

__all__ = [
    "DOWNLINK_FIELDS",
    "DOWNLINK_FPORT",
    "DOWNLINK_ORDER",
    "DOWNLINK_STRIDE",
    "FIXED_POINT_SCALE",
    "TAG_ALARM",
    "TAG_HUMIDITY",
    "TAG_PULSE_COUNTER",
    "TAG_PULSE_COUNTER_THRESHOLD",
    "TAG_TEMPERATURE",
    "UPLINK_FIELDS",
    "UPLINK_MAX_LENGTH",
]
