"""
Tag tables for the sensor TLV grammar.

Every field starts with a one-byte tag; the value width is implied by the
tag, never stored in the payload.
"""
from __future__ import annotations

# Uplink tags (device -> network).
TAG_TEMPERATURE = 0x00
TAG_HUMIDITY = 0x01
TAG_PULSE_COUNTER = 0x02

# Downlink tags (network -> device).
TAG_PULSE_COUNTER_THRESHOLD = 0x00
TAG_ALARM = 0x01

# Uplink tag -> (wire field name, value width in bytes).
UPLINK_FIELDS: dict[int, tuple[str, int]] = {
    TAG_TEMPERATURE: ("temperature", 2),
    TAG_HUMIDITY: ("humidity", 2),
    TAG_PULSE_COUNTER: ("pulseCounter", 1),
}

# Downlink tag -> wire field name. Every downlink value is one byte wide.
DOWNLINK_FIELDS: dict[int, str] = {
    TAG_PULSE_COUNTER_THRESHOLD: "pulseCounterThreshold",
    TAG_ALARM: "alarm",
}

# Canonical order used when encoding downlinks.
DOWNLINK_ORDER: list[int] = [TAG_PULSE_COUNTER_THRESHOLD, TAG_ALARM]

UPLINK_MAX_LENGTH = 8
DOWNLINK_FPORT = 16
DOWNLINK_STRIDE = 2

# Fixed-point scale for 2-byte signed values (two implied fractional digits).
FIXED_POINT_SCALE = 100
