"""
This package contains the payload codecs for the sensor protocol.

Sub-packages handle specific directions:

- ``tlv``: Tag tables and protocol constants.
- ``uplink``: Sensor reading decoding.
- ``downlink``: Control command decoding and encoding.
- ``points``: Projection of decoded readings into timestamped data points.
"""
