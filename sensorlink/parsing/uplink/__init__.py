from sensorlink.parsing.uplink.decode import decode_uplink, parse_uplink_fields

__all__ = ["decode_uplink", "parse_uplink_fields"]
