from sensorlink.parsing.downlink.builder import build_downlink_payload, encode_downlink
from sensorlink.parsing.downlink.decode import decode_downlink, parse_downlink_fields

__all__ = ["build_downlink_payload", "decode_downlink", "encode_downlink", "parse_downlink_fields"]
