from sensorlink.core.binary import as_payload, payload_from_b64, payload_from_hex, read_short, read_word

__all__ = ["as_payload", "payload_from_b64", "payload_from_hex", "read_short", "read_word"]
