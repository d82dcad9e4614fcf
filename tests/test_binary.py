"""Tests for the binary helpers (signed words, payload conversion)."""
import base64

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sensorlink.core.binary import as_payload, payload_from_b64, payload_from_hex, read_short, read_word
from sensorlink.errors import InvalidPayload


@pytest.mark.parametrize(
    "value, expected",
    [
        (0x0000, 0),
        (0x0001, 1),
        (0x09C4, 2500),
        (0x7FFF, 32767),
        (0x8000, -32768),
        (0xFF9C, -100),
        (0xFFFF, -1),
    ],
)
def test_read_short_known_values(value, expected):
    assert read_short(value) == expected


@given(st.integers(min_value=0, max_value=0xFFFF))
def test_read_short_twos_complement(value):
    result = read_short(value)
    if value < 0x8000:
        assert result == value
    else:
        assert result == value - 0x10000
    assert -32768 <= result <= 32767


def test_read_word_is_big_endian():
    assert read_word(bytes([0x00, 0x09, 0xC4]), 1) == 0x09C4


def test_as_payload_accepts_bytes_and_int_lists():
    assert as_payload(b"\x02\x2a") == b"\x02\x2a"
    assert as_payload(bytearray([0x02, 0x2A])) == b"\x02\x2a"
    assert as_payload([0x02, 0x2A]) == b"\x02\x2a"
    assert as_payload(()) == b""


@pytest.mark.parametrize("bad", [[0x00, 256], [-1], [1.5], "0209", 5])
def test_as_payload_rejects_non_bytes(bad):
    with pytest.raises(InvalidPayload):
        as_payload(bad)


def test_payload_from_hex_ignores_whitespace():
    assert payload_from_hex("00 09c4\n02 2a") == bytes([0x00, 0x09, 0xC4, 0x02, 0x2A])


def test_payload_from_hex_invalid():
    with pytest.raises(InvalidPayload):
        payload_from_hex("0g")


def test_payload_from_b64_restores_padding():
    raw = bytes([0x00, 0x09, 0xC4, 0x02])
    encoded = base64.b64encode(raw).decode().rstrip("=")
    assert payload_from_b64(encoded) == raw


def test_payload_from_b64_invalid():
    with pytest.raises(InvalidPayload):
        payload_from_b64("not-base64!!!")


def test_payload_from_b64_non_ascii():
    with pytest.raises(InvalidPayload):
        payload_from_b64("AAké")
