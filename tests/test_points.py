"""Tests for projecting decoded readings into data points."""
import datetime as dt

from sensorlink import decode_uplink, extract_points
from sensorlink.models import UplinkReading

T = dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.timezone.utc)


def test_extract_present_fields_only():
    points = extract_points({"temperature": 25.0, "pulseCounter": 42}, T)
    assert points.as_dict() == {
        "temperature": {"eventTime": T, "value": 25.0},
        "pulseCounter": {"eventTime": T, "value": 42},
    }
    assert points.humidity is None


def test_values_are_unchanged():
    points = extract_points(UplinkReading(humidity=-1.0, pulse_counter=0), T)
    assert points.humidity.value == -1.0
    assert points.pulse_counter.value == 0
    assert isinstance(points.pulse_counter.value, int)


def test_event_time_passed_through():
    points = extract_points({"humidity": 40.0}, "2024-05-01T12:00:00Z")
    assert points.humidity.event_time == "2024-05-01T12:00:00Z"


def test_empty_reading():
    assert extract_points(UplinkReading(), T).as_dict() == {}


def test_default_event_time_is_now():
    before = dt.datetime.now(dt.UTC)
    points = extract_points({"temperature": 1.0})
    assert points.temperature.event_time >= before


def test_decoded_uplink_to_points():
    reading = decode_uplink([0x00, 0x09, 0xC4, 0x01, 0xFF, 0x9C, 0x02, 0x2A])
    points = extract_points(reading, T)
    assert points.as_dict() == {
        "temperature": {"eventTime": T, "value": 25.0},
        "humidity": {"eventTime": T, "value": -1.0},
        "pulseCounter": {"eventTime": T, "value": 42},
    }


def test_mapping_values_are_not_validated():
    points = extract_points({"pulseCounter": 42.5, "humidity": "n/a"}, "t")
    assert points.pulse_counter.value == 42.5
    assert points.humidity.value == "n/a"


def test_mapping_value_type_is_kept():
    points = extract_points({"temperature": 25}, T)
    assert type(points.temperature.value) is int


def test_mapping_with_attribute_names():
    points = extract_points({"pulse_counter": 7}, T)
    assert points.as_dict() == {"pulseCounter": {"eventTime": T, "value": 7}}
