from __future__ import annotations

import datetime as dt
from typing import Any, Mapping, Union

from sensorlink.models import DataPoint, PointSet, UplinkReading

# Point attribute name -> wire name of the reading field it is taken from.
_POINT_FIELDS: dict[str, str] = {
    "temperature": "temperature",
    "humidity": "humidity",
    "pulse_counter": "pulseCounter",
}


def _reading_values(reading: Union[UplinkReading, Mapping[str, Any]]) -> dict[str, Any]:
    if isinstance(reading, UplinkReading):
        return {name: getattr(reading, name) for name in _POINT_FIELDS}
    values: dict[str, Any] = {}
    for name, wire_name in _POINT_FIELDS.items():
        values[name] = reading[wire_name] if wire_name in reading else reading.get(name)
    return values


def extract_points(
    reading: Union[UplinkReading, Mapping[str, Any]],
    event_time: Any = None,
) -> PointSet:
    """
    Pair every field present in a decoded uplink with an event time.

    Mapping values are copied as they are, without type coercion.

    Args:
        reading: The decoded reading, as a model or a mapping keyed by wire
            names (``pulseCounter``) or attribute names (``pulse_counter``).
        event_time: Passed through unchanged; defaults to the current UTC time.

    Returns:
        A ``PointSet`` with one ``DataPoint`` per present field.
    """
    if event_time is None:
        event_time = dt.datetime.now(dt.UTC)

    points: dict[str, DataPoint] = {}
    for name, value in _reading_values(reading).items():
        if value is not None:
            points[name] = DataPoint(event_time=event_time, value=value)
    return PointSet(**points)
