"""
Structured values exchanged with the codec.

Python attributes are snake_case; the wire names used by network server
integrations (``pulseCounter``, ``fPort``, ...) are field aliases. A field
set to ``None`` is absent from the payload, which is distinct from zero.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class UplinkReading(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    temperature: Optional[float] = None
    humidity: Optional[float] = None
    pulse_counter: Optional[int] = Field(None, alias="pulseCounter")

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class DownlinkCommand(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    pulse_counter_threshold: Optional[int] = Field(None, alias="pulseCounterThreshold")
    alarm: Optional[bool] = None

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class EncodedDownlink(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: bytes = Field(alias="bytes")
    fport: int = Field(alias="fPort")

    def as_dict(self) -> Dict[str, Any]:
        return {"bytes": list(self.data), "fPort": self.fport}


class DataPoint(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_time: Any = Field(alias="eventTime")
    value: Any


class PointSet(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    temperature: Optional[DataPoint] = None
    humidity: Optional[DataPoint] = None
    pulse_counter: Optional[DataPoint] = Field(None, alias="pulseCounter")

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)
