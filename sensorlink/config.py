from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CodecSettings(BaseSettings):
    # Reject an uplink pulse counter tag with no value byte instead of leaving the field unset.
    strict_pulse_counter: bool = Field(True, validation_alias="SENSORLINK_STRICT_PULSE_COUNTER")

    log_level: LogLevel = Field("WARNING", validation_alias="SENSORLINK_LOG_LEVEL")
    log_ring_size: int = Field(200, gt=0, validation_alias="SENSORLINK_LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> CodecSettings:
    return CodecSettings()
