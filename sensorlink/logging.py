import logging
import threading
from collections import deque
from functools import lru_cache
from typing import Deque, Dict, List, Optional, Union

from sensorlink.config import get_settings

CODEC_LOGGER_NAME = "sensorlink.codec"


class RingBufferHandler(logging.Handler):
    """Keeps the most recent codec events in memory as plain dicts."""

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        return self._events.maxlen

    def emit(self, record: logging.LogRecord) -> None:
        with self._lock:
            self._events.append(
                {
                    "event": record.getMessage(),
                    "logger": record.name,
                    "level": record.levelname,
                    "ts": record.created,
                    "details": getattr(record, "details", {}),
                }
            )

    def get_events(self, clear: bool = False) -> List[Dict]:
        with self._lock:
            events = list(self._events)
            if clear:
                self._events.clear()
        return events


def create_logger(name: str, ring_size: int, level: Union[int, str] = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


@lru_cache
def get_codec_logger() -> logging.Logger:
    settings = get_settings()
    return create_logger(CODEC_LOGGER_NAME, settings.log_ring_size, settings.log_level)


def _ring_buffer() -> Optional[RingBufferHandler]:
    for handler in get_codec_logger().handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def recent_events(clear: bool = False) -> List[Dict]:
    handler = _ring_buffer()
    return handler.get_events(clear=clear) if handler else []


def clear_events() -> None:
    recent_events(clear=True)
