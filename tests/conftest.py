import logging

import pytest

from sensorlink.config import CodecSettings
from sensorlink.logging import clear_events, get_codec_logger


@pytest.fixture
def codec_events():
    """Record every codec log event, including debug ones, for one test."""
    logger = get_codec_logger()
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    clear_events()
    try:
        yield
    finally:
        logger.setLevel(previous)
        clear_events()


@pytest.fixture
def permissive_settings():
    return CodecSettings(strict_pulse_counter=False)
