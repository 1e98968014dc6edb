# faultphasor/__init__.py
"""Cursor value and phasor engine for power-system disturbance recordings."""

import logging

from .config import EngineConfig, DEFAULT_CONFIG
from .core import Channel, ChannelMeta, RateSegment, Recording, RecordingMeta, Selector
from .engine import ValueFormatter, ValueResult, values_at, current_value

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "EngineConfig",
    "DEFAULT_CONFIG",
    "Channel",
    "ChannelMeta",
    "RateSegment",
    "Recording",
    "RecordingMeta",
    "Selector",
    "ValueFormatter",
    "ValueResult",
    "values_at",
    "current_value",
]
