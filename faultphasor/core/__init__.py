# faultphasor/core/__init__.py
"""
Core domain objects for faultphasor.

This module defines the read-only recording model:
- Channel: one analog track (raw samples + calibration, skew, ratio)
- RateSegment: one entry of the multi-rate sample table
- Recording: ordered channels sharing one time base and rate table

The core layer is independent from file formats and from the value engine.
"""

from .channel import Channel
from .rates import RateSegment, cycle_length, time_axis, validate_segments
from .recording import Recording
from .metadata import ChannelMeta, RecordingMeta, Selector
from .exceptions import (
    CoreError,
    InvalidChannel,
    InvalidRateSegment,
    InvalidRecording,
    ChannelNotFound,
)


__all__ = [
    # domain objects
    "Channel",
    "RateSegment",
    "Recording",

    # rate table helpers
    "cycle_length",
    "time_axis",
    "validate_segments",

    # metadata
    "ChannelMeta",
    "RecordingMeta",
    "Selector",

    # exceptions
    "CoreError",
    "InvalidChannel",
    "InvalidRateSegment",
    "InvalidRecording",
    "ChannelNotFound",
]
