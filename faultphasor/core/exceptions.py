# faultphasor/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all core-domain exceptions."""


# ---- Validation / construction errors ----
class InvalidChannel(CoreError):
    """Raised when a Channel / ChannelMeta is constructed with invalid inputs."""


class InvalidRateSegment(CoreError):
    """Raised when a RateSegment is constructed with invalid inputs."""


class InvalidRecording(CoreError):
    """Raised when a Recording / RecordingMeta is constructed with invalid inputs."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class ChannelNotFound(CoreError, KeyError):
    """Raised when a requested channel name is not present."""
