# faultphasor/engine/window.py
from __future__ import annotations

import math

import numpy as np

from faultphasor.core.channel import Channel


def window_length(samples_per_cycle: int, factor: float = 1.5) -> int:
    """Number of samples extracted for one analysis window."""
    return int(math.ceil(samples_per_cycle * factor))


def extract_window(
    channel: Channel,
    start: int,
    samples_per_cycle: int,
    *,
    factor: float = 1.5,
) -> np.ndarray:
    """
    Calibrated samples `start, start + 1, ...` of `channel`.

    Reads past the end repeat the last sample; a negative start reads from
    sample 0. The channel must hold at least one sample.
    """
    length = window_length(samples_per_cycle, factor)
    idx = np.clip(np.arange(start, start + length), 0, channel.n - 1)
    raw = channel.samples[idx].astype(np.float64)
    return raw * channel.multiplier + channel.offset
