# faultphasor/core/rates.py
"""
Sampling-rate table of a recording.

A recording may switch sampling rate mid-way; each RateSegment says
"samples with index < end (and >= previous end) were taken at `rate`".
"""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .exceptions import InvalidRateSegment

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RateSegment:
    rate: float
    end: int

    def __post_init__(self) -> None:
        if isinstance(self.rate, bool) or not isinstance(self.rate, numbers.Real):
            raise InvalidRateSegment(f"RateSegment.rate must be a number, got {self.rate!r}.")
        if not math.isfinite(self.rate):
            raise InvalidRateSegment(f"RateSegment.rate must be finite, got {self.rate!r}.")
        if isinstance(self.end, bool) or not isinstance(self.end, numbers.Integral):
            raise InvalidRateSegment(f"RateSegment.end must be an integer, got {self.end!r}.")
        if self.end < 0:
            raise InvalidRateSegment(f"RateSegment.end must be >= 0, got {self.end}.")
        object.__setattr__(self, "rate", float(self.rate))
        object.__setattr__(self, "end", int(self.end))


def validate_segments(segments: Iterable[RateSegment]) -> tuple[RateSegment, ...]:
    """
    Return `segments` as a tuple after checking the table invariants:
    at least one entry, only RateSegment instances, strictly increasing bounds.
    """
    out = tuple(segments)
    if not out:
        raise InvalidRateSegment("A recording needs at least one rate segment.")

    prev_end = 0
    for i, seg in enumerate(out):
        if not isinstance(seg, RateSegment):
            raise InvalidRateSegment(f"Rate segment #{i} is not a RateSegment: {seg!r}.")
        if seg.end <= prev_end:
            raise InvalidRateSegment(
                f"Rate segment bounds must be strictly increasing: "
                f"segment #{i} ends at {seg.end} after {prev_end}."
            )
        prev_end = seg.end
    return out


def cycle_length(
    segments: Sequence[RateSegment | None],
    index: int,
    *,
    nominal_frequency: float = 50.0,
) -> tuple[int, int]:
    """
    Resolve the samples-per-cycle in effect at `index`.

    Returns
    -------
    (samples_per_cycle, adjusted_index)
        samples_per_cycle is >= 1 when `index` falls inside the table.
        adjusted_index is the window start; it stays at `index`, so near a
        rate bound the window may read past it.
        (0, index) when `index` is at or beyond the last bound.
    """
    for seg in segments:
        if not isinstance(seg, RateSegment):
            # Malformed entries are skipped, not fatal
            log.debug("Skipping malformed rate segment entry: %r", seg)
            continue

        if index < seg.end:
            samples_per_cycle = int(seg.rate / nominal_frequency)
            if samples_per_cycle <= 0:
                samples_per_cycle = 1

            if seg.end - index < samples_per_cycle:
                log.debug(
                    "Index %d is less than one cycle before rate boundary %d",
                    index, seg.end,
                )
            return samples_per_cycle, index

    return 0, index


def time_axis(
    segments: Sequence[RateSegment],
    n_samples: int,
    *,
    default_rate: float = 50.0,
) -> np.ndarray:
    """
    Build a time axis (microseconds) of length `n_samples` from the rate table.

    Inside a segment, time advances by 1/rate per sample; elapsed time
    accumulates across segments. Non-positive rates fall back to
    `default_rate`. Samples past the last bound continue at the last rate.
    """
    result = np.zeros(int(n_samples), dtype=np.float64)
    if n_samples <= 0 or not segments:
        return result

    def _rate(seg: RateSegment) -> float:
        return seg.rate if seg.rate > 0 else default_rate

    elapsed = 0.0
    prev_end = 0
    for seg in segments:
        end = min(seg.end, n_samples)
        if end > prev_end:
            rate = _rate(seg)
            steps = np.arange(end - prev_end, dtype=np.float64)
            result[prev_end:end] = elapsed + steps / rate * 1e6
            elapsed += (end - prev_end) / rate * 1e6
            prev_end = end
        if prev_end >= n_samples:
            break

    if prev_end < n_samples:
        rate = _rate(segments[-1])
        steps = np.arange(n_samples - prev_end, dtype=np.float64)
        result[prev_end:] = elapsed + steps / rate * 1e6

    return result
