# core/channel.py

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field

from .exceptions import InvalidChannel
from .metadata import ChannelMeta

import numpy as np


@dataclass(slots=True, frozen=True)
class Channel:
    """
    One analog signal track of a Recording.

    `samples` holds the raw recorded values; the physical value is
    `raw * multiplier + offset`. `ps` flags whether the stored values are
    primary ("P") or secondary ("S"); `ratio` is the primary/secondary
    transformation ratio.
    """
    name: str
    samples: np.ndarray = field(repr=False)
    unit: str = ""
    multiplier: float = 1.0
    offset: float = 0.0
    skew: float = 0.0
    ps: str = "S"
    ratio: float = 1.0
    active: bool = True
    meta: ChannelMeta = field(default_factory=ChannelMeta, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidChannel("Channel.name must be a non-empty string.")

        samples = np.asarray(self.samples)
        if samples.ndim != 1:
            raise InvalidChannel(f"Channel.samples must be 1D, got shape {samples.shape}")
        object.__setattr__(self, "samples", samples)

        if self.unit is None:
            object.__setattr__(self, "unit", "")
        elif not isinstance(self.unit, str):
            raise InvalidChannel("Channel.unit must be a string.")
        if not isinstance(self.ps, str):
            raise InvalidChannel("Channel.ps must be a string.")

        for attr in ("multiplier", "offset", "skew", "ratio"):
            value = getattr(self, attr)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidChannel(f"Channel.{attr} must be a number, got {value!r}.")
            if not math.isfinite(value):
                raise InvalidChannel(f"Channel.{attr} must be finite, got {value!r}.")

        # Zero would make the primary -> secondary conversion divide by zero
        if not self.ratio > 0:
            raise InvalidChannel(f"Channel.ratio must be > 0, got {self.ratio!r}.")

        if not isinstance(self.meta, ChannelMeta):
            raise InvalidChannel("Channel.meta must be a ChannelMeta instance.")

    # Convenience accessors
    @property
    def n(self) -> int:
        return int(self.samples.size)

    def is_primary(self, marker: str = "p") -> bool:
        return marker.lower() in self.ps.lower()

    def raw_at(self, index: int) -> float:
        """Raw sample at `index`, or 0 when the index is outside the recording."""
        if 0 <= index < self.n:
            return float(self.samples[index])
        return 0.0

    def calibrated_at(self, index: int) -> float:
        # A raw 0 and a missing sample both read as 0
        raw = self.raw_at(index)
        if not raw or math.isnan(raw):
            return 0.0
        return raw * self.multiplier + self.offset

    def calibrated(self) -> np.ndarray:
        return self.samples * self.multiplier + self.offset

    # Core operations
    def with_active(self, active: bool) -> "Channel":
        return self._replace(active=bool(active))

    def rename(self, name: str) -> "Channel":
        return self._replace(name=name)

    def _replace(self, **changes) -> "Channel":
        fields = dict(
            name=self.name,
            samples=self.samples,
            unit=self.unit,
            multiplier=self.multiplier,
            offset=self.offset,
            skew=self.skew,
            ps=self.ps,
            ratio=self.ratio,
            active=self.active,
            meta=self._copy_meta(),
        )
        fields.update(changes)
        return Channel(**fields)

    def _copy_meta(self) -> ChannelMeta:
        return ChannelMeta(
            phase=self.meta.phase,
            ccbm=self.meta.ccbm,
            description=self.meta.description,
            min_value=self.meta.min_value,
            max_value=self.meta.max_value,
            primary=self.meta.primary,
            secondary=self.meta.secondary,
            cursor=self.meta.cursor,
            cursor1=self.meta.cursor1,
            attrs=self.meta.attrs.copy(),
        )
