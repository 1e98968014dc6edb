# faultphasor/core/recording.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

import numpy as np

from faultphasor.config import DEFAULT_CONFIG, EngineConfig

from .channel import Channel
from .exceptions import ChannelNotFound, InvalidRateSegment, InvalidRecording
from .metadata import RecordingMeta
from .rates import RateSegment, time_axis, validate_segments

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Recording:
    """
    A Recording is one captured multi-channel disturbance record.

    Design goals:
    - easy access: recording["IA"]
    - ordered: channel position is meaningful to the viewer
    - safe: shared time base and rate table validated once, here
    - read-only: the engine never mutates it; transformations return new Recording
    """
    channels: Sequence[Channel] = field(default_factory=tuple, repr=False)
    segments: Sequence[RateSegment] = field(default_factory=tuple)
    timestamps: np.ndarray | None = field(default=None, repr=False)
    meta: RecordingMeta = field(default_factory=RecordingMeta, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.meta, RecordingMeta):
            raise InvalidRecording("Recording.meta must be a RecordingMeta instance.")

        channels = tuple(self.channels)
        for ch in channels:
            if not isinstance(ch, Channel):
                raise InvalidRecording("Recording.channels values must be Channel instances.")

        lengths = {ch.n for ch in channels}
        if len(lengths) > 1:
            raise InvalidRecording(
                f"All channels must share one time base, got sample counts {sorted(lengths)}."
            )
        n_samples = lengths.pop() if lengths else 0

        try:
            segments = validate_segments(self.segments)
        except InvalidRateSegment as e:
            raise InvalidRecording(str(e)) from e

        if segments[-1].end < n_samples:
            log.warning(
                "Rate table ends at sample %d but channels hold %d samples",
                segments[-1].end, n_samples,
            )

        timestamps = self.timestamps
        if timestamps is not None:
            timestamps = np.asarray(timestamps)
            if timestamps.ndim != 1:
                raise InvalidRecording(f"`timestamps` must be 1D, got shape {timestamps.shape}")
            if channels and timestamps.size != n_samples:
                raise InvalidRecording(
                    f"`timestamps` must match the channel length, got {timestamps.size} vs {n_samples}"
                )

        object.__setattr__(self, "channels", channels)
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "timestamps", timestamps)

    # ---- dict-like API ----
    def __len__(self) -> int:
        return len(self.channels)

    def __iter__(self) -> Iterator[Channel]:
        return iter(self.channels)

    def keys(self) -> list[str]:
        return [ch.name for ch in self.channels]

    def __contains__(self, name: object) -> bool:
        return any(ch.name == name for ch in self.channels)

    def __getitem__(self, name: str) -> Channel:
        ch = self.get(name)
        if ch is None:
            raise ChannelNotFound(name)
        return ch

    def get(self, name: str, default: Channel | None = None) -> Channel | None:
        for ch in self.channels:
            if ch.name == name:
                return ch
        return default

    # ---- derived properties ----
    @property
    def n_samples(self) -> int:
        return self.channels[0].n if self.channels else 0

    def active_channels(self) -> list[tuple[int, Channel]]:
        """(position, channel) pairs for channels flagged for analysis."""
        return [(i, ch) for i, ch in enumerate(self.channels) if ch.active]

    def time_axis(self, *, config: EngineConfig = DEFAULT_CONFIG) -> np.ndarray:
        """Time (microseconds) of every sample, derived from the rate table."""
        return time_axis(
            self.segments, self.n_samples, default_rate=config.default_sample_rate
        )

    # ---- transformations ----
    def select(self, names: Iterable[str], *, missing: str = "raise") -> "Recording":
        """
        Keep only the given channel names (order preserved by insertion in `names`).

        missing:
          - "raise": error if any name is missing
          - "ignore": skip missing names
        """
        selected: list[Channel] = []
        for n in names:
            ch = self.get(n)
            if ch is not None:
                selected.append(ch)
            elif missing == "raise":
                raise ChannelNotFound(n)
        return self._replace(channels=selected)

    def with_active(self, names: Iterable[str]) -> "Recording":
        """Flag exactly the given channel names for analysis."""
        wanted = set(names)
        return self._replace(channels=[ch.with_active(ch.name in wanted) for ch in self.channels])

    def _replace(self, **changes) -> "Recording":
        fields = dict(
            channels=self.channels,
            segments=self.segments,
            timestamps=self.timestamps,
            meta=self.meta,
        )
        fields.update(changes)
        return Recording(**fields)
