# faultphasor/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidChannel, InvalidRecording


@dataclass(frozen=True, slots=True)
class ChannelMeta:
    """
    Descriptive metadata attached to an analog Channel.

    None of these fields take part in the value computation:
    - phase / ccbm: phase identifier and circuit component being monitored
    - min_value / max_value: declared raw range of the channel
    - primary / secondary: transformer ratings the ratio was derived from
    - cursor / cursor1: UI cursor markers, carried through unchanged
    - attrs: arbitrary additional fields
    """
    phase: str | None = None
    ccbm: str | None = None
    description: str | None = None
    min_value: float | None = None
    max_value: float | None = None
    primary: float | None = None
    secondary: float | None = None
    cursor: int | None = None
    cursor1: int | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidChannel("ChannelMeta.attrs must be a dict.")


@dataclass(frozen=True, slots=True)
class Selector:
    """
    Grouping selector used by the viewer to filter channels.

    kind:
      - "A": analog
      - "D": digital
    """
    kind: str
    phase: str = ""

    def __post_init__(self) -> None:
        if self.kind not in {"A", "D"}:
            raise InvalidRecording(f"Selector.kind must be 'A' or 'D', got {self.kind!r}.")


@dataclass(frozen=True, slots=True)
class RecordingMeta:
    """
    Metadata attached to a Recording (one captured disturbance record).
    """
    station: str | None = None
    relay: str | None = None
    version: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    frequency: float | None = None
    selectors: tuple[Selector, ...] = ()
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidRecording("RecordingMeta.attrs must be a dict.")

        selectors = tuple(self.selectors or ())
        for sel in selectors:
            if not isinstance(sel, Selector):
                raise InvalidRecording("RecordingMeta.selectors must contain Selector instances.")
        object.__setattr__(self, "selectors", selectors)
