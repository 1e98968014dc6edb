# faultphasor/engine/formatter.py
"""
Cursor readout: one formatted RMS value per active channel at a sample index.

Pipeline per channel:
    cycle_length -> extract_window -> harmonic_dft -> Phasor -> convert -> text

Every call is a pure function of (recording, index, want_primary, harmonic);
the adjusted window start is passed along explicitly, nothing is cached.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from faultphasor.config import DEFAULT_CONFIG, EngineConfig
from faultphasor.core.channel import Channel
from faultphasor.core.rates import cycle_length
from faultphasor.core.recording import Recording

from .dft import harmonic_dft
from .phasor import Phasor
from .units import convert
from .window import extract_window

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValueResult:
    """
    Readout of one channel at one cursor position.

    - name / index: channel name and its position in the recording
    - text: RMS magnitude with unit, e.g. "57.735V" or "6.351kV"
    - value: calibrated instantaneous sample at the cursor
    - raw: raw instantaneous sample at the cursor
    - rms / angle: converted magnitude and skew-corrected angle (radians)
    """
    name: str
    index: int
    text: str
    value: float
    raw: float
    rms: float = 0.0
    angle: float = 0.0


def values_at(
    recording: Recording,
    index: int,
    want_primary: bool,
    harmonic: int = 1,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[ValueResult]:
    """
    Compute the readout of every active channel at sample `index`.

    Channels keep their recording order; inactive or empty channels are
    skipped. An index beyond the rate table yields an empty list.
    """
    samples_per_cycle, start = cycle_length(
        recording.segments, index, nominal_frequency=config.nominal_frequency
    )
    if samples_per_cycle == 0:
        log.debug("Index %d is beyond the rate table, no values computed", index)
        return []

    results: list[ValueResult] = []
    for position, channel in enumerate(recording.channels):
        if not channel.active:
            continue
        if channel.n == 0:
            log.debug("Skipping channel '%s': no samples", channel.name)
            continue
        results.append(
            _channel_value(
                channel,
                position,
                index,
                start,
                samples_per_cycle,
                want_primary,
                harmonic,
                config,
            )
        )
    return results


def _channel_value(
    channel: Channel,
    position: int,
    index: int,
    start: int,
    samples_per_cycle: int,
    want_primary: bool,
    harmonic: int,
    config: EngineConfig,
) -> ValueResult:
    window = extract_window(channel, start, samples_per_cycle, factor=config.window_factor)
    real, imag = harmonic_dft(window, samples_per_cycle, harmonic)

    phasor = Phasor(real_a=real, imag_a=imag)
    rms_value, angle_value = convert(
        phasor.rms_a(), phasor.angle_a(), channel, want_primary, config
    )
    phasor.set_from_polar_a(rms_value, angle_value)

    magnitude = phasor.rms_a()
    if math.isnan(magnitude):
        magnitude = 0.0

    prefix = config.kilo_marker if want_primary else ""
    text = f"{magnitude:.{config.rms_decimals}f}{prefix}{channel.unit}"

    # Instantaneous values use the cursor index, not the adjusted window start
    return ValueResult(
        name=channel.name,
        index=position,
        text=text,
        value=channel.calibrated_at(index),
        raw=channel.raw_at(index),
        rms=magnitude,
        angle=angle_value,
    )


def current_value(result: ValueResult, decimals: int = 2) -> tuple[str, float]:
    """Display string and calibrated instantaneous value rounded to `decimals`."""
    return result.text, round(result.value, decimals)


class ValueFormatter:
    """
    Cursor value engine bound to one Recording.

    Holds only the (immutable) recording and configuration, so calls can be
    made in any order.
    """

    def __init__(self, recording: Recording, config: EngineConfig = DEFAULT_CONFIG):
        self._recording = recording
        self._config = config

    @property
    def recording(self) -> Recording:
        return self._recording

    def values_at(self, index: int, want_primary: bool, harmonic: int = 1) -> list[ValueResult]:
        return values_at(
            self._recording, index, want_primary, harmonic, config=self._config
        )

    def current_values(self, index: int, want_primary: bool) -> list[tuple[str, float]]:
        return [
            current_value(r, self._config.value_decimals)
            for r in self.values_at(index, want_primary)
        ]
