# faultphasor/config.py
"""Engine constants, grouped in one immutable configuration object."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """
    Constants used by the cursor value engine.

    nominal_frequency:
        Power frequency (Hz) used to turn a sampling rate into samples per cycle.
    skew_time_conversion:
        Divisor mapping a channel skew (microseconds) to a phase shift:
        shift = skew * 2*pi / skew_time_conversion.
    kilo_marker / primary_marker:
        Case-insensitive markers searched for in the unit label and in the
        primary/secondary flag.
    kilo_threshold:
        A kilo unit only counts as "already scaled" when the calibration
        multiplier is below this value.
    kilo_divisor:
        Scale applied when expressing primary values in kilo units.
    window_factor:
        Window length relative to one cycle.
    rms_decimals / value_decimals:
        Decimal places for the RMS display string and the instantaneous readout.
    default_sample_rate:
        Rate used by the time axis when a segment declares a non-positive rate.
    """
    nominal_frequency: float = 50.0
    skew_time_conversion: float = 20000.0
    kilo_marker: str = "k"
    primary_marker: str = "p"
    kilo_threshold: float = 1.0
    kilo_divisor: float = 1000.0
    window_factor: float = 1.5
    rms_decimals: int = 3
    value_decimals: int = 2
    default_sample_rate: float = 50.0

    def __post_init__(self) -> None:
        if not self.nominal_frequency > 0:
            raise ValueError("nominal_frequency must be > 0")
        if not self.skew_time_conversion > 0:
            raise ValueError("skew_time_conversion must be > 0")
        if not self.kilo_divisor > 0:
            raise ValueError("kilo_divisor must be > 0")
        if not self.default_sample_rate > 0:
            raise ValueError("default_sample_rate must be > 0")
        if not self.window_factor >= 1:
            raise ValueError("window_factor must be >= 1")
        if self.rms_decimals < 0 or self.value_decimals < 0:
            raise ValueError("decimal places must be >= 0")


DEFAULT_CONFIG = EngineConfig()
