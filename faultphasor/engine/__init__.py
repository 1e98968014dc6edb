# faultphasor/engine/__init__.py
"""
Per-cursor phasor computation.

- extract_window: calibrated analysis window at a sample index
- harmonic_dft: single-harmonic Fourier sum over one cycle
- Phasor: rectangular/polar phasor with RMS magnitude
- convert: skew correction and primary/secondary scaling
- values_at / ValueFormatter: readout of every active channel
"""

from .window import window_length, extract_window
from .dft import harmonic_dft
from .phasor import Phasor, rms, angle
from .units import UnitInfo, unit_info, correct_skew, convert
from .formatter import ValueResult, ValueFormatter, values_at, current_value


__all__ = [
    "window_length",
    "extract_window",
    "harmonic_dft",
    "Phasor",
    "rms",
    "angle",
    "UnitInfo",
    "unit_info",
    "correct_skew",
    "convert",
    "ValueResult",
    "ValueFormatter",
    "values_at",
    "current_value",
]
