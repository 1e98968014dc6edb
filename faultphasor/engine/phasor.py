# faultphasor/engine/phasor.py
from __future__ import annotations

import math
from dataclasses import dataclass

SQRT_2 = math.sqrt(2.0)


def rms(real: float, imag: float) -> float:
    """RMS magnitude of a sinusoid given as peak-amplitude rectangular components."""
    return math.sqrt((real * real + imag * imag) / 2)


def angle(real: float, imag: float) -> float:
    """Phase angle in radians; 0 for the zero phasor."""
    if real == 0.0 and imag == 0.0:
        return 0.0
    return math.atan2(imag, real)


@dataclass(slots=True)
class Phasor:
    """
    Measurement phasor holding two independent rectangular pairs.

    The "A" pair is the working representation fed by the DFT; the "P" pair
    is kept separately and never updated implicitly from "A".
    """
    real_a: float = 0.0
    imag_a: float = 0.0
    real_p: float = 0.0
    imag_p: float = 0.0
    zero_value: float = 0.0

    def rms_a(self) -> float:
        return rms(self.real_a, self.imag_a)

    def rms_p(self) -> float:
        return rms(self.real_p, self.imag_p)

    def angle_a(self) -> float:
        return angle(self.real_a, self.imag_a)

    def angle_p(self) -> float:
        return angle(self.real_p, self.imag_p)

    def set_from_polar_a(self, rms_value: float, angle_value: float) -> None:
        self.real_a = rms_value * SQRT_2 * math.cos(angle_value)
        self.imag_a = rms_value * SQRT_2 * math.sin(angle_value)

    def set_from_polar_p(self, rms_value: float, angle_value: float) -> None:
        self.real_p = rms_value * SQRT_2 * math.cos(angle_value)
        self.imag_p = rms_value * SQRT_2 * math.sin(angle_value)

    @property
    def complex_a(self) -> complex:
        return complex(self.real_a, self.imag_a)

    @property
    def complex_p(self) -> complex:
        return complex(self.real_p, self.imag_p)
