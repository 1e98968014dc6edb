# faultphasor/engine/dft.py
from __future__ import annotations

import numpy as np


def harmonic_dft(
    window: np.ndarray,
    samples_per_cycle: int,
    harmonic: int = 1,
) -> tuple[float, float]:
    """
    Single-harmonic discrete Fourier sum over the first cycle of `window`.

    Returns (real, imag) where, with half = samples_per_cycle // 2,

        real = sum(x[k] * sin(k * h * pi / half)) / half
        imag = sum(x[k] * cos(k * h * pi / half)) / half

    so a sinusoid of peak amplitude P yields sqrt(real**2 + imag**2) == P.

    With one sample per cycle there is no transform: for the fundamental the
    first two window values are returned as (real, imag) and any other
    harmonic gives (0, 0). `samples_per_cycle` must be >= 1.
    """
    x = np.asarray(window, dtype=np.float64)

    if samples_per_cycle == 1:
        if harmonic == 1 and x.size >= 2:
            return float(x[0]), float(x[1])
        return 0.0, 0.0

    half = samples_per_cycle // 2

    k = np.arange(samples_per_cycle, dtype=np.float64)
    angle = k * harmonic * np.pi / half
    cycle = x[:samples_per_cycle]

    real = float(np.dot(cycle, np.sin(angle))) / half
    imag = float(np.dot(cycle, np.cos(angle))) / half
    return real, imag
