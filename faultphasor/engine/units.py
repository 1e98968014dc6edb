# faultphasor/engine/units.py
"""
Skew correction and primary/secondary unit conversion of a channel RMS value.

Primary values are expressed in kilo units: the secondary -> primary path
multiplies by the transformation ratio and divides by the kilo divisor (unless
the channel unit is already kilo-scaled). The primary -> secondary path only
divides by the ratio; there is no matching x1000 on the way back.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from faultphasor.config import DEFAULT_CONFIG, EngineConfig
from faultphasor.core.channel import Channel


@dataclass(frozen=True, slots=True)
class UnitInfo:
    already_primary: bool
    has_kilo_unit: bool


def unit_info(channel: Channel, config: EngineConfig = DEFAULT_CONFIG) -> UnitInfo:
    has_kilo = (
        config.kilo_marker.lower() in channel.unit.lower()
        and channel.multiplier < config.kilo_threshold
    )
    return UnitInfo(
        already_primary=channel.is_primary(config.primary_marker),
        has_kilo_unit=has_kilo,
    )


def correct_skew(angle: float, skew: float, config: EngineConfig = DEFAULT_CONFIG) -> float:
    """Shift `angle` (radians) by the channel skew (microseconds)."""
    return angle - (skew * 2.0 * math.pi) / config.skew_time_conversion


def convert(
    rms: float,
    angle: float,
    channel: Channel,
    want_primary: bool,
    config: EngineConfig = DEFAULT_CONFIG,
) -> tuple[float, float]:
    """
    Apply skew correction and primary/secondary scaling.

    Returns (rms, angle); NaN in either is replaced with 0.
    """
    angle = correct_skew(angle, channel.skew, config)
    info = unit_info(channel, config)

    if want_primary:
        if not info.already_primary:
            rms *= channel.ratio
        if not info.has_kilo_unit:
            rms /= config.kilo_divisor
    elif info.already_primary:
        rms /= channel.ratio

    if math.isnan(rms):
        rms = 0.0
    if math.isnan(angle):
        angle = 0.0
    return rms, angle
