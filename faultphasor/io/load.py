# faultphasor/io/load.py
"""
Build a Recording from data the upstream parser already produced.

`metadata` is the parsed configuration mapping (camelCase keys, as served to
the viewer):

    {
      "station": ..., "relay": ..., "version": ..., "frequency": 50,
      "startTime": ..., "endTime": ...,
      "analogChannels": [{"name", "unit", "phase", "ccbm", "multiplier",
                          "offset", "skew", "minValue", "maxValue",
                          "primary", "secondary", "ps"}, ...],
      "digitalChannels": [{"name", "phase", ...}, ...],
      "sampleRates": [{"sampRate", "lastSampleNum"}, ...],
    }

Decoding the configuration/data files themselves is not done here.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

import numpy as np

from faultphasor.core import (
    Channel,
    ChannelMeta,
    RateSegment,
    Recording,
    RecordingMeta,
    Selector,
)

log = logging.getLogger(__name__)


def _ratio(primary: Any, secondary: Any) -> float:
    try:
        p = float(primary)
        s = float(secondary)
    except (TypeError, ValueError):
        return 1.0
    if p > 0 and s > 0:
        return p / s
    return 1.0


def _float(value: Any, default: float) -> float:
    if value is None:
        return default
    return float(value)


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _selectors(metadata: Mapping[str, Any]) -> tuple[Selector, ...]:
    seen: dict[tuple[str, str], Selector] = {}
    for kind, key in (("A", "analogChannels"), ("D", "digitalChannels")):
        for info in metadata.get(key) or ():
            phase = str(info.get("phase") or "")
            seen.setdefault((kind, phase), Selector(kind=kind, phase=phase))
    return tuple(seen.values())


def channel_from_metadata(
    info: Mapping[str, Any],
    samples: Sequence[float] | np.ndarray,
    *,
    active: bool = True,
) -> Channel:
    """Map one `analogChannels` entry plus its raw samples to a Channel."""
    primary = info.get("primary")
    secondary = info.get("secondary")
    return Channel(
        name=str(info["name"]),
        samples=np.asarray(samples),
        unit=str(info.get("unit") or ""),
        multiplier=_float(info.get("multiplier"), 1.0),
        offset=_float(info.get("offset"), 0.0),
        skew=_float(info.get("skew"), 0.0),
        ps=str(info.get("ps") or "S"),
        ratio=_ratio(primary, secondary),
        active=active,
        meta=ChannelMeta(
            phase=info.get("phase"),
            ccbm=info.get("ccbm"),
            min_value=_optional_float(info.get("minValue")),
            max_value=_optional_float(info.get("maxValue")),
            primary=_optional_float(primary),
            secondary=_optional_float(secondary),
            attrs={"id": info["id"]} if "id" in info else {},
        ),
    )


def recording_from_metadata(
    metadata: Mapping[str, Any],
    analog: Mapping[str, Sequence[float] | np.ndarray] | Sequence[Sequence[float] | np.ndarray],
    timestamps: Sequence[float] | np.ndarray | None = None,
    *,
    active: Iterable[str] | None = None,
) -> Recording:
    """
    Build a Recording from parsed metadata and raw analog samples.

    analog:
      - mapping channel name -> samples: channels without samples are left out
      - sequence of sample arrays, in `analogChannels` order
    active:
      - None: every channel is flagged for analysis
      - iterable of names: only those channels are flagged
    """
    infos = list(metadata.get("analogChannels") or ())
    wanted = None if active is None else set(active)

    if isinstance(analog, Mapping):
        by_name = analog
    else:
        by_name = {str(info["name"]): arr for info, arr in zip(infos, analog)}

    channels: list[Channel] = []
    for info in infos:
        name = str(info["name"])
        if name not in by_name:
            log.debug("No samples for analog channel '%s', leaving it out", name)
            continue
        channels.append(
            channel_from_metadata(
                info,
                by_name[name],
                active=True if wanted is None else name in wanted,
            )
        )

    segments = [
        RateSegment(rate=float(sr["sampRate"]), end=int(sr["lastSampleNum"]))
        for sr in metadata.get("sampleRates") or ()
    ]

    meta = RecordingMeta(
        station=metadata.get("station"),
        relay=metadata.get("relay"),
        version=metadata.get("version"),
        start_time=metadata.get("startTime"),
        end_time=metadata.get("endTime"),
        frequency=_optional_float(metadata.get("frequency")),
        selectors=_selectors(metadata),
    )

    return Recording(
        channels=channels,
        segments=segments,
        timestamps=None if timestamps is None else np.asarray(timestamps),
        meta=meta,
    )
