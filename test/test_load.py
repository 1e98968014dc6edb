# test/test_load.py
import numpy as np
import pytest

from faultphasor.core import RateSegment, Selector
from faultphasor.engine import values_at
from faultphasor.io.load import channel_from_metadata, recording_from_metadata


METADATA = {
    "station": "SUB1",
    "relay": "R1",
    "version": "1999",
    "frequency": 50,
    "startTime": "2024-01-01T00:00:00Z",
    "endTime": "2024-01-01T00:00:01Z",
    "analogChannels": [
        {
            "id": 1, "name": "UA", "phase": "A", "ccbm": "LINE1", "unit": "V",
            "multiplier": 0.5, "offset": 0.0, "skew": 0.0,
            "minValue": -32767, "maxValue": 32767,
            "primary": 110000, "secondary": 100, "ps": "S",
        },
        {
            "id": 2, "name": "IA", "phase": "A", "ccbm": "LINE1", "unit": "A",
            "multiplier": 0.01, "offset": 0.0, "skew": 12.5,
            "minValue": -32767, "maxValue": 32767,
            "primary": 0, "secondary": 0, "ps": "p",
        },
    ],
    "digitalChannels": [{"id": 1, "name": "TRIP", "phase": "", "ccbm": "", "y": 0}],
    "sampleRates": [{"sampRate": 1000, "lastSampleNum": 40}],
}


def _samples():
    k = np.arange(40)
    return {
        "UA": 200 * np.sin(2 * np.pi * k / 20),
        "IA": 100 * np.sin(2 * np.pi * k / 20),
    }


def test_recording_from_metadata_maps_fields():
    rec = recording_from_metadata(METADATA, _samples(), timestamps=np.arange(40) * 1000)

    assert rec.keys() == ["UA", "IA"]
    assert rec.segments == (RateSegment(rate=1000.0, end=40),)
    assert rec.meta.station == "SUB1"
    assert rec.meta.frequency == 50.0
    assert rec.meta.selectors == (Selector("A", "A"), Selector("D", ""))

    ua = rec["UA"]
    assert ua.multiplier == 0.5
    assert ua.ratio == pytest.approx(1100.0)
    assert ua.meta.ccbm == "LINE1"
    assert ua.meta.attrs == {"id": 1}

    ia = rec["IA"]
    assert ia.ratio == 1.0  # missing ratings fall back to 1
    assert ia.is_primary()
    assert ia.skew == 12.5


def test_recording_from_metadata_active_subset_and_missing_samples():
    rec = recording_from_metadata(METADATA, {"IA": _samples()["IA"]}, active=["UA"])
    assert rec.keys() == ["IA"]
    assert rec.active_channels() == []


def test_recording_from_metadata_accepts_sample_sequence():
    s = _samples()
    rec = recording_from_metadata(METADATA, [s["UA"], s["IA"]], active=["UA"])

    out = values_at(rec, 0, want_primary=False)
    assert [r.name for r in out] == ["UA"]
    assert out[0].text == "70.711V"


def test_channel_from_metadata_defaults():
    ch = channel_from_metadata({"name": "X"}, [1, 2, 3])
    assert ch.unit == ""
    assert ch.multiplier == 1.0
    assert ch.offset == 0.0
    assert ch.ps == "S"
    assert ch.ratio == 1.0
    assert ch.meta.attrs == {}
