# test/test_rates.py
import numpy as np
import pytest

from faultphasor.core import RateSegment, cycle_length, time_axis, validate_segments
from faultphasor.core import InvalidRateSegment


SEGMENTS = [RateSegment(rate=3000, end=600), RateSegment(rate=6000, end=1200)]


def test_cycle_length_per_segment():
    assert cycle_length(SEGMENTS, 100) == (60, 100)
    assert cycle_length(SEGMENTS, 700) == (120, 700)
    assert cycle_length(SEGMENTS, 0) == (60, 0)


def test_cycle_length_beyond_last_bound_is_zero_and_index_unchanged():
    assert cycle_length(SEGMENTS, 1200) == (0, 1200)
    assert cycle_length(SEGMENTS, 1300) == (0, 1300)


def test_cycle_length_keeps_index_near_rate_boundary():
    # 10 samples left before 600, one cycle is 60
    assert cycle_length(SEGMENTS, 590) == (60, 590)
    # 50 samples left before 1200, one cycle is 120
    assert cycle_length(SEGMENTS, 1150) == (120, 1150)
    assert cycle_length(SEGMENTS, 1199) == (120, 1199)
    assert cycle_length(SEGMENTS, 540) == (60, 540)


def test_cycle_length_segment_shorter_than_a_cycle():
    segs = [RateSegment(rate=1000, end=100), RateSegment(rate=6000, end=150)]
    assert cycle_length(segs, 120) == (120, 120)

    short = [RateSegment(rate=3000, end=30)]
    assert cycle_length(short, 10) == (60, 10)


def test_cycle_length_clamps_to_one_sample():
    segs = [RateSegment(rate=25, end=100)]
    assert cycle_length(segs, 10) == (1, 10)

    segs = [RateSegment(rate=0, end=100)]
    assert cycle_length(segs, 10) == (1, 10)


def test_cycle_length_skips_malformed_entries():
    segs = [None, "junk", RateSegment(rate=3000, end=600)]
    assert cycle_length(segs, 100) == (60, 100)
    assert cycle_length([None], 0) == (0, 0)
    assert cycle_length([], 5) == (0, 5)


def test_cycle_length_custom_nominal_frequency():
    assert cycle_length(SEGMENTS, 100, nominal_frequency=60.0) == (50, 100)


def test_rate_segment_validation():
    with pytest.raises(InvalidRateSegment):
        RateSegment(rate=float("nan"), end=10)
    with pytest.raises(InvalidRateSegment):
        RateSegment(rate=1000, end=-1)
    with pytest.raises(InvalidRateSegment):
        RateSegment(rate=1000, end=1.5)  # type: ignore[arg-type]
    with pytest.raises(InvalidRateSegment):
        RateSegment(rate="fast", end=10)  # type: ignore[arg-type]

    seg = RateSegment(rate=np.float32(1200), end=np.int64(10))
    assert seg.rate == 1200.0
    assert seg.end == 10


def test_validate_segments():
    assert validate_segments(SEGMENTS) == tuple(SEGMENTS)

    with pytest.raises(InvalidRateSegment):
        validate_segments([])
    with pytest.raises(InvalidRateSegment):
        validate_segments([RateSegment(rate=1000, end=600), RateSegment(rate=2000, end=600)])
    with pytest.raises(InvalidRateSegment):
        validate_segments([RateSegment(rate=1000, end=0)])
    with pytest.raises(InvalidRateSegment):
        validate_segments([None])


def test_time_axis_accumulates_across_segments():
    segs = [RateSegment(rate=1000, end=3), RateSegment(rate=2000, end=5)]
    t = time_axis(segs, 6)
    # last sample runs past the table at the last rate
    assert np.allclose(t, [0.0, 1000.0, 2000.0, 3000.0, 3500.0, 4000.0])


def test_time_axis_truncates_and_falls_back_on_bad_rate():
    segs = [RateSegment(rate=1000, end=3), RateSegment(rate=2000, end=5)]
    assert np.allclose(time_axis(segs, 2), [0.0, 1000.0])

    assert np.allclose(time_axis([RateSegment(rate=0, end=2)], 2), [0.0, 20000.0])
    assert np.allclose(
        time_axis([RateSegment(rate=-1, end=2)], 2, default_rate=100.0), [0.0, 10000.0]
    )
    assert time_axis(segs, 0).size == 0
