# test/test_metadata.py
import pytest

from faultphasor.core import ChannelMeta, RecordingMeta, Selector
from faultphasor.core import InvalidChannel, InvalidRecording


def test_channelmeta_accepts_dict_and_normalizes_none():
    m = ChannelMeta(phase="A", attrs={"k": 1})
    assert m.attrs == {"k": 1}

    m2 = ChannelMeta(attrs=None)
    assert m2.attrs == {}


def test_channelmeta_rejects_non_dict_attrs():
    with pytest.raises(InvalidChannel):
        ChannelMeta(attrs=["not", "a", "dict"])  # type: ignore[arg-type]


def test_recordingmeta_accepts_dict_and_normalizes_none():
    m = RecordingMeta(station="SUB1", attrs={"a": 1})
    assert m.attrs == {"a": 1}

    m2 = RecordingMeta(attrs=None)
    assert m2.attrs == {}


def test_recordingmeta_rejects_non_dict_attrs():
    with pytest.raises(InvalidRecording):
        RecordingMeta(attrs="nope")  # type: ignore[arg-type]


def test_recordingmeta_selectors_become_tuple():
    m = RecordingMeta(selectors=[Selector("A", "A"), Selector("D")])
    assert m.selectors == (Selector("A", "A"), Selector("D", ""))

    with pytest.raises(InvalidRecording):
        RecordingMeta(selectors=[("A", "B")])  # type: ignore[list-item]


def test_selector_kind_must_be_analog_or_digital():
    with pytest.raises(InvalidRecording):
        Selector("X")
