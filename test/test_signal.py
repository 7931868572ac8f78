# test/test_signal.py
import numpy as np
import pytest

from wavegraph.core.signal import Signal, format_signals
from wavegraph.core.exceptions import InvalidSignal


def test_init_ok_basic():
    s = Signal([1.0, 2.0, 3.0], name="x", start=1.0, sampling_interval=0.5)

    assert s.n == 3
    assert len(s) == 3
    assert s.name == "x"
    assert s.start == 1.0
    assert s.finish == 2.0
    assert s.sampling_rate == 2
    assert not s.is_complex
    assert s.samples.dtype == np.float64


def test_empty_signal():
    s = Signal()
    assert s.n == 0
    assert s.finish == s.start == 0.0
    assert s.to_string() == ""


def test_rejects_non_1d_samples():
    with pytest.raises(InvalidSignal):
        Signal(np.zeros((2, 2)))

    s = Signal([1.0])
    with pytest.raises(InvalidSignal):
        s.samples = [[1.0, 2.0]]


def test_sampling_interval_recomputes_rate():
    s = Signal([0.0, 1.0])
    assert s.sampling_rate == 1

    s.sampling_interval = 0.3
    assert s.sampling_rate == 3

    s.sampling_interval = 0.001
    assert s.sampling_rate == 1000

    # Zero interval keeps the previous rate.
    s.sampling_interval = 0
    assert s.sampling_interval == 0.0
    assert s.sampling_rate == 1000


def test_samples_assignment_copies_buffer():
    values = np.array([1.0, 2.0])
    s = Signal(values)
    values[0] = 99.0
    assert s[0] == 1.0

    s[1] = 5.0
    assert np.allclose(s.samples, [1.0, 5.0])


def test_clone_is_deep():
    s = Signal([1.0, 2.0], name="a", start=0.5, sampling_interval=0.25, is_complex=True)
    c = s.clone()

    assert c is not s
    assert c.samples is not s.samples
    assert c.name == "a"
    assert c.start == 0.5
    assert c.finish == s.finish
    assert c.sampling_rate == 4
    assert c.is_complex

    c[0] = 42.0
    c.name = "b"
    assert s[0] == 1.0
    assert s.name == "a"


def test_copy_with_replacement_samples():
    s = Signal([1.0, 2.0, 3.0], name="a", sampling_interval=0.5)
    d = s.copy([9.0])

    assert np.allclose(d.samples, [9.0])
    assert d.name == "a"
    assert d.sampling_interval == 0.5
    assert d.finish == s.finish


def test_to_string_and_format_signals():
    s = Signal([1.0, -4.0, 0.25])
    assert s.to_string(1) == "1.0 -4.0 0.2"
    assert s.to_string(0, ",") == "1,-4,0"
    assert format_signals([s, Signal([7.0])], 0) == "1 -4 0"
    assert format_signals([], 0) == ""
