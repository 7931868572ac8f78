# test/test_dwt.py
import numpy as np
import pytest
import pywt

from wavegraph.core.dwt import (
    MotherWavelet,
    band_length,
    decompose,
    dwt,
    idwt,
    reconstruct,
)
from wavegraph.core.exceptions import InvalidParameter, UnknownWavelet
from wavegraph.core.signal import Signal

S = np.sqrt(0.5)


def test_haar_band_lengths_are_half_rounded_up():
    for n in range(1, 12):
        approximation, detail = dwt(np.arange(n, dtype=float), "haar")
        assert approximation.size == detail.size == (n + 1) // 2
        assert band_length(n, 2) == (n + 1) // 2


def test_haar_even_length():
    approximation, detail = dwt([1.0, 2.0, 3.0, 4.0], "haar")
    assert np.allclose(approximation, [3 * S, 7 * S])
    assert np.allclose(detail, [-S, -S])


def test_haar_odd_length_zero_pads():
    approximation, detail = dwt([1.0, 2.0, 3.0], "haar")
    assert np.allclose(approximation, [3 * S, 3 * S])
    assert np.allclose(detail, [-S, 3 * S])


@pytest.mark.parametrize("name", ["haar", "db2", "db4", "sym3"])
def test_matches_pywavelets_zero_mode(name):
    rng = np.random.default_rng(7)
    x = rng.normal(size=21)
    approximation, detail = dwt(x, name)
    ref_a, ref_d = pywt.dwt(x, name, mode="zero")
    assert np.allclose(approximation, ref_a)
    assert np.allclose(detail, ref_d)


def test_decompose_is_deterministic():
    x = np.sin(np.linspace(0, 6, 33))
    first = decompose(x, "db2", levels=3)
    second = decompose(x, "db2", levels=3)
    for a, b in zip(first, second):
        assert np.array_equal(a.approximation, b.approximation)
        assert np.array_equal(a.detail, b.detail)


def test_multi_level_sizes_and_order():
    levels = decompose(Signal(np.arange(8, dtype=float)), "haar", levels=3)
    assert [lv.level for lv in levels] == [1, 2, 3]
    assert [lv.size for lv in levels] == [4, 2, 1]
    # Level 2 decomposes the level 1 approximation.
    a2, d2 = dwt(levels[0].approximation, "haar")
    assert np.allclose(levels[1].approximation, a2)
    assert np.allclose(levels[1].detail, d2)


def test_bands_are_read_only():
    level = decompose([1.0, 2.0], "haar")[0]
    with pytest.raises(ValueError):
        level.approximation[0] = 0.0
    with pytest.raises(ValueError):
        level.detail[0] = 0.0


def test_empty_input():
    approximation, detail = dwt([], "haar")
    assert approximation.size == 0 and detail.size == 0
    assert decompose([], "haar", levels=2)[1].size == 0


def test_invalid_parameters():
    with pytest.raises(InvalidParameter):
        decompose([1.0, 2.0], "haar", levels=0)
    with pytest.raises(InvalidParameter):
        dwt(np.zeros((2, 2)), "haar")
    with pytest.raises(InvalidParameter):
        idwt([1.0, 2.0], [1.0], "haar")


def test_unknown_wavelet():
    with pytest.raises(UnknownWavelet):
        MotherWavelet.from_name("not-a-wavelet")
    with pytest.raises(KeyError):
        dwt([1.0], "not-a-wavelet")


def test_wavelet_names_are_case_insensitive():
    w = MotherWavelet.from_name(" DB2 ")
    assert w.name == "db2"
    assert w.length == 4
    assert MotherWavelet.from_name("db2") is w


def test_haar_reconstruction_is_exact():
    x = np.array([4.0, -1.0, 2.5, 7.0, 0.0, 3.0, 1.0, 1.0])
    levels = decompose(x, "haar", levels=3)
    assert np.allclose(reconstruct(levels, "haar"), x)

    odd = np.array([1.0, 2.0, 3.0])
    a, d = dwt(odd, "haar")
    assert np.allclose(idwt(a, d, "haar", length=3), odd)


def test_db2_reconstruction_with_length():
    x = np.cos(np.arange(10, dtype=float))
    levels = decompose(x, "db2", levels=2)
    out = reconstruct(levels, "db2", length=10)
    assert out.size == 10
    assert np.allclose(out, x)


def test_reconstruct_empty():
    assert reconstruct([], "haar").size == 0
