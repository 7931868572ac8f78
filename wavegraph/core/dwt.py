# wavegraph/core/dwt.py
"""
Discrete wavelet transform kernel.

Boundary policy: zero padding. One level is the full linear convolution of
the input with each decomposition filter, decimated by keeping the odd
indices:

    approximation = convolve(x, dec_lo)[1::2]
    detail        = convolve(x, dec_hi)[1::2]

so each band holds (N + L - 1) // 2 coefficients, i.e. ceil(N / 2) for the
2-tap Haar filter. The result is identical to PyWavelets `dwt(x, w, "zero")`.
Filter coefficients come from the PyWavelets filter bank tables.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

import numpy as np
import pywt

from .exceptions import InvalidParameter, UnknownWavelet
from .signal import Signal


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=np.float64, copy=True)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, slots=True)
class MotherWavelet:
    """Named orthogonal filter bank (decomposition + reconstruction)."""

    name: str
    dec_lo: np.ndarray = field(repr=False)
    dec_hi: np.ndarray = field(repr=False)
    rec_lo: np.ndarray = field(repr=False)
    rec_hi: np.ndarray = field(repr=False)

    @property
    def length(self) -> int:
        return int(self.dec_lo.size)

    @staticmethod
    def from_name(name: str) -> "MotherWavelet":
        return _load_wavelet(name.strip().lower())


@lru_cache(maxsize=None)
def _load_wavelet(name: str) -> MotherWavelet:
    try:
        w = pywt.Wavelet(name)
    except ValueError as e:
        raise UnknownWavelet(name) from e
    dec_lo, dec_hi, rec_lo, rec_hi = w.filter_bank
    return MotherWavelet(
        name=name,
        dec_lo=_frozen(dec_lo),
        dec_hi=_frozen(dec_hi),
        rec_lo=_frozen(rec_lo),
        rec_hi=_frozen(rec_hi),
    )


def _resolve(wavelet: str | MotherWavelet) -> MotherWavelet:
    if isinstance(wavelet, MotherWavelet):
        return wavelet
    return MotherWavelet.from_name(wavelet)


@dataclass(frozen=True, slots=True)
class DecompositionLevel:
    """One approximation/detail pair; arrays are read-only."""

    level: int
    approximation: np.ndarray = field(repr=False)
    detail: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "approximation", _frozen(self.approximation))
        object.__setattr__(self, "detail", _frozen(self.detail))

    @property
    def size(self) -> int:
        return int(self.approximation.size)


def band_length(n: int, filter_length: int) -> int:
    return (n + filter_length - 1) // 2 if n else 0


def dwt(samples, wavelet: str | MotherWavelet = "haar") -> tuple[np.ndarray, np.ndarray]:
    """Single-level decomposition -> (approximation, detail)."""
    w = _resolve(wavelet)
    x = np.asarray(samples, dtype=np.float64)
    if x.ndim != 1:
        raise InvalidParameter(f"dwt expects 1D samples, got shape {x.shape}")
    if x.size == 0:
        return np.zeros(0), np.zeros(0)
    approximation = np.convolve(x, w.dec_lo)[1::2]
    detail = np.convolve(x, w.dec_hi)[1::2]
    return approximation, detail


def decompose(
    signal: Signal | np.ndarray | list[float],
    wavelet: str | MotherWavelet = "haar",
    levels: int = 1,
) -> list[DecompositionLevel]:
    """
    Multi-level decomposition.

    Level k+1 decomposes the approximation band of level k. Levels are
    returned in increasing order.
    """
    if levels < 1:
        raise InvalidParameter(f"levels must be >= 1, got {levels}")
    w = _resolve(wavelet)
    current = signal.samples if isinstance(signal, Signal) else signal

    result: list[DecompositionLevel] = []
    for level in range(1, levels + 1):
        approximation, detail = dwt(current, w)
        result.append(DecompositionLevel(level=level, approximation=approximation, detail=detail))
        current = approximation
    return result


def idwt(
    approximation,
    detail,
    wavelet: str | MotherWavelet = "haar",
    length: int | None = None,
) -> np.ndarray:
    """
    Inverse of `dwt`. Output length defaults to 2 * m - L + 2 (m = band
    length), which may exceed the original by one trailing sample.
    """
    w = _resolve(wavelet)
    a = np.asarray(approximation, dtype=np.float64)
    d = np.asarray(detail, dtype=np.float64)
    if a.size != d.size:
        raise InvalidParameter(
            f"approximation and detail must have the same size, got {a.size} vs {d.size}"
        )
    m = a.size
    if m == 0:
        return np.zeros(0)

    # Coefficient k came from full-convolution index 2k + 1.
    up_a = np.zeros(2 * m + 1)
    up_d = np.zeros(2 * m + 1)
    up_a[1::2] = a
    up_d[1::2] = d
    full = np.convolve(up_a, w.rec_lo) + np.convolve(up_d, w.rec_hi)

    offset = w.length - 1
    n = 2 * m - w.length + 2 if length is None else length
    return full[offset:offset + max(n, 0)]


def reconstruct(
    levels: list[DecompositionLevel],
    wavelet: str | MotherWavelet = "haar",
    length: int | None = None,
) -> np.ndarray:
    """Rebuild the samples from a full `decompose` result."""
    if not levels:
        return np.zeros(0)
    w = _resolve(wavelet)
    ordered = sorted(levels, key=lambda lv: lv.level)
    current = ordered[-1].approximation
    for i in range(len(ordered) - 1, -1, -1):
        target = ordered[i - 1].size if i > 0 else length
        current = idwt(current, ordered[i].detail, w, length=target)
    return current
