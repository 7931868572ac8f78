# wavegraph/core/wavemath.py
"""
Stateless array primitives shared by the block catalog.

Every function returns a freshly allocated array or Signal; inputs are never
modified unless the function name says so (`abs_signal`, `shift`).
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum

import numpy as np
from scipy.interpolate import CubicSpline, PchipInterpolator
from scipy.stats import norm

from .exceptions import InvalidParameter
from .signal import Signal

EPSILON = np.finfo(np.float64).eps


class Operation(Enum):
    SUM = "Sum"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"


class LogicalOperation(Enum):
    AND = "And"
    OR = "Or"
    NAND = "Nand"
    NOR = "Nor"
    XOR = "Xor"
    XNOR = "Xnor"


class SwitchCriteria(Enum):
    GREATER_OR_EQUAL = "GreaterOrEqual"
    GREATER = "Greater"
    NOT_EQUAL = "NotEqual"


class InterpolationMode(Enum):
    LINEAR = "Linear"
    NEAREST = "Nearest"
    CUBIC = "Cubic"
    HERMITE = "Hermite"


def _arr(samples) -> np.ndarray:
    return np.asarray(samples, dtype=np.float64)


# ---- absolute value ----
def abs_samples(samples) -> np.ndarray:
    return np.abs(_arr(samples))


def abs_from_complex(samples, start: int = 0, size: int | None = None) -> np.ndarray:
    """Magnitudes of interleaved (real, imag) pairs in samples[start:size]."""
    x = _arr(samples)
    size = x.size if size is None else size
    pairs = x[start:size]
    if pairs.size % 2:
        pairs = np.append(pairs, 0.0)
    return np.hypot(pairs[0::2], pairs[1::2])


def abs_signal(signal: Signal) -> None:
    """In-place absolute value; complex signals become real magnitudes."""
    if signal.is_complex:
        signal.samples = abs_from_complex(signal.samples)
        signal.is_complex = False
    else:
        signal.samples = abs_samples(signal.samples)


# ---- normalization / dedup ----
def normalize(samples, length: int) -> np.ndarray:
    return _arr(samples) / length


def unique_sorted(samples) -> np.ndarray:
    x = np.sort(_arr(samples))
    if x.size == 0:
        return x
    keep = np.empty(x.size, dtype=bool)
    keep[0] = True
    keep[1:] = np.diff(x) > 0
    return x[keep]


def unique(samples) -> np.ndarray:
    """Distinct values, first occurrence order."""
    x = _arr(samples)
    _, first = np.unique(x, return_index=True)
    return x[np.sort(first)]


# ---- scaling / shifting ----
def scale(x: float, current_min: float, current_max: float, new_min: float, new_max: float) -> float:
    return new_min + (x - current_min) / (current_max - current_min) * (new_max - new_min)


def scale_signal(signal: Signal, amplitude_factor: float, time_factor: float) -> Signal:
    output = signal.clone()
    if abs(amplitude_factor - 1) > EPSILON:
        output.samples = output.samples * amplitude_factor
    if abs(time_factor - 1) > EPSILON and time_factor > 0:
        output.finish *= time_factor
        output.sampling_interval *= time_factor
    return output


def shift(signal: Signal, delay: float) -> None:
    """Move the signal in time; decimal arithmetic keeps 0.1 + 0.2 exact."""
    d = Decimal(repr(float(delay)))
    signal.start = float(Decimal(repr(signal.start)) + d)
    signal.finish = float(Decimal(repr(signal.finish)) + d)


def invert(samples) -> np.ndarray | None:
    if samples is None:
        return None
    return _arr(samples)[::-1].copy()


def limit_range(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(value, max_value))


def is_power_of_2(x: int) -> bool:
    return x != 0 and (x & (x - 1)) == 0


# ---- resampling ----
def down_sample(samples, factor: int = 2, invert: bool = False) -> np.ndarray:
    """
    invert=False: drop every index that is a multiple of `factor`
                  (output length n // factor, zero-filled when fewer
                  samples survive, as with factor 1)
    invert=True : keep only the multiples of `factor`
                  (output length ceil(n / factor))
    """
    if factor < 1:
        raise InvalidParameter("down_sample factor must be >= 1")
    x = _arr(samples)
    multiple = (np.arange(x.size) % factor) == 0
    if invert:
        return x[multiple]
    kept = x[~multiple][: x.size // factor]
    out = np.zeros(x.size // factor)
    out[: kept.size] = kept
    return out


def up_sample(samples, factor: int = 2, pad_right: bool = True) -> np.ndarray:
    if factor < 1:
        raise InvalidParameter("up_sample factor must be >= 1")
    x = _arr(samples)
    if x.size == 0:
        return np.zeros(0)
    out = np.zeros(x.size * factor)
    out[::factor] = x
    if not pad_right:
        out = out[: out.size - (factor - 1)]
    return out


def repeat(samples, frame_size: int, repetition_count: int) -> np.ndarray | None:
    """
    Emit each frame of `frame_size` samples `repetition_count + 1` times.

    repeat([1, 9, 0, 1, 2, 5, -4, 4], 4, 1)
        -> [1, 9, 0, 1, 1, 9, 0, 1, 2, 5, -4, 4, 2, 5, -4, 4]
    """
    if samples is None:
        return None
    x = _arr(samples)
    if frame_size == 0 or repetition_count == 0:
        return x.copy()
    frames = [
        np.tile(x[i:i + frame_size], repetition_count + 1)
        for i in range(0, x.size, frame_size)
    ]
    return np.concatenate(frames) if frames else np.zeros(0)


def repeat_signal(
    signal: Signal, frame_size: int, repetition_count: int, keep_sampling_rate: bool
) -> Signal:
    output = signal.copy(repeat(signal.samples, frame_size, repetition_count))
    if keep_sampling_rate:
        output.finish = output.start + output.n * output.sampling_interval - output.sampling_interval
    elif output.n:
        output.sampling_interval = abs(signal.finish - signal.start) / output.n
    return output


def interpolate(signal: Signal, factor: int, mode: InterpolationMode) -> Signal:
    """Insert `factor - 1` points between consecutive samples."""
    if factor <= 1 or signal.n < 2:
        return signal.clone()

    x = np.arange(signal.n, dtype=np.float64)
    new_x = np.linspace(0.0, signal.n - 1, (signal.n - 1) * factor + 1)
    y = signal.samples

    if mode is InterpolationMode.LINEAR:
        samples = np.interp(new_x, x, y)
    elif mode is InterpolationMode.NEAREST:
        samples = y[np.floor(new_x + 0.5).astype(int)]
    elif mode is InterpolationMode.CUBIC:
        samples = CubicSpline(x, y)(new_x)
    elif mode is InterpolationMode.HERMITE:
        samples = PchipInterpolator(x, y)(new_x)
    else:
        raise InvalidParameter(f"Unknown interpolation mode: {mode!r}")

    output = signal.copy(samples)
    output.sampling_interval = signal.sampling_interval / factor
    return output


# ---- statistics ----
def mean(samples) -> float:
    x = _arr(samples)
    return float(np.mean(x)) if x.size else 0.0


def standard_deviation(samples) -> float:
    x = _arr(samples)
    return float(np.std(x)) if x.size else 0.0


def probability_density(x, mean: float, deviation: float):
    return norm.pdf(x, loc=mean, scale=deviation)


def normal_distribution(samples, mean_value: float | None = None, deviation: float | None = None) -> np.ndarray:
    """Gaussian pdf of each sample, sorted ascending."""
    x = _arr(samples)
    mu = mean(x) if mean_value is None else mean_value
    sigma = standard_deviation(x) if deviation is None else deviation
    if sigma == 0:
        return np.zeros(x.size)
    return np.sort(probability_density(x, mu, sigma))


# ---- binary operations ----
def _aligned(a, b) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Pad both inputs to the longer length; also return their validity masks."""
    a, b = _arr(a), _arr(b)
    size = max(a.size, b.size)
    pa, pb = np.zeros(size), np.zeros(size)
    pa[: a.size] = a
    pb[: b.size] = b
    return pa, pb, np.arange(size) < a.size, np.arange(size) < b.size


def execute_operation(operation: Operation, a, b) -> np.ndarray:
    """Element-wise a (op) b; where one side is missing the other passes through."""
    pa, pb, has_a, has_b = _aligned(a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        if operation is Operation.SUM:
            out = pa + pb
        elif operation is Operation.SUBTRACT:
            out = pa - pb
        elif operation is Operation.MULTIPLY:
            out = pa * pb
        elif operation is Operation.DIVIDE:
            out = pa / pb
        else:
            raise InvalidParameter(f"Unknown operation: {operation!r}")
    out = np.where(has_a & ~has_b, pa, out)
    return np.where(has_b & ~has_a, pb, out)


def execute_scalar_operation(operation: Operation, samples, value: float) -> np.ndarray:
    x = _arr(samples)
    with np.errstate(divide="ignore", invalid="ignore"):
        if operation is Operation.SUM:
            return x + value
        if operation is Operation.SUBTRACT:
            return x - value
        if operation is Operation.MULTIPLY:
            return x * value
        if operation is Operation.DIVIDE:
            return x / value
    raise InvalidParameter(f"Unknown operation: {operation!r}")


def execute_logic_operation(operation: LogicalOperation, a, b) -> np.ndarray:
    pa, pb, _, _ = _aligned(a, b)
    x, y = pa != 0, pb != 0
    if operation is LogicalOperation.AND:
        out = x & y
    elif operation is LogicalOperation.OR:
        out = x | y
    elif operation is LogicalOperation.NAND:
        out = ~(x & y)
    elif operation is LogicalOperation.NOR:
        out = ~(x | y)
    elif operation is LogicalOperation.XOR:
        out = x ^ y
    elif operation is LogicalOperation.XNOR:
        out = ~(x ^ y)
    else:
        raise InvalidParameter(f"Unknown logic operation: {operation!r}")
    return out.astype(np.float64)


def switch(a, b, threshold, criteria: SwitchCriteria) -> np.ndarray:
    """
    Per index: a[i] when a[i] satisfies `criteria` against the threshold,
    else b[i]. `threshold` is a scalar or a per-index array (a short array
    keeps its last value).
    """
    pa, pb, has_a, has_b = _aligned(a, b)
    size = pa.size
    t = np.asarray(threshold, dtype=np.float64)
    if t.ndim == 0:
        t = np.full(size, float(t))
    elif t.size == 0:
        t = np.zeros(size)
    elif t.size < size:
        t = np.concatenate([t, np.full(size - t.size, t[-1])])
    else:
        t = t[:size]

    if criteria is SwitchCriteria.GREATER_OR_EQUAL:
        take_a = pa >= t
    elif criteria is SwitchCriteria.GREATER:
        take_a = pa > t
    elif criteria is SwitchCriteria.NOT_EQUAL:
        take_a = pa != t
    else:
        raise InvalidParameter(f"Unknown switch criteria: {criteria!r}")

    take_a = (take_a & has_a) | ~has_b
    return np.where(take_a, pa, pb)
