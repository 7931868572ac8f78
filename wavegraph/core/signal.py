# wavegraph/core/signal.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

import numpy as np

from .exceptions import InvalidSignal


def as_samples(values: Any) -> np.ndarray:
    """Coerce `values` into an owned, 1D float64 array."""
    arr = np.array(values, dtype=np.float64, copy=True)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise InvalidSignal(f"`samples` must be 1D, got shape {arr.shape}")
    return arr


@dataclass(slots=True, eq=False)
class Signal:
    """
    Ordered, named sequence of samples with timing metadata.

    - samples: 1D float64 buffer owned by the signal (copied on assignment)
    - start / finish: time-domain bounds (finish >= start is not enforced)
    - sampling_interval: primary timing attribute; assigning a non-zero value
      recomputes sampling_rate as round(1 / interval)
    - is_complex: when True, samples alternate real / imaginary parts
    """

    samples: np.ndarray = field(default_factory=lambda: np.zeros(0), repr=False)
    name: str = ""
    start: float = 0.0
    finish: float | None = None
    sampling_interval: float = 1.0
    is_complex: bool = False
    sampling_rate: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        # Re-run the interval setter: the dataclass __init__ assigns
        # sampling_rate after sampling_interval.
        self.sampling_interval = self.sampling_interval
        if self.finish is None:
            n = self.samples.size
            self.finish = self.start + self.sampling_interval * (n - 1) if n else self.start

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "samples":
            value = as_samples(value)
        elif key == "sampling_interval":
            value = float(value)
            if value != 0.0:
                object.__setattr__(self, "sampling_rate", int(round(1.0 / value)))
        elif key in ("start", "finish") and value is not None:
            value = float(value)
        object.__setattr__(self, key, value)

    # ---- sequence-like API ----
    def __len__(self) -> int:
        return int(self.samples.size)

    def __getitem__(self, index):
        return self.samples[index]

    def __setitem__(self, index, value) -> None:
        self.samples[index] = value

    @property
    def n(self) -> int:
        return int(self.samples.size)

    @property
    def samples_count(self) -> int:
        return self.n

    # ---- duplication ----
    def copy(self, samples: Iterable[float] | np.ndarray | None = None) -> "Signal":
        """
        Duplicate the metadata.

        Samples are deep-copied, or replaced by `samples` when given (used by
        blocks that derive a new signal from an input one).
        """
        out = Signal(
            samples=self.samples if samples is None else samples,
            name=self.name,
            start=self.start,
            finish=self.finish,
            sampling_interval=self.sampling_interval,
            is_complex=self.is_complex,
        )
        object.__setattr__(out, "sampling_rate", self.sampling_rate)
        return out

    def clone(self) -> "Signal":
        return self.copy()

    # ---- formatting ----
    def to_string(self, precision: int | None = None, separator: str = " ") -> str:
        if precision is None:
            return separator.join(repr(float(v)) for v in self.samples)
        return separator.join(f"{v:.{precision}f}" for v in self.samples)

    def __str__(self) -> str:
        return self.to_string()


def format_signals(
    signals: Sequence[Signal], precision: int | None = None, separator: str = " "
) -> str:
    """Format the first signal of a list, or return "" for an empty list."""
    if not signals:
        return ""
    return signals[0].to_string(precision, separator)
