# wavegraph/blocks/generate.py
"""
Signal generator block.

A template maps the sample times `x` (and the sample index) to values:

    y = amplitude * shape(2 * pi * frequency * x + phase) + offset

"Binary" ignores the frequency and alternates 0 / 1 from sample to sample.
"""
from __future__ import annotations

from typing import Callable

import numpy as np
from scipy.signal import sawtooth, square

from wavegraph.core.exceptions import InvalidParameter
from wavegraph.core.signal import Signal

from .base import Block, ProcessingType
from .nodes import single_output

_Shape = Callable[[np.ndarray, np.ndarray], np.ndarray]

TEMPLATES: dict[str, _Shape] = {
    "Binary": lambda arg, index: (index % 2).astype(np.float64),
    "Sine": lambda arg, index: np.sin(arg),
    "Cosine": lambda arg, index: np.cos(arg),
    "Square": lambda arg, index: square(arg),
    "Sawtooth": lambda arg, index: sawtooth(arg),
    "Triangle": lambda arg, index: sawtooth(arg, width=0.5),
    "Constant": lambda arg, index: np.ones(arg.size),
}

_DESCRIPTION = "A={:g}, F={:g}, φ={:g}, D={:g}; x={:g}...{:g}, fs={:g}"


class GenerateSignalBlock(Block):
    """Creates one signal from a named template over [start, finish]."""

    processing_type = ProcessingType.CREATE_SIGNAL
    execute_on_clone = True
    parameters = (
        "template_name",
        "amplitude",
        "frequency",
        "phase",
        "offset",
        "start",
        "finish",
        "sampling_rate",
        "ignore_last_sample",
    )

    def __init__(
        self,
        template_name: str = "Sine",
        start: float = 0.0,
        finish: float = 1.0,
        sampling_rate: float = 60.0,
        ignore_last_sample: bool = False,
        amplitude: float = 1.0,
        frequency: float = 60.0,
        phase: float = 0.0,
        offset: float = 0.0,
    ) -> None:
        self.template_name = template_name
        self.start = start
        self.finish = finish
        self.sampling_rate = sampling_rate
        self.ignore_last_sample = ignore_last_sample
        self.amplitude = amplitude
        self.frequency = frequency
        self.phase = phase
        self.offset = offset
        super().__init__()

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.template_name

    @property
    def description(self) -> str:  # type: ignore[override]
        return _DESCRIPTION.format(
            self.amplitude, self.frequency, self.phase, self.offset,
            self.start, self.finish, self.sampling_rate,
        )

    @property
    def template_name(self) -> str:
        return self._template_name

    @template_name.setter
    def template_name(self, value: str) -> None:
        if value not in TEMPLATES:
            raise InvalidParameter(
                f"Unknown signal template {value!r}; expected one of {sorted(TEMPLATES)}"
            )
        self._template_name = value

    @property
    def sampling_rate(self) -> float:
        return self._sampling_rate

    @sampling_rate.setter
    def sampling_rate(self, value: float) -> None:
        if value <= 0:
            raise InvalidParameter(f"sampling_rate must be > 0, got {value!r}")
        self._sampling_rate = float(value)

    def create_nodes(self) -> None:
        self.outputs = single_output(self, "Signal", "Out")

    def generate(self) -> Signal:
        interval = 1.0 / self._sampling_rate
        count = max(int(round((self.finish - self.start) * self._sampling_rate)) + 1, 0)
        if self.ignore_last_sample and count:
            count -= 1
        index = np.arange(count)
        x = self.start + index * interval
        arg = 2 * np.pi * self.frequency * x + self.phase
        samples = self.amplitude * TEMPLATES[self._template_name](arg, index) + self.offset
        return Signal(samples, name=self._template_name, start=self.start, sampling_interval=interval)

    def process(self) -> None:
        self._set_output([self.generate()])
