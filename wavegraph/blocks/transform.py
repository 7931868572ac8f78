# wavegraph/blocks/transform.py
from __future__ import annotations

from wavegraph.core.dwt import MotherWavelet, decompose
from wavegraph.core.exceptions import InvalidParameter
from wavegraph.core.signal import Signal

from .base import Block, ProcessingType
from .nodes import OutputNode, single_input


class DWTBlock(Block):
    """
    Discrete wavelet decomposition.

    For every input signal and every level, output 0 receives the
    approximation band and output 1 the detail band, in increasing level
    order. Band signals keep the input start time; their sampling interval
    doubles at each level.
    """

    name = "DWT"
    description = "Discrete wavelet transform (approximation and detail bands)"
    processing_type = ProcessingType.TRANSFORM
    parameters = ("wavelet_name", "levels")

    def __init__(self, wavelet_name: str = "haar", levels: int = 1) -> None:
        self.wavelet_name = wavelet_name
        self.levels = levels
        super().__init__()

    @property
    def wavelet_name(self) -> str:
        return self._wavelet.name

    @wavelet_name.setter
    def wavelet_name(self, value: str) -> None:
        self._wavelet = MotherWavelet.from_name(value)

    @property
    def levels(self) -> int:
        return self._levels

    @levels.setter
    def levels(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InvalidParameter(f"levels must be an integer >= 1, got {value!r}")
        self._levels = value

    def create_nodes(self) -> None:
        self.inputs = single_input(self)
        self.outputs = [
            OutputNode(self, "Approximation", "Appr"),
            OutputNode(self, "Details", "Det"),
        ]

    def _band(self, source: Signal, samples, label: str, level: int) -> Signal:
        band = source.copy(samples)
        band.name = f"{source.name} - {label} {level}".strip(" -")
        band.sampling_interval = source.sampling_interval * 2 ** level
        n = band.n
        band.finish = band.start + band.sampling_interval * (n - 1) if n else band.start
        return band

    def process(self) -> None:
        signals = self._input_signals(0)
        if signals is None:
            return
        approximations: list[Signal] = []
        details: list[Signal] = []
        for signal in signals:
            for level in decompose(signal, self._wavelet, self._levels):
                approximations.append(self._band(signal, level.approximation, "approximation", level.level))
                details.append(self._band(signal, level.detail, "detail", level.level))
        self._set_output(approximations, 0)
        self._set_output(details, 1)
