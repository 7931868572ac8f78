# wavegraph/blocks/operations.py
from __future__ import annotations

from abc import abstractmethod
from typing import Callable

from wavegraph.core import wavemath
from wavegraph.core.exceptions import InvalidParameter
from wavegraph.core.signal import Signal
from wavegraph.core.wavemath import InterpolationMode, Operation

from .base import Block, ProcessingType, coerce_enum, non_negative_int
from .nodes import doubled_input, single_input, single_output


class _SingleInputBlock(Block):
    """One input, one output; every input signal maps to one output signal."""

    processing_type = ProcessingType.OPERATION

    def create_nodes(self) -> None:
        self.inputs = single_input(self)
        self.outputs = single_output(self)

    @abstractmethod
    def transform(self, signal: Signal) -> Signal:
        """Derive one output signal from one input signal."""

    def process(self) -> None:
        signals = self._input_signals(0)
        if signals is None:
            return
        self._set_output([self.transform(s) for s in signals])


def pair_signals(
    first: list[Signal], second: list[Signal], combine: Callable[[Signal, Signal], Signal]
) -> list[Signal]:
    """
    Combine two signal lists index by index.

    The longer list drives; a shorter non-empty list reuses its first signal.
    When one list is empty the other passes through as clones.
    """
    if not first or not second:
        return [s.clone() for s in (first or second)]
    size = max(len(first), len(second))
    return [
        combine(first[i] if i < len(first) else first[0],
                second[i] if i < len(second) else second[0])
        for i in range(size)
    ]


class _PairedInputBlock(Block):
    """Two inputs combined pairwise into one output."""

    def create_nodes(self) -> None:
        self.inputs = doubled_input(self)
        self.outputs = single_output(self)

    @abstractmethod
    def combine(self, a: Signal, b: Signal) -> Signal:
        """Derive one output signal from a pair of input signals."""

    def process(self) -> None:
        first, second = self._input_signals(0), self._input_signals(1)
        if first is None and second is None:
            return
        self._set_output(pair_signals(first or [], second or [], self.combine))


class RepeatBlock(_SingleInputBlock):
    """
    Repeats frames of samples.

    frame_size=4, repetition_count=1 turns 1 9 0 1 2 5 -4 4 into
    1 9 0 1 1 9 0 1 2 5 -4 4 2 5 -4 4.
    """

    name = "Repeat"
    description = "Repeats each frame of samples"
    parameters = ("frame_size", "repetition_count", "keep_sampling_rate")

    def __init__(self, frame_size: int = 1, repetition_count: int = 1, keep_sampling_rate: bool = True) -> None:
        self.frame_size = frame_size
        self.repetition_count = repetition_count
        self.keep_sampling_rate = keep_sampling_rate
        super().__init__()

    @property
    def frame_size(self) -> int:
        return self._frame_size

    @frame_size.setter
    def frame_size(self, value: int) -> None:
        self._frame_size = non_negative_int("frame_size", value)

    @property
    def repetition_count(self) -> int:
        return self._repetition_count

    @repetition_count.setter
    def repetition_count(self, value: int) -> None:
        self._repetition_count = non_negative_int("repetition_count", value)

    def transform(self, signal: Signal) -> Signal:
        return wavemath.repeat_signal(signal, self.frame_size, self.repetition_count, self.keep_sampling_rate)


class UniqueBlock(_SingleInputBlock):
    """Removes duplicated samples; sorts them unless sort_samples is False."""

    name = "Unique"
    description = "Removes duplicated samples"
    parameters = ("sort_samples",)

    def __init__(self, sort_samples: bool = True) -> None:
        self.sort_samples = sort_samples
        super().__init__()

    def transform(self, signal: Signal) -> Signal:
        if self.sort_samples:
            return signal.copy(wavemath.unique_sorted(signal.samples))
        return signal.copy(wavemath.unique(signal.samples))


class InterpolationBlock(_SingleInputBlock):
    name = "Interpolate"
    description = "Increases the sampling rate by interpolating new samples"
    parameters = ("mode", "factor")

    def __init__(self, mode: InterpolationMode | str = InterpolationMode.CUBIC, factor: int = 5) -> None:
        self.mode = mode
        self.factor = factor
        super().__init__()

    @property
    def mode(self) -> InterpolationMode:
        return self._mode

    @mode.setter
    def mode(self, value) -> None:
        self._mode = coerce_enum(InterpolationMode, value)

    @property
    def factor(self) -> int:
        return self._factor

    @factor.setter
    def factor(self, value: int) -> None:
        self._factor = non_negative_int("factor", value)

    def transform(self, signal: Signal) -> Signal:
        return wavemath.interpolate(signal, self.factor, self.mode)


class NormalDistributionBlock(_SingleInputBlock):
    """
    Gaussian pdf of every sample, sorted ascending. A zero mean or standard
    deviation parameter means "estimate it from the signal".
    """

    name = "Normal"
    description = "Normal (Gaussian) probability density of the samples"
    parameters = ("mean", "standard_deviation")

    def __init__(self, mean: float = 0.0, standard_deviation: float = 0.0) -> None:
        self.mean = mean
        self.standard_deviation = standard_deviation
        super().__init__()

    def transform(self, signal: Signal) -> Signal:
        if self.standard_deviation < 0:
            raise InvalidParameter("standard_deviation must be >= 0")
        samples = wavemath.normal_distribution(
            signal.samples,
            self.mean or None,
            self.standard_deviation or None,
        )
        return signal.copy(samples)


class ScalarOperationBlock(_SingleInputBlock):
    name = "Scalar"
    description = "Applies an arithmetic operation with a constant to every sample"
    parameters = ("operation", "value")

    def __init__(self, operation: Operation | str = Operation.SUM, value: float = 1.0) -> None:
        self.operation = operation
        self.value = value
        super().__init__()

    @property
    def operation(self) -> Operation:
        return self._operation

    @operation.setter
    def operation(self, value) -> None:
        self._operation = coerce_enum(Operation, value)

    def transform(self, signal: Signal) -> Signal:
        return signal.copy(wavemath.execute_scalar_operation(self.operation, signal.samples, self.value))


class SampleBasedOperationBlock(_PairedInputBlock):
    """Sample-by-sample arithmetic between the signals of two inputs."""

    name = "Sample-based operation"
    description = "Applies an arithmetic operation sample by sample"
    processing_type = ProcessingType.OPERATION
    parameters = ("operation",)

    def __init__(self, operation: Operation | str = Operation.SUM) -> None:
        self.operation = operation
        super().__init__()

    @property
    def operation(self) -> Operation:
        return self._operation

    @operation.setter
    def operation(self, value) -> None:
        self._operation = coerce_enum(Operation, value)

    def combine(self, a: Signal, b: Signal) -> Signal:
        base = a if a.n >= b.n else b
        return base.copy(wavemath.execute_operation(self.operation, a.samples, b.samples))
