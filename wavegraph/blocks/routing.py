# wavegraph/blocks/routing.py
from __future__ import annotations

from wavegraph.core import wavemath
from wavegraph.core.signal import Signal
from wavegraph.core.wavemath import SwitchCriteria

from .base import Block, ProcessingType, coerce_enum, non_negative_int
from .nodes import InputNode, single_output


class MuxBlock(Block):
    """
    Combines the signals of several inputs into one signal list.

    `signal_names` (one per line) renames the output signals in order.
    Changing `input_count` rebuilds the input nodes, dropping their links.
    """

    name = "Mux"
    description = "Combines several input signals into one signal list"
    processing_type = ProcessingType.ROUTING
    parameters = ("input_count", "signal_names")

    def __init__(self, input_count: int = 3, signal_names: str = "") -> None:
        self._input_count = non_negative_int("input_count", input_count)
        self.signal_names = signal_names
        super().__init__()

    @property
    def input_count(self) -> int:
        return self._input_count

    @input_count.setter
    def input_count(self, value: int) -> None:
        self._input_count = non_negative_int("input_count", value)
        for node in self.inputs:
            node.disconnect()
        self.create_nodes()

    def create_nodes(self) -> None:
        self.outputs = single_output(self)
        self.inputs = [
            InputNode(self, f"Input {i}", f"In{i}") for i in range(1, self._input_count + 1)
        ]

    def process(self) -> None:
        names = (self.signal_names or "").splitlines()
        names = [n for n in names if n.strip()]
        output: list[Signal] = []
        for node in self.inputs:
            for signal in node.signals or []:
                cloned = signal.clone()
                if len(output) < len(names):
                    cloned.name = names[len(output)]
                output.append(cloned)
        self._set_output(output)


class SwitchBlock(Block):
    """
    Routes input 1 or input 3 sample by sample.

    A sample of input 1 is passed when it satisfies `switch_criteria`
    against the threshold, otherwise the sample of input 3 is passed. The
    threshold comes from the signals on input 2 (a single-sample signal acts
    as a scalar) or from `static_threshold` when input 2 is empty. A single
    threshold signal serves every index; a longer list that runs out falls
    back to `static_threshold`.
    """

    name = "Switch"
    description = "Passes input 1 or input 3 depending on a threshold"
    processing_type = ProcessingType.ROUTING
    parameters = ("switch_criteria", "static_threshold")

    def __init__(
        self,
        switch_criteria: SwitchCriteria | str = SwitchCriteria.GREATER_OR_EQUAL,
        static_threshold: float = 0.0,
    ) -> None:
        self.switch_criteria = switch_criteria
        self.static_threshold = static_threshold
        super().__init__()

    @property
    def switch_criteria(self) -> SwitchCriteria:
        return self._switch_criteria

    @switch_criteria.setter
    def switch_criteria(self, value) -> None:
        self._switch_criteria = coerce_enum(SwitchCriteria, value)

    def create_nodes(self) -> None:
        self.inputs = [InputNode(self, f"Input {i}", f"In{i}") for i in (1, 2, 3)]
        self.outputs = single_output(self)

    def _threshold(self, thresholds: list[Signal], index: int):
        if not thresholds:
            return self.static_threshold
        if index < len(thresholds):
            signal = thresholds[index]
        elif len(thresholds) == 1:
            signal = thresholds[0]
        else:
            return self.static_threshold
        if signal.n == 1:
            return float(signal.samples[0])
        return signal.samples

    def process(self) -> None:
        first = self._input_signals(0) or []
        thresholds = self._input_signals(1) or []
        third = self._input_signals(2) or []

        if not first or not third:
            self._set_output([s.clone() for s in (first or third)])
            return

        output: list[Signal] = []
        for i in range(max(len(first), len(third))):
            if i < len(first) and i < len(third):
                samples = wavemath.switch(
                    first[i].samples,
                    third[i].samples,
                    self._threshold(thresholds, i),
                    self.switch_criteria,
                )
                output.append(first[i].copy(samples))
            elif i < len(first):
                output.append(first[i].clone())
            else:
                output.append(third[i].clone())
        self._set_output(output)
