# wavegraph/blocks/logic.py
from __future__ import annotations

from wavegraph.core import wavemath
from wavegraph.core.signal import Signal
from wavegraph.core.wavemath import LogicalOperation

from .base import ProcessingType, coerce_enum
from .operations import _PairedInputBlock


class LogicOperationBlock(_PairedInputBlock):
    """
    Sample-wise logic between two inputs. Non-zero samples are true; the
    output holds 1.0 / 0.0. The block name follows the selected operation.
    """

    description = "Applies a logic operation sample by sample"
    processing_type = ProcessingType.LOGIC
    parameters = ("operation",)

    def __init__(self, operation: LogicalOperation | str = LogicalOperation.AND) -> None:
        self.operation = operation
        super().__init__()

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"Logic {self.operation.value}"

    @property
    def operation(self) -> LogicalOperation:
        return self._operation

    @operation.setter
    def operation(self, value) -> None:
        self._operation = coerce_enum(LogicalOperation, value)

    def combine(self, a: Signal, b: Signal) -> Signal:
        base = a if a.n >= b.n else b
        return base.copy(wavemath.execute_logic_operation(self.operation, a.samples, b.samples))
