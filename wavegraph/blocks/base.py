# wavegraph/blocks/base.py
"""
Processing block base class.

A block owns ordered input and output nodes. `execute()` evaluates the block
and, when `cascade` is on, pushes execution to every block wired to its
outputs (depth-first, in output order).

Graphs are not thread-safe: concurrent `connect_to` / `execute` calls on the
same graph are undefined behaviour. Confine a graph to one thread or guard it
with a lock.
"""
from __future__ import annotations

import copy
import logging
import uuid
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, TypeVar

from ..core.exceptions import InvalidParameter
from ..core.signal import Signal
from .nodes import InputNode, OutputNode

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: Any) -> E:
    """Accept an enum member, its value ("Sum") or its name ("SUM")."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    if isinstance(value, str) and value.upper() in enum_cls.__members__:
        return enum_cls[value.upper()]
    raise InvalidParameter(f"{value!r} is not a valid {enum_cls.__name__}")


def non_negative_int(name: str, value: Any) -> int:
    try:
        valid = not isinstance(value, bool) and int(value) == value and value >= 0
    except (TypeError, ValueError):
        valid = False
    if not valid:
        raise InvalidParameter(f"{name} must be a non-negative integer, got {value!r}")
    return int(value)


class ProcessingType(Enum):
    LOAD_SIGNAL = "LoadSignal"
    CREATE_SIGNAL = "CreateSignal"
    OPERATION = "Operation"
    LOGIC = "Logic"
    INSERT_DISTURBANCE = "InsertDisturbance"
    EXPORT = "Export"
    TRANSFORM = "Transform"
    ROUTING = "Routing"


class Block(ABC):
    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    processing_type: ClassVar[ProcessingType]

    # Attribute names copied by clone() and reported by get_parameters().
    parameters: ClassVar[tuple[str, ...]] = ()

    # Source blocks re-evaluate after a value clone so their output reflects
    # their own parameters.
    execute_on_clone: ClassVar[bool] = False

    def __init__(self) -> None:
        self.id = uuid.uuid4()
        self.cascade = True
        self.inputs: list[InputNode] = []
        self.outputs: list[OutputNode] = []
        self.create_nodes()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={str(self.id)[:8]})"

    # ---- per-kind contract ----
    @abstractmethod
    def create_nodes(self) -> None:
        """(Re)build self.inputs / self.outputs for the current parameters."""

    @abstractmethod
    def process(self) -> None:
        """Evaluate this block only: read the inputs, replace the outputs."""

    # ---- execution ----
    def execute(self) -> None:
        """
        Evaluate this block and cascade downstream.

        Traversal uses an explicit stack. A block that is already active on
        the current cascade path is skipped, so cycles terminate. An exception
        aborts the remaining cascade; outputs produced so far are kept.
        """
        active: set[uuid.UUID] = set()
        stack: list[tuple[Block, bool]] = [(self, True)]

        while stack:
            block, entering = stack.pop()
            if not entering:
                active.discard(block.id)
                continue
            if block.id in active:
                logger.debug("Cascade cycle at %r, skipping", block)
                continue

            active.add(block.id)
            logger.debug("Executing %r", block)
            block.process()
            stack.append((block, False))

            if not block.cascade:
                continue
            for node in reversed(block.outputs):
                peer = node.connecting_node
                if peer is not None and peer.root is not None:
                    stack.append((peer.root, True))

    # ---- wiring ----
    def connect_to(self, block: "Block") -> None:
        """Wire the first free output of self to the first free input of `block`."""
        if not self.outputs or not block.inputs:
            return
        output = next((n for n in self.outputs if n.connecting_node is None), self.outputs[0])
        input_ = next((n for n in block.inputs if n.connecting_node is None), block.inputs[0])
        output.connect_to(input_)

    # ---- cloning ----
    def clone(self) -> "Block":
        """
        Value clone: same parameters, fresh identity, new unconnected nodes
        with empty outputs.
        """
        block = copy.copy(self)
        block.id = uuid.uuid4()
        block.inputs = []
        block.outputs = []
        block.create_nodes()
        if block.execute_on_clone:
            block.execute()
        return block

    def clone_with_links(self) -> "Block":
        """
        Clone keeping every node's peer. The peers still point back at the
        original block's nodes. Output signals are deep-copied, then the
        clone executes.
        """
        block = copy.copy(self)
        block.id = uuid.uuid4()
        block.inputs = [n._clone_for(block, keep_link=True) for n in self.inputs]
        block.outputs = [n._clone_for(block, keep_link=True) for n in self.outputs]
        block.execute()
        return block

    # ---- parameters ----
    def get_parameters(self) -> dict[str, Any]:
        return {p: getattr(self, p) for p in self.parameters}

    def has_parameters(self) -> bool:
        return bool(self.parameters)

    def get_processing_type_name(self) -> str:
        return self.processing_type.value

    # ---- helpers for subclasses ----
    def _input_signals(self, index: int = 0) -> list[Signal] | None:
        if index >= len(self.inputs):
            return None
        return self.inputs[index].signals

    def _set_output(self, signals: list[Signal], index: int = 0) -> None:
        self.outputs[index].signals = signals
