# wavegraph/blocks/nodes.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..core.exceptions import BlockError
from ..core.signal import Signal

if TYPE_CHECKING:
    from .base import Block


@dataclass(eq=False)
class BlockNode:
    """
    Connection point owned by a block.

    A node is wired to at most one peer. Connections are symmetric: after
    `a.connect_to(b)`, `a.connecting_node is b` and `b.connecting_node is a`.
    """

    root: Block | None = field(default=None, repr=False)
    name: str = ""
    code: str = ""
    connecting_node: BlockNode | None = field(default=None, repr=False)

    @property
    def is_connected(self) -> bool:
        return self.connecting_node is not None

    def connect_to(self, other: BlockNode) -> None:
        """Wire both sides; any previous peer on either side is released."""
        for node in (self, other):
            old = node.connecting_node
            if old is not None and old is not self and old is not other:
                if old.connecting_node is node:
                    old.connecting_node = None
        self.connecting_node = other
        other.connecting_node = self

    def disconnect(self) -> None:
        peer = self.connecting_node
        if peer is not None and peer.connecting_node is self:
            peer.connecting_node = None
        self.connecting_node = None

    def _clone_for(self, root: Block, keep_link: bool) -> "BlockNode":
        """Duplicate this node for a cloned block (see Block.clone*)."""
        if root is None:
            raise BlockError("A node can only be cloned together with its block.")
        return type(self)(
            root=root,
            name=self.name,
            code=self.code,
            connecting_node=self.connecting_node if keep_link else None,
        )


@dataclass(eq=False)
class InputNode(BlockNode):

    @property
    def signals(self) -> list[Signal] | None:
        """Signals of the wired output node; None when there is nothing to read."""
        peer = self.connecting_node
        if isinstance(peer, OutputNode):
            return peer.signals
        return None


@dataclass(eq=False)
class OutputNode(BlockNode):
    signals: list[Signal] = field(default_factory=list, repr=False)

    def _clone_for(self, root: Block, keep_link: bool) -> "OutputNode":
        node = super()._clone_for(root, keep_link)
        if keep_link:
            node.signals = [s.clone() for s in self.signals]
        return node


def single_input(root: Block, name: str = "Signal", code: str = "In") -> list[InputNode]:
    return [InputNode(root, name, code)]


def doubled_input(root: Block) -> list[InputNode]:
    return [InputNode(root, "Input 1", "In1"), InputNode(root, "Input 2", "In2")]


def single_output(root: Block, name: str = "Output", code: str = "Out") -> list[OutputNode]:
    return [OutputNode(root, name, code)]
