# wavegraph/blocks/__init__.py
"""
Block graph for wavegraph.

- BlockNode / InputNode / OutputNode: symmetric, single-peer connection points
- Block: processing unit with cascading execution and two cloning contracts
- catalog: the concrete block kinds, by name
"""

from .nodes import BlockNode, InputNode, OutputNode
from .base import Block, ProcessingType
from .imports import ImportFromCSVBlock, ImportFromTextBlock, ImportFromMDFBlock
from .generate import GenerateSignalBlock
from .operations import (
    RepeatBlock,
    UniqueBlock,
    InterpolationBlock,
    NormalDistributionBlock,
    ScalarOperationBlock,
    SampleBasedOperationBlock,
)
from .logic import LogicOperationBlock
from .routing import MuxBlock, SwitchBlock
from .transform import DWTBlock


_CATALOG: tuple[type[Block], ...] = (
    ImportFromCSVBlock,
    ImportFromTextBlock,
    ImportFromMDFBlock,
    GenerateSignalBlock,
    RepeatBlock,
    UniqueBlock,
    InterpolationBlock,
    NormalDistributionBlock,
    ScalarOperationBlock,
    SampleBasedOperationBlock,
    LogicOperationBlock,
    MuxBlock,
    SwitchBlock,
    DWTBlock,
)


def block_types() -> dict[str, type[Block]]:
    """Concrete block classes keyed by class name."""
    return {cls.__name__: cls for cls in _CATALOG}


__all__ = [
    # nodes
    "BlockNode",
    "InputNode",
    "OutputNode",

    # base
    "Block",
    "ProcessingType",
    "block_types",

    # catalog
    "ImportFromCSVBlock",
    "ImportFromTextBlock",
    "ImportFromMDFBlock",
    "GenerateSignalBlock",
    "RepeatBlock",
    "UniqueBlock",
    "InterpolationBlock",
    "NormalDistributionBlock",
    "ScalarOperationBlock",
    "SampleBasedOperationBlock",
    "LogicOperationBlock",
    "MuxBlock",
    "SwitchBlock",
    "DWTBlock",
]
