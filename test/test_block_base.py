# test/test_block_base.py
import logging

import pytest

from wavegraph.blocks import (
    DWTBlock,
    ImportFromTextBlock,
    NormalDistributionBlock,
    RepeatBlock,
    ScalarOperationBlock,
    UniqueBlock,
)
from wavegraph.core.exceptions import InvalidParameter
from wavegraph.core.signal import format_signals


def _source(text: str = "1,2,3,4") -> ImportFromTextBlock:
    block = ImportFromTextBlock(text)
    block.execute()
    return block


def test_execute_cascades_downstream():
    source = ImportFromTextBlock("1,2")
    scalar = ScalarOperationBlock("Sum", 1.0)
    repeat = RepeatBlock(frame_size=1, repetition_count=1)
    source.connect_to(scalar)
    scalar.connect_to(repeat)

    source.execute()

    assert format_signals(scalar.outputs[0].signals, 0) == "2 3"
    assert format_signals(repeat.outputs[0].signals, 0) == "2 2 3 3"


def test_cascade_off_stops_propagation():
    source = ImportFromTextBlock("1,2")
    scalar = ScalarOperationBlock("Sum", 1.0)
    source.connect_to(scalar)
    source.execute()
    assert format_signals(scalar.outputs[0].signals, 0) == "2 3"

    source.text = "5,6"
    source.cascade = False
    source.execute()

    assert format_signals(source.outputs[0].signals, 0) == "5 6"
    # Downstream keeps its previous output.
    assert format_signals(scalar.outputs[0].signals, 0) == "2 3"


def test_unconnected_block_keeps_its_output():
    unique = UniqueBlock()
    unique.execute()
    assert unique.outputs[0].signals == []


def test_connect_to_uses_first_free_nodes():
    dwt = DWTBlock()
    a, b = UniqueBlock(), UniqueBlock()
    dwt.connect_to(a)
    dwt.connect_to(b)

    assert dwt.outputs[0].connecting_node is a.inputs[0]
    assert dwt.outputs[1].connecting_node is b.inputs[0]


def test_connect_to_without_nodes_is_a_no_op():
    source, other = ImportFromTextBlock("1"), ImportFromTextBlock("2")
    source.connect_to(other)
    assert not source.outputs[0].is_connected


def test_connect_to_falls_back_to_first_nodes():
    source = _source("1")
    a, b = UniqueBlock(), UniqueBlock()
    source.connect_to(a)
    source.connect_to(b)

    # The only output is rewired; a is released.
    assert source.outputs[0].connecting_node is b.inputs[0]
    assert a.inputs[0].connecting_node is None


def test_dwt_fans_out_to_both_bands():
    source = ImportFromTextBlock("1,2,3,4")
    dwt = DWTBlock()
    appr, det = ScalarOperationBlock("Multiply", 1.0), ScalarOperationBlock("Multiply", 1.0)
    source.connect_to(dwt)
    dwt.connect_to(appr)
    dwt.connect_to(det)

    source.execute()

    assert format_signals(appr.outputs[0].signals, 4) == "2.1213 4.9497"
    assert format_signals(det.outputs[0].signals, 4) == "-0.7071 -0.7071"


def test_cycle_terminates(caplog):
    a, b = ScalarOperationBlock("Sum", 1.0), ScalarOperationBlock("Sum", 1.0)
    a.connect_to(b)
    b.connect_to(a)

    with caplog.at_level(logging.DEBUG, logger="wavegraph.blocks.base"):
        a.execute()

    assert "Cascade cycle" in caplog.text


def test_error_aborts_cascade_and_keeps_upstream_output():
    source = ImportFromTextBlock("1,2")
    scalar = ScalarOperationBlock("Sum", 1.0)
    normal = NormalDistributionBlock(standard_deviation=-1.0)
    tail = UniqueBlock()
    source.connect_to(scalar)
    scalar.connect_to(normal)
    normal.connect_to(tail)

    with pytest.raises(InvalidParameter):
        source.execute()

    assert format_signals(scalar.outputs[0].signals, 0) == "2 3"
    assert normal.outputs[0].signals == []
    assert tail.outputs[0].signals == []


def test_clone_is_independent():
    source = _source("1,2")
    scalar = ScalarOperationBlock("Sum", 1.0)
    source.connect_to(scalar)
    source.execute()

    copy = scalar.clone()

    assert copy.id != scalar.id
    assert copy.get_parameters() == scalar.get_parameters()
    assert not copy.inputs[0].is_connected
    assert copy.outputs[0].signals == []
    assert copy.inputs[0].root is copy

    copy.value = 10.0
    assert scalar.value == 1.0


def test_clone_of_source_executes():
    source = _source("7,8")
    copy = source.clone()
    assert format_signals(copy.outputs[0].signals, 0) == "7 8"
    assert copy.outputs[0].signals[0] is not source.outputs[0].signals[0]


def test_clone_with_links_keeps_peers():
    source = _source("1,2")
    scalar = ScalarOperationBlock("Sum", 1.0)
    tail = UniqueBlock()
    source.connect_to(scalar)
    scalar.connect_to(tail)
    source.execute()

    linked = scalar.clone_with_links()

    assert linked.id != scalar.id
    assert linked.inputs[0].connecting_node is source.outputs[0]
    assert linked.outputs[0].connecting_node is tail.inputs[0]
    assert linked.inputs[0].root is linked
    # Peers still point at the original.
    assert source.outputs[0].connecting_node is scalar.inputs[0]
    assert format_signals(linked.outputs[0].signals, 0) == "2 3"
    assert linked.outputs[0].signals[0] is not scalar.outputs[0].signals[0]


def test_fresh_ids_and_parameters():
    a, b = RepeatBlock(), RepeatBlock()
    assert a.id != b.id
    assert a.has_parameters()
    assert a.get_parameters() == {"frame_size": 1, "repetition_count": 1, "keep_sampling_rate": True}
    assert a.get_processing_type_name() == "Operation"
