# test/test_text_reader.py
import logging

from wavegraph.blocks import ImportFromCSVBlock, ImportFromTextBlock, ScalarOperationBlock
from wavegraph.io.load import load_csv
from wavegraph.io.text_reader import parse_line, parse_signals, read_signals

CSV_TEXT = "1.1,9.12355,0.123456\n-1.1,0.123456"


def test_parse_line():
    assert parse_line("1, 2.5,,3") == ("", [1.0, 2.5, 3.0])
    assert parse_line("a;1;2", ";", name_in_first_column=True) == ("a", [1.0, 2.0])
    # Unparsable tokens are skipped.
    assert parse_line("1,abc,3") == ("", [1.0, 3.0])


def test_parse_signals_rows():
    signals = parse_signals(CSV_TEXT.splitlines())
    assert [s.n for s in signals] == [3, 2]
    assert [s.name for s in signals] == ["Line 1", "Line 2"]
    assert signals[0].to_string() == "1.1 9.12355 0.123456"


def test_parse_signals_header_and_names():
    lines = [
        "signal_name,sample1,sample2,sample3",
        "Signal1, 1.1, 9.12, 0.123",
        "Signal2, 1.1, 4.56, 0.123",
    ]
    signals = parse_signals(lines, ignore_first_row=True, name_in_first_column=True)
    assert [s.name for s in signals] == ["Signal1", "Signal2"]
    assert signals[1].to_string(2) == "1.10 4.56 0.12"


def test_parse_signals_drops_empty_rows():
    signals = parse_signals(["", "a,b", "4"])
    assert len(signals) == 1
    assert signals[0].name == "Line 3"


def test_parse_signals_timing():
    signal = parse_signals(["1,2,3"], start=2.0, sampling_interval=0.5)[0]
    assert signal.start == 2.0
    assert signal.finish == 3.0
    assert signal.sampling_rate == 2


def test_read_signals_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="wavegraph.io.text_reader"):
        assert read_signals(tmp_path / "missing.csv") == []
    assert "Cannot read signals" in caplog.text


def test_read_signals_binary_file(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\x00\xff\xfe\x01garbage\x00")
    assert read_signals(path) == []


def test_load_csv(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(CSV_TEXT)
    assert [s.n for s in load_csv(path)] == [3, 2]


class TestImportBlocks:

    def test_text_block(self):
        block = ImportFromTextBlock("1;2\n3;4;5")
        block.column_separator = ";"
        block.sampling_interval = 0.5
        block.execute()

        signals = block.outputs[0].signals
        assert [s.to_string(0) for s in signals] == ["1 2", "3 4 5"]
        assert signals[1].finish == 1.0
        assert block.sampling_rate == 2

    def test_csv_block_without_cascade(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text(CSV_TEXT)
        block = ImportFromCSVBlock(str(path))
        scalar = ScalarOperationBlock("Sum", 1.0)
        block.connect_to(scalar)

        block.cascade = False
        block.execute()

        assert [s.n for s in block.outputs[0].signals] == [3, 2]
        assert scalar.outputs[0].signals == []

        copy = block.clone()
        assert copy.file_path == str(path)
        assert [s.n for s in copy.outputs[0].signals] == [3, 2]
        assert not copy.outputs[0].is_connected

    def test_csv_block_relative_path(self, tmp_path):
        (tmp_path / "data.csv").write_text(CSV_TEXT)
        block = ImportFromCSVBlock("data.csv")
        block.current_directory = str(tmp_path)

        assert block.resolve_path() == tmp_path / "data.csv"
        block.execute()
        assert len(block.outputs[0].signals) == 2

    def test_csv_block_missing_file(self, tmp_path):
        block = ImportFromCSVBlock(str(tmp_path / "nope.csv"))
        block.execute()
        assert block.outputs[0].signals == []


def test_parse_line_accepts_plain_decimals_only():
    assert parse_line("1,nan,1_000,inf,-2.5,.5,3.,1e3") == ("", [1.0, -2.5, 0.5, 3.0])
