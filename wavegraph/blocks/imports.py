# wavegraph/blocks/imports.py
"""Source blocks: no inputs, one output holding the imported signals."""
from __future__ import annotations

import os
from pathlib import Path

from wavegraph.io.load import load_mdf
from wavegraph.io.text_reader import parse_signals, read_signals

from .base import Block, ProcessingType
from .nodes import single_output


class _DelimitedImportBlock(Block):
    processing_type = ProcessingType.LOAD_SIGNAL
    execute_on_clone = True

    def __init__(self) -> None:
        self.column_separator = ","
        self.signal_start = 0.0
        self.sampling_interval = 1.0
        self.ignore_first_row = False
        self.signal_name_in_first_column = False
        super().__init__()

    @property
    def sampling_rate(self) -> int:
        return int(round(1.0 / self.sampling_interval)) if self.sampling_interval else 0

    def create_nodes(self) -> None:
        self.outputs = single_output(self, "Signal", "Out")

    def _parse_options(self) -> dict:
        return dict(
            separator=self.column_separator,
            ignore_first_row=self.ignore_first_row,
            name_in_first_column=self.signal_name_in_first_column,
            start=self.signal_start,
            sampling_interval=self.sampling_interval,
        )


class ImportFromCSVBlock(_DelimitedImportBlock):
    """
    Reads one signal per row of a delimited text file.

        signal_name,sample1,sample2,sample3
        Signal1, 1.1, 9.12, 0.123
        Signal2, 1.1, 4.56, 0.123

    The header row and the name column are optional. A missing file gives
    an empty output.
    """

    name = "Import CSV"
    description = "Imports signals from a delimited text file"
    parameters = (
        "file_path",
        "column_separator",
        "signal_start",
        "sampling_interval",
        "ignore_first_row",
        "signal_name_in_first_column",
    )

    def __init__(self, file_path: str = "example.csv") -> None:
        self.file_path = file_path
        self.current_directory: str | None = None
        super().__init__()

    def resolve_path(self) -> Path:
        path = Path(self.file_path)
        if not path.is_absolute():
            path = Path(self.current_directory or os.getcwd()) / path
        return path

    def process(self) -> None:
        self._set_output(read_signals(self.resolve_path(), **self._parse_options()))


class ImportFromTextBlock(_DelimitedImportBlock):
    """Same parsing as ImportFromCSVBlock, from the `text` parameter."""

    name = "Import Text"
    description = "Imports signals typed as text, one per line"
    parameters = (
        "text",
        "column_separator",
        "signal_start",
        "sampling_interval",
        "ignore_first_row",
        "signal_name_in_first_column",
    )

    def __init__(self, text: str = "") -> None:
        self.text = text
        super().__init__()

    def process(self) -> None:
        self._set_output(parse_signals((self.text or "").splitlines(), **self._parse_options()))


class ImportFromMDFBlock(Block):
    """Imports measured channels from an ASAM MDF file (all, or `channel_names`)."""

    name = "Import MDF"
    description = "Imports channels of an ASAM MDF measurement file"
    processing_type = ProcessingType.LOAD_SIGNAL
    execute_on_clone = True
    parameters = ("file_path", "channel_names")

    def __init__(self, file_path: str = "", channel_names: tuple[str, ...] | None = None) -> None:
        self.file_path = file_path
        self.channel_names = tuple(channel_names) if channel_names is not None else None
        self.current_directory: str | None = None
        super().__init__()

    def create_nodes(self) -> None:
        self.outputs = single_output(self, "Signal", "Out")

    def process(self) -> None:
        path = Path(self.file_path)
        if not path.is_absolute():
            path = Path(self.current_directory or os.getcwd()) / path
        self._set_output(load_mdf(path, self.channel_names))
