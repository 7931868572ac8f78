# wavegraph/io/mdf_reader.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Protocol

import numpy as np
from asammdf import MDF


@dataclass
class RawChannelInfo:
    """
    Metadata + lazy loader for one measured channel of an MDF file.

    The loader returns (time, values) for this channel only.
    """

    name: str
    unit: str | None
    group_index: int
    channel_index: int
    loader: Callable[[], tuple["np.ndarray", "np.ndarray"]]

    def load(self) -> tuple[np.ndarray, np.ndarray]:
        t, v = self.loader()
        return np.asarray(t, dtype=np.float64), np.asarray(v, dtype=np.float64)


class SignalFileReader(Protocol):
    """Protocol for measurement-file readers feeding the import blocks."""

    def list_channels(self) -> List[RawChannelInfo]:
        ...

    def read_channels(self, channel_names: Iterable[str]) -> dict[str, RawChannelInfo]:
        ...


class MdfSignalReader:
    """
    Concrete reader using asammdf.MDF.

    Only measured (non-master) channels are listed; the master channel of
    each group provides the timestamps.
    """

    def __init__(self, path: str):
        self._mdf = MDF(path)
        self._channels: dict[str, RawChannelInfo] = {}
        self._build_index()

    def close(self) -> None:
        self._mdf.close()

    def __enter__(self) -> "MdfSignalReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- channel index ----
    def _build_index(self) -> None:
        for group_index, group in enumerate(self._mdf.groups):
            for channel_index, channel in enumerate(group.channels):
                name = channel.name
                # Master (time) channels and duplicates are not signals.
                if channel_index == self._master_index(group_index) or name in self._channels:
                    continue

                def make_loader(g_i: int = group_index, c_i: int = channel_index):
                    def _loader() -> tuple[np.ndarray, np.ndarray]:
                        sig = self._mdf.get(group=g_i, index=c_i)
                        return sig.timestamps, sig.samples

                    return _loader

                self._channels[name] = RawChannelInfo(
                    name=name,
                    unit=getattr(channel, "unit", None) or None,
                    group_index=group_index,
                    channel_index=channel_index,
                    loader=make_loader(),
                )

    def _master_index(self, group_index: int) -> int | None:
        return self._mdf.masters_db.get(group_index)

    # ---- SignalFileReader ----
    def list_channels(self) -> List[RawChannelInfo]:
        return list(self._channels.values())

    def read_channels(self, channel_names: Iterable[str]) -> dict[str, RawChannelInfo]:
        result: dict[str, RawChannelInfo] = {}
        for name in channel_names:
            if name not in self._channels:
                raise KeyError(f"Channel '{name}' not found in MDF")
            result[name] = self._channels[name]
        return result
