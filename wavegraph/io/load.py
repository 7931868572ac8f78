# wavegraph/io/load.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np
from asammdf.blocks.utils import MdfException

from wavegraph.core.signal import Signal
from wavegraph.io.mdf_reader import MdfSignalReader, RawChannelInfo
from wavegraph.io.text_reader import read_signals

logger = logging.getLogger(__name__)


def load_csv(path: str | Path, **options) -> list[Signal]:
    return read_signals(path, **options)


def _to_signal(raw: RawChannelInfo) -> Signal:
    t, v = raw.load()
    interval = float(np.median(np.diff(t))) if t.size > 1 else 1.0
    start = float(t[0]) if t.size else 0.0
    finish = float(t[-1]) if t.size else 0.0
    return Signal(v, name=raw.name, start=start, finish=finish, sampling_interval=interval)


def load_mdf(path: str | Path, channel_names: Iterable[str] | None = None) -> list[Signal]:
    """
    Load measured channels of an MDF file as signals.

    A missing or unreadable file gives an empty list; unknown channel names
    are skipped.
    """
    path = Path(path)
    if not path.is_file():
        logger.warning("MDF file not found: %s", path)
        return []
    try:
        reader = MdfSignalReader(str(path))
    except (OSError, MdfException) as e:
        logger.warning("Cannot read MDF file %s: %s", path, e)
        return []

    with reader:
        if channel_names is None:
            raws = reader.list_channels()
        else:
            available = {raw.name: raw for raw in reader.list_channels()}
            raws = []
            for name in channel_names:
                if name in available:
                    raws.append(available[name])
                else:
                    logger.warning("Channel '%s' not found in %s", name, path)
        signals = [_to_signal(raw) for raw in raws]

    logger.info("Imported %d signal(s) from %s", len(signals), path)
    return signals
