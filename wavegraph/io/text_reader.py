# wavegraph/io/text_reader.py
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from wavegraph.core.signal import Signal

logger = logging.getLogger(__name__)

# Plain decimal numbers only: no exponent, underscores, nan or inf.
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")


def _parse_value(token: str) -> float | None:
    # Invariant culture: "." is the only decimal separator.
    token = token.strip()
    if not _NUMBER.fullmatch(token):
        return None
    return float(token)


def parse_line(
    line: str,
    separator: str = ",",
    name_in_first_column: bool = False,
) -> tuple[str, list[float]]:
    """Split one row into (name, values). Unparsable tokens are skipped."""
    tokens = [t for t in line.split(separator) if t != ""] if separator else [line]
    name = ""
    values: list[float] = []
    for column, token in enumerate(tokens):
        if column == 0 and name_in_first_column:
            name = token.strip()
            continue
        value = _parse_value(token)
        if value is None:
            logger.debug("Skipping unparsable token %r", token)
            continue
        values.append(value)
    return name, values


def parse_signals(
    lines: Iterable[str],
    separator: str = ",",
    ignore_first_row: bool = False,
    name_in_first_column: bool = False,
    start: float = 0.0,
    sampling_interval: float = 1.0,
) -> list[Signal]:
    """
    One signal per row.

    Rows without any numeric value are dropped. Rows without a name are
    called "Line <n>" after their 1-based line number.
    """
    signals: list[Signal] = []
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1 and ignore_first_row:
            continue
        if not line.strip():
            continue
        name, values = parse_line(line.rstrip("\r\n"), separator, name_in_first_column)
        if not values:
            logger.debug("Dropping line %d: no values", line_number)
            continue
        signals.append(
            Signal(
                values,
                name=name or f"Line {line_number}",
                start=start,
                finish=start + sampling_interval * len(values) - sampling_interval,
                sampling_interval=sampling_interval,
            )
        )
    return signals


def read_signals(path: str | Path, **options) -> list[Signal]:
    """
    Read a delimited text file. A missing or unreadable file gives an
    empty list.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Cannot read signals from %s: %s", path, e)
        return []
    signals = parse_signals(text.splitlines(), **options)
    logger.info("Imported %d signal(s) from %s", len(signals), path)
    return signals
