# wavegraph/core/image_match.py
"""
Perceptual image matching on top of the DWT kernel.

Images arrive here already resized and binarized (or grayscale) as 2D pixel
grids; decoding and resizing belong to the image library on the caller side.
A grid is flattened in boustrophedon order (even rows left-to-right, odd rows
right-to-left), decomposed for one level, and one band is used as the
fingerprint. Two fingerprints are compared with an RMS distance.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .dwt import MotherWavelet, decompose, DecompositionLevel
from .exceptions import CoefficientLengthMismatch, InvalidParameter
from .signal import Signal

logger = logging.getLogger(__name__)

_BANDS = {"detail", "approximation"}


@dataclass(frozen=True, slots=True)
class HashSettings:
    """
    Parameters shared by both sides of a comparison.

    - hash_size: expected side length of the square pixel grid
    - wavelet: mother wavelet name
    - band: "detail" or "approximation"
    - threshold: if set, grid values above it become 1 and the rest 0
    """
    hash_size: int = 256
    wavelet: str = "haar"
    band: str = "detail"
    threshold: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.hash_size, int) or self.hash_size <= 0:
            raise InvalidParameter("HashSettings.hash_size must be a positive integer.")
        if self.band not in _BANDS:
            raise InvalidParameter(f"HashSettings.band must be one of {sorted(_BANDS)}.")
        # Fail early on unknown names.
        MotherWavelet.from_name(self.wavelet)


def flatten_grid(grid) -> np.ndarray:
    g = np.asarray(grid, dtype=np.float64)
    if g.ndim != 2:
        raise InvalidParameter(f"Pixel grid must be 2D, got shape {g.shape}")
    rows = g.copy()
    rows[1::2] = rows[1::2, ::-1]
    return rows.reshape(-1)


def binarize(samples, threshold: float) -> np.ndarray:
    return (np.asarray(samples, dtype=np.float64) > threshold).astype(np.float64)


def grid_signal(grid, settings: HashSettings | None = None) -> Signal:
    settings = settings or HashSettings()
    g = np.asarray(grid)
    if g.shape != (settings.hash_size, settings.hash_size):
        logger.warning(
            "Grid shape %s differs from hash_size %d", g.shape, settings.hash_size
        )
    samples = flatten_grid(g)
    if settings.threshold is not None:
        samples = binarize(samples, settings.threshold)
    return Signal(samples, name="image")


def decompose_grid(grid, settings: HashSettings | None = None) -> DecompositionLevel:
    settings = settings or HashSettings()
    return decompose(grid_signal(grid, settings), settings.wavelet, levels=1)[0]


def fingerprint(grid, settings: HashSettings | None = None) -> np.ndarray:
    settings = settings or HashSettings()
    level = decompose_grid(grid, settings)
    return level.detail if settings.band == "detail" else level.approximation


def rms_distance(a, b) -> float:
    x = np.asarray(a, dtype=np.float64)
    y = np.asarray(b, dtype=np.float64)
    if x.size != y.size:
        raise CoefficientLengthMismatch(x.size, y.size)
    if x.size == 0:
        raise InvalidParameter("Cannot compare empty coefficient vectors.")
    return float(np.sqrt(np.mean((x - y) ** 2)))


def match_coefficients(a, b) -> float:
    """Similarity percentage 100 * (1 - rms), clamped at 0."""
    match = (1.0 - rms_distance(a, b)) * 100.0
    return max(match, 0.0)


def match_grids(grid1, grid2, settings: HashSettings | None = None) -> float:
    settings = settings or HashSettings()
    return match_coefficients(fingerprint(grid1, settings), fingerprint(grid2, settings))
