# wavegraph/core/__init__.py
"""
Core domain objects for wavegraph.

This module defines the graph-agnostic data model and kernels:
- Signal: named sample buffer with timing metadata
- wavemath: stateless array primitives
- dwt: discrete wavelet decomposition / reconstruction
- image_match: perceptual matching of pixel grids via the DWT

The core layer is independent from blocks and I/O.
"""

from .signal import Signal, format_signals
from .dwt import MotherWavelet, DecompositionLevel, decompose, dwt, idwt, reconstruct
from .image_match import HashSettings, flatten_grid, fingerprint, match_coefficients, match_grids
from .exceptions import (
    CoreError,
    InvalidSignal,
    BlockError,
    ConfigurationError,
    InvalidParameter,
    CoefficientLengthMismatch,
    UnknownWavelet,
)


__all__ = [
    # signal
    "Signal",
    "format_signals",

    # wavelet kernel
    "MotherWavelet",
    "DecompositionLevel",
    "decompose",
    "dwt",
    "idwt",
    "reconstruct",

    # image matching
    "HashSettings",
    "flatten_grid",
    "fingerprint",
    "match_coefficients",
    "match_grids",

    # exceptions
    "CoreError",
    "InvalidSignal",
    "BlockError",
    "ConfigurationError",
    "InvalidParameter",
    "CoefficientLengthMismatch",
    "UnknownWavelet",
]
