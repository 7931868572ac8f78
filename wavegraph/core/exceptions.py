# wavegraph/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all wavegraph exceptions."""


# ---- Validation / construction errors ----
class InvalidSignal(CoreError):
    """Raised when a Signal is constructed or assigned with invalid samples."""


class BlockError(CoreError):
    """Raised when the block graph is used inconsistently."""


# ---- Configuration / precondition errors ----
class ConfigurationError(CoreError):
    """Base error for invalid configuration or violated preconditions."""


class InvalidParameter(ConfigurationError, ValueError):
    """Raised when a block or kernel parameter is out of its valid domain."""


class CoefficientLengthMismatch(ConfigurationError, ValueError):
    """Raised when coefficient vectors of different lengths are compared."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(
            f"Cannot compare coefficients with different sizes: {left} vs {right}"
        )
        self.left = left
        self.right = right


# ---- Lookup errors (also behave like KeyError) ----
class UnknownWavelet(ConfigurationError, KeyError):
    """Raised when a mother wavelet name is not recognized."""
