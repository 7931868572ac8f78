# test/test_exceptions.py
import pytest

from wavegraph.core import (
    CoreError,
    InvalidSignal,
    BlockError,
    ConfigurationError,
    InvalidParameter,
    CoefficientLengthMismatch,
    UnknownWavelet,
)


def test_exception_inheritance_validation():
    assert issubclass(InvalidSignal, CoreError)
    assert issubclass(BlockError, CoreError)
    assert issubclass(ConfigurationError, CoreError)
    assert issubclass(InvalidParameter, ConfigurationError)
    assert issubclass(CoefficientLengthMismatch, ConfigurationError)


def test_parameter_errors_are_value_errors():
    assert issubclass(InvalidParameter, ValueError)
    assert issubclass(CoefficientLengthMismatch, ValueError)

    with pytest.raises(ValueError):
        raise InvalidParameter("levels must be >= 1")


def test_unknown_wavelet_can_be_caught_as_keyerror():
    assert issubclass(UnknownWavelet, KeyError)
    assert issubclass(UnknownWavelet, CoreError)

    with pytest.raises(KeyError):
        raise UnknownWavelet("nope")


def test_coefficient_length_mismatch_carries_sizes():
    err = CoefficientLengthMismatch(8, 9)
    assert err.left == 8
    assert err.right == 9
    assert "8 vs 9" in str(err)
