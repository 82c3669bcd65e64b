import pytest

from seriesbin.core import (
    CoreError,
    InvalidSeries,
    ShapeMismatch,
    InvalidArgument,
    UnsupportedMode,
)


def test_exception_inheritance_core():
    assert issubclass(InvalidSeries, CoreError)
    assert issubclass(ShapeMismatch, CoreError)
    assert issubclass(InvalidArgument, CoreError)
    assert issubclass(UnsupportedMode, CoreError)


def test_contract_errors_are_value_errors():
    assert issubclass(ShapeMismatch, ValueError)
    assert issubclass(InvalidArgument, ValueError)
    assert issubclass(UnsupportedMode, ValueError)


def test_unsupported_mode_is_not_an_invalid_argument():
    assert not issubclass(UnsupportedMode, InvalidArgument)

    with pytest.raises(ValueError):
        raise UnsupportedMode("sideways")
