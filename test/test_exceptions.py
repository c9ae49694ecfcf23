# test/test_exceptions.py
import pytest

from timewindows.core import (
    CoreError,
    InvalidTimeWindow,
    InvalidWindowSequence,
    InvalidWindowArrays,
)


def test_exception_inheritance_validation():
    assert issubclass(InvalidTimeWindow, CoreError)
    assert issubclass(InvalidWindowSequence, CoreError)
    assert issubclass(InvalidWindowArrays, CoreError)


def test_validation_errors_behave_like_valueerror():
    assert issubclass(InvalidTimeWindow, ValueError)
    assert issubclass(InvalidWindowSequence, ValueError)
    assert issubclass(InvalidWindowArrays, ValueError)


def test_validation_errors_can_be_raised_and_caught_as_valueerror():
    with pytest.raises(ValueError):
        raise InvalidTimeWindow("start must be before end")

    with pytest.raises(CoreError):
        raise InvalidWindowSequence("windows overlap")
