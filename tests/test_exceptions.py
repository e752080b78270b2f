"""Tests for geoc exceptions."""

import pytest

from geoc import parse_coord
from geoc.exceptions import (
    GeocException,
    GeocInvalidCoordException,
    GeocInvalidStringException,
    GeocOutOfRangeException,
)


def test_exception_inheritance():
    error = GeocException("bad input", value="x")
    assert isinstance(error, Exception)
    assert error.value == "x"
    assert str(error) == "bad input"


def test_specific_exceptions_inherit_from_base():
    for exc_type in (GeocInvalidStringException, GeocInvalidCoordException, GeocOutOfRangeException):
        error = exc_type("bad input")
        assert isinstance(error, exc_type)
        assert isinstance(error, GeocException)
        assert error.value is None


def test_errors_carry_offending_text():
    with pytest.raises(GeocInvalidStringException) as excinfo:
        parse_coord("48x")
    assert excinfo.value.value == "48x"
    with pytest.raises(GeocOutOfRangeException) as excinfo:
        parse_coord("98N")
    assert excinfo.value.value == "98"
