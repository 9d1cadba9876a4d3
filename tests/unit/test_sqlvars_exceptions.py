"""Unit tests for sqlvars.exceptions."""

import pytest

from sqlvars.exceptions import (
    EmptyListParameterError,
    ExtraParameterError,
    MissingParameterError,
    ParameterError,
    SQLVarsError,
    ValueProductionError,
)


@pytest.mark.parametrize("error", [MissingParameterError, ExtraParameterError, EmptyListParameterError])
def test_parameter_error_hierarchy(error: "type[ParameterError]") -> None:
    assert issubclass(error, ParameterError)
    assert issubclass(error, SQLVarsError)


def test_parameter_error_includes_sql() -> None:
    exc = MissingParameterError("Too few arguments", "SELECT ?")

    assert exc.sql == "SELECT ?"
    assert str(exc) == "Too few arguments\nSQL: SELECT ?"
    assert repr(exc) == "MissingParameterError - Too few arguments\nSQL: SELECT ?"


def test_parameter_error_without_sql() -> None:
    exc = ExtraParameterError("Too many arguments")

    assert exc.sql is None
    assert str(exc) == "Too many arguments"


def test_value_production_error_message() -> None:
    exc = ValueProductionError(object(), RuntimeError("offline"))

    assert exc.value_type == "object"
    assert str(exc) == "Could not produce a storable value from object: offline"


def test_base_error_detail() -> None:
    assert str(SQLVarsError("first", "second")) == "second first"
    assert SQLVarsError(detail="only").detail == "only"
