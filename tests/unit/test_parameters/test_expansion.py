"""Unit tests for sqlvars.parameters.expansion."""

from typing import Any

import pytest

from sqlvars import expand_in
from sqlvars.exceptions import EmptyListParameterError, ExtraParameterError, MissingParameterError, ParameterError
from sqlvars.parameters import Nullable


class Unavailable:
    def sql_value(self) -> Any:
        msg = "value is gone"
        raise LookupError(msg)


def test_expand_in_scenario() -> None:
    sql, args = expand_in("SELECT id FROM t WHERE id IN (?) AND pid = ?", [[1, 2, 3], 5])

    assert sql == "SELECT id FROM t WHERE id IN (?, ?, ?) AND pid = ?"
    assert args == [1, 2, 3, 5]


def test_expand_in_several_sequences() -> None:
    sql, args = expand_in("a IN (?) AND b = ? AND c IN (?)", [(1, 2), "x", ["y"]])

    assert sql == "a IN (?, ?) AND b = ? AND c IN (?)"
    assert args == [1, 2, "x", "y"]


@pytest.mark.parametrize("length", [1, 2, 3, 7])
def test_expand_in_replaces_one_placeholder_per_element(length: int) -> None:
    values = list(range(length))

    sql, args = expand_in("SELECT ? FROM t WHERE id IN (?) AND x = ?", ["first", values, "last"])

    assert sql == f"SELECT ? FROM t WHERE id IN ({', '.join(['?'] * length)}) AND x = ?"
    assert args == ["first", *values, "last"]


def test_expand_in_without_sequences_returns_input() -> None:
    sql = "SELECT * FROM t WHERE a = ? AND b = ?"
    original = [1, "two"]

    result_sql, result_args = expand_in(sql, original)

    assert result_sql == sql
    assert result_args == original


@pytest.mark.parametrize("value", ["abc", b"abc", bytearray(b"abc")], ids=["str", "bytes", "bytearray"])
def test_expand_in_does_not_split_text_or_bytes(value: Any) -> None:
    assert expand_in("x = ?", [value]) == ("x = ?", [value])


def test_expand_in_range() -> None:
    assert expand_in("id IN (?)", [range(3)]) == ("id IN (?, ?, ?)", [0, 1, 2])


def test_expand_in_resolves_value_producers() -> None:
    sql, args = expand_in("id IN (?) AND name = ?", [Nullable([4, 5]), Nullable("n")])

    assert sql == "id IN (?, ?) AND name = ?"
    assert args == [4, 5, "n"]


def test_expand_in_producer_failure_propagates_unchanged() -> None:
    with pytest.raises(LookupError, match="value is gone"):
        expand_in("id = ?", [Unavailable()])


def test_expand_in_empty_sequence_is_an_error() -> None:
    with pytest.raises(EmptyListParameterError, match="Empty sequence"):
        expand_in("id IN (?)", [[]])


@pytest.mark.parametrize(
    "sql,args,error",
    [
        ("a = ? AND b IN (?)", [1], MissingParameterError),
        ("a = ? AND b IN (?)", [[1, 2]], MissingParameterError),
        ("a = ?", [1, 2], ExtraParameterError),
        ("a IN (?)", [[1, 2], 3], ExtraParameterError),
        ("SELECT 1", [1], ExtraParameterError),
    ],
    ids=["too_few_scalar", "too_few_sequence", "too_many_scalar", "too_many_sequence", "no_placeholders"],
)
def test_expand_in_argument_count_mismatch(sql: str, args: "list[Any]", error: "type[ParameterError]") -> None:
    with pytest.raises(error) as exc_info:
        expand_in(sql, args)
    assert exc_info.value.sql == sql


def test_expand_in_no_placeholders_no_arguments() -> None:
    assert expand_in("SELECT 1", []) == ("SELECT 1", [])
