"""Unit tests for sqlvars.parameters.validator."""

import pytest

from sqlvars import detect_style
from sqlvars.parameters import ParameterInfo, ParameterStyle, ParameterValidator


@pytest.fixture
def validator() -> ParameterValidator:
    return ParameterValidator()


@pytest.mark.parametrize(
    "sql,expected",
    [
        ("SELECT * FROM t WHERE id = ?", ParameterStyle.QMARK),
        ("SELECT * FROM t WHERE id = $1", ParameterStyle.NUMERIC),
        ("SELECT * FROM t WHERE id = :id", ParameterStyle.NAMED_COLON),
        ("SELECT $1, ?", ParameterStyle.QMARK),
        ("SELECT :a, $1", ParameterStyle.NUMERIC),
        ("SELECT x::text", ParameterStyle.NONE),
        ("SELECT :Upper", ParameterStyle.NONE),
        ("SELECT 1", ParameterStyle.NONE),
        ("", ParameterStyle.NONE),
    ],
    ids=["qmark", "numeric", "named", "qmark_wins", "numeric_wins", "cast_only", "uppercase_name", "none", "empty"],
)
def test_detect_style(sql: str, expected: ParameterStyle) -> None:
    assert detect_style(sql) == expected


def test_extract_qmark(validator: ParameterValidator) -> None:
    assert validator.extract_parameters("a = ? OR b = ?", ParameterStyle.QMARK) == [
        ParameterInfo(0, ParameterStyle.QMARK, 4, 0, "?"),
        ParameterInfo(1, ParameterStyle.QMARK, 13, 1, "?"),
    ]


def test_extract_numeric(validator: ParameterValidator) -> None:
    params = validator.extract_parameters("a = $2 OR b = $10 OR c = $2", ParameterStyle.NUMERIC)

    assert [p.key for p in params] == [1, 9, 1]
    assert [p.placeholder_text for p in params] == ["$2", "$10", "$2"]
    assert [p.position for p in params] == [4, 14, 25]
    assert [p.ordinal for p in params] == [0, 1, 2]


def test_extract_named(validator: ParameterValidator) -> None:
    sql = "(:name, :name2)::text"
    params = validator.extract_parameters(sql, ParameterStyle.NAMED_COLON)

    assert [p.key for p in params] == ["name", "name2"]
    assert [sql[p.position : p.end] for p in params] == [":name", ":name2"]


def test_extract_none(validator: ParameterValidator) -> None:
    assert validator.extract_parameters("SELECT ?", ParameterStyle.NONE) == []


def test_count_parameters(validator: ParameterValidator) -> None:
    assert validator.count_parameters("?, ?, ?", ParameterStyle.QMARK) == 3
    assert validator.count_parameters("$1, $1", ParameterStyle.NUMERIC) == 2


def test_parameter_style_values() -> None:
    assert str(ParameterStyle.NUMERIC) == "numeric"
    assert ParameterStyle("named_colon") is ParameterStyle.NAMED_COLON
