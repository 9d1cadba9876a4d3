"""Unit tests for sqlvars.parameters.classifier."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

import msgspec
import pytest

from sqlvars.parameters import ArgumentClassifier, ClassifiedArguments, FieldDescriptor, Nullable, record_fields


@dataclass
class Person:
    Name: str
    _secret: str
    Digit: Optional[int]
    OtherName: str = field(metadata={"db": "other_name"})


class Account(msgspec.Struct):
    Name: str
    OtherName: str = msgspec.field(name="other_name")


@dataclass
class Labelled:
    text: str

    def __str__(self) -> str:
        return self.text


@pytest.fixture
def classifier() -> ArgumentClassifier:
    return ArgumentClassifier()


def test_several_arguments_are_positional(classifier: ArgumentClassifier) -> None:
    result = classifier.classify((123, "test string", None))

    assert result == ClassifiedArguments(positional={0: "123", 1: "'test string'", 2: "NULL"})


def test_no_arguments(classifier: ArgumentClassifier) -> None:
    result = classifier.classify(())

    assert len(result) == 0


@pytest.mark.parametrize(
    "value,expected",
    [
        (123, "123"),
        ([1, 2, 3], "ARRAY[1, 2, 3]"),
        (Nullable(), "NULL"),
        (Nullable("x"), "'x'"),
        (datetime(2020, 1, 2, 3, 4, 5, 6000), "'2020-01-02 03:04:05.006'"),
        (Labelled("shown"), "'shown'"),
        ({1: "a"}, "'{1: ''a''}'"),
    ],
    ids=["int", "list", "empty_nullable", "nullable", "datetime", "record_with_str", "non_string_keys"],
)
def test_single_scalar_is_positional(classifier: ArgumentClassifier, value: Any, expected: str) -> None:
    assert classifier.classify((value,)) == ClassifiedArguments(positional={0: expected})


def test_single_mapping_is_named(classifier: ArgumentClassifier) -> None:
    result = classifier.classify(({"name": "a", "digit": 7},))

    assert result == ClassifiedArguments(named={"name": "'a'", "digit": "7"})


def test_dataclass_fields_are_named_and_numbered(classifier: ArgumentClassifier) -> None:
    person = Person(Name="test string", _secret="hidden", Digit=123, OtherName="other test string")

    result = classifier.classify((person,))

    assert result.named == {"name": "'test string'", "digit": "123", "other_name": "'other test string'"}
    assert result.positional == {0: "'test string'", 1: "123", 2: "'other test string'"}


def test_dataclass_none_field_is_null(classifier: ArgumentClassifier) -> None:
    result = classifier.classify((Person(Name="n", _secret="", Digit=None, OtherName="o"),))

    assert result.named["digit"] == "NULL"


def test_msgspec_struct_uses_rename(classifier: ArgumentClassifier) -> None:
    result = classifier.classify((Account(Name="acme", OtherName="other"),))

    assert result.named == {"name": "'acme'", "other_name": "'other'"}
    assert result.positional == {0: "'acme'", 1: "'other'"}


def test_pydantic_model_uses_alias(classifier: ArgumentClassifier) -> None:
    pydantic = pytest.importorskip("pydantic")

    class Customer(pydantic.BaseModel):
        Name: str
        OtherName: str = pydantic.Field(serialization_alias="other_name")

    result = classifier.classify((Customer(Name="acme", OtherName="other"),))

    assert result.named == {"name": "'acme'", "other_name": "'other'"}


def test_attrs_instance_uses_metadata(classifier: ArgumentClassifier) -> None:
    attrs = pytest.importorskip("attrs")

    @attrs.define
    class Invoice:
        Number: int
        Total: float = attrs.field(metadata={"db": "grand_total"})

    result = classifier.classify((Invoice(Number=7, Total=1.5),))

    assert result.named == {"number": "7", "grand_total": "1.500000"}
    assert result.positional == {0: "7", 1: "1.500000"}


def test_record_fields_skip_private_and_are_cached() -> None:
    first = Person(Name="a", _secret="b", Digit=1, OtherName="c")
    second = Person(Name="d", _secret="e", Digit=2, OtherName="f")

    descriptors = record_fields(first)

    assert descriptors == (
        FieldDescriptor("Name", "name"),
        FieldDescriptor("Digit", "digit"),
        FieldDescriptor("OtherName", "other_name"),
    )
    assert record_fields(second) is descriptors
    assert descriptors[0].read(second) == "d"


def test_record_fields_rejects_non_records() -> None:
    with pytest.raises(TypeError, match="int is not a record type"):
        record_fields(123)
