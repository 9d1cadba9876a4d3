"""Argument classification for literal rendering.

A call's arguments are normalised into positional and named literal maps:

* several arguments are positional, keyed ``0, 1, 2 ...``;
* a single structured record is expanded field by field;
* a single mapping with string keys is expanded key by key;
* any other single argument is positional key ``0``.

Records fill both maps. Named keys come from a per-field ``db`` tag (or the
library's own rename) and default to the lower-cased attribute name;
positional keys count only the fields that are read, so a skipped private
field does not leave a gap.
"""

from collections.abc import Mapping
from dataclasses import fields as dataclass_fields
from datetime import datetime
from functools import lru_cache
from typing import Any, Optional

import msgspec
from mypy_extensions import mypyc_attr

from sqlvars.parameters.config import LiteralConfig
from sqlvars.parameters.encoder import LiteralEncoder
from sqlvars.parameters.types import ClassifiedArguments
from sqlvars.utils.type_guards import (
    is_attrs_instance,
    is_dataclass_instance,
    is_msgspec_struct,
    is_pydantic_model,
    is_record,
    is_string_mapping,
    is_stringer,
    is_value_producer,
)

__all__ = ("FIELD_NAME_TAG", "ArgumentClassifier", "FieldDescriptor", "record_fields")

FIELD_NAME_TAG = "db"
"""Metadata key holding an explicit column name on dataclass and attrs fields."""


class FieldDescriptor:
    """One readable field of a record type."""

    __slots__ = ("attribute", "key")

    def __init__(self, attribute: str, key: str) -> None:
        self.attribute = attribute
        self.key = key

    def read(self, record: Any) -> Any:
        return getattr(record, self.attribute)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldDescriptor):
            return False
        return self.attribute == other.attribute and self.key == other.key

    def __hash__(self) -> int:
        return hash((self.attribute, self.key))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(attribute={self.attribute!r}, key={self.key!r})"


def _descriptor(attribute: str, tag: Optional[str]) -> Optional[FieldDescriptor]:
    if attribute.startswith("_"):
        return None
    return FieldDescriptor(attribute, tag or attribute.lower())


def _dataclass_fields(record_type: type) -> "list[Optional[FieldDescriptor]]":
    return [_descriptor(f.name, f.metadata.get(FIELD_NAME_TAG)) for f in dataclass_fields(record_type)]


def _msgspec_fields(record_type: type) -> "list[Optional[FieldDescriptor]]":
    return [
        _descriptor(f.name, f.encode_name if f.encode_name != f.name else None)
        for f in msgspec.structs.fields(record_type)
    ]


def _pydantic_fields(record_type: Any) -> "list[Optional[FieldDescriptor]]":
    return [
        _descriptor(name, info.serialization_alias or info.alias) for name, info in record_type.model_fields.items()
    ]


def _attrs_fields(record_type: type) -> "list[Optional[FieldDescriptor]]":
    import attrs

    return [_descriptor(a.name, a.metadata.get(FIELD_NAME_TAG)) for a in attrs.fields(record_type)]


@lru_cache(maxsize=256)
def _record_fields(record_type: type, kind: str) -> "tuple[FieldDescriptor, ...]":
    if kind == "dataclass":
        found = _dataclass_fields(record_type)
    elif kind == "msgspec":
        found = _msgspec_fields(record_type)
    elif kind == "pydantic":
        found = _pydantic_fields(record_type)
    else:
        found = _attrs_fields(record_type)
    return tuple(descriptor for descriptor in found if descriptor is not None)


def record_fields(record: Any) -> "tuple[FieldDescriptor, ...]":
    """Return the readable fields of a record instance, in declaration order.

    The table is computed once per record type.

    Args:
        record: A dataclass, msgspec, pydantic or attrs instance.

    Raises:
        TypeError: ``record`` is not a supported record instance.

    Returns:
        Field descriptors.
    """
    if is_dataclass_instance(record):
        kind = "dataclass"
    elif is_msgspec_struct(record):
        kind = "msgspec"
    elif is_pydantic_model(record):
        kind = "pydantic"
    elif is_attrs_instance(record):
        kind = "attrs"
    else:
        msg = f"{type(record).__name__} is not a record type"
        raise TypeError(msg)
    return _record_fields(type(record), kind)


def is_expandable_record(value: Any) -> bool:
    """Records are expanded unless they render as a single value."""
    if isinstance(value, datetime) or is_value_producer(value) or is_stringer(value):
        return False
    return is_record(value)


@mypyc_attr(allow_interpreted_subclasses=False)
class ArgumentClassifier:
    """Builds the literal maps for a ``render_literal`` call."""

    __slots__ = ("encoder",)

    def __init__(self, config: Optional[LiteralConfig] = None, encoder: Optional[LiteralEncoder] = None) -> None:
        self.encoder = encoder or LiteralEncoder(config)

    def classify(self, args: "tuple[Any, ...]") -> ClassifiedArguments:
        """Encode every argument and key it by position or name.

        Args:
            args: The arguments of the call, as received.

        Raises:
            ValueProductionError: An encoding failed under a strict configuration.

        Returns:
            The classified literals.
        """
        if len(args) != 1:
            return ClassifiedArguments(positional={index: self.encoder.encode(value) for index, value in enumerate(args)})

        value = args[0]
        if is_expandable_record(value):
            return self._classify_record(value)
        if is_string_mapping(value):
            return self._classify_mapping(value)
        return ClassifiedArguments(positional={0: self.encoder.encode(value)})

    def _classify_record(self, record: Any) -> ClassifiedArguments:
        result = ClassifiedArguments()
        for number, descriptor in enumerate(record_fields(record)):
            literal = self.encoder.encode(descriptor.read(record))
            result.positional[number] = literal
            result.named[descriptor.key] = literal
        return result

    def _classify_mapping(self, mapping: "Mapping[str, Any]") -> ClassifiedArguments:
        return ClassifiedArguments(named={key: self.encoder.encode(value) for key, value in mapping.items()})
