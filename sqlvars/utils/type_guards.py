"""Type guard functions for runtime type checking in sqlvars.

The encoder, the classifier and the ``IN`` expansion dispatch on argument
kinds through these helpers instead of scattering ``isinstance`` and
``hasattr`` checks.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any

import msgspec

from sqlvars._typing import ATTRS_INSTALLED, PYDANTIC_INSTALLED
from sqlvars.protocols import SQLValueProtocol

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

__all__ = (
    "is_attrs_instance",
    "is_dataclass_instance",
    "is_int_sequence",
    "is_msgspec_struct",
    "is_multi_value",
    "is_pydantic_model",
    "is_record",
    "is_str_sequence",
    "is_stringer",
    "is_string_mapping",
    "is_value_producer",
)

_BYTES_LIKE = (str, bytes, bytearray, memoryview)
_RECORD_LIBRARIES = frozenset({"msgspec", "pydantic"})


def is_dataclass_instance(obj: Any) -> bool:
    """Check if an object is a dataclass instance.

    Args:
        obj: An object to check.

    Returns:
        True if the object is a dataclass instance.
    """
    return not isinstance(obj, type) and hasattr(type(obj), "__dataclass_fields__")


def is_pydantic_model(obj: Any) -> bool:
    """Check if a value is a pydantic model instance.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    if not PYDANTIC_INSTALLED:
        return False
    from pydantic import BaseModel

    return isinstance(obj, BaseModel)


def is_msgspec_struct(obj: Any) -> "TypeGuard[msgspec.Struct]":
    """Check if a value is a msgspec struct instance.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, msgspec.Struct)


def is_attrs_instance(obj: Any) -> bool:
    """Check if a value is an attrs class instance.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    if not ATTRS_INSTALLED or isinstance(obj, type):
        return False
    import attrs

    return attrs.has(type(obj))


def is_record(obj: Any) -> bool:
    """Check if a value is a structured record with named fields."""
    return is_dataclass_instance(obj) or is_msgspec_struct(obj) or is_pydantic_model(obj) or is_attrs_instance(obj)


def is_string_mapping(obj: Any) -> "TypeGuard[Mapping[str, Any]]":
    """Check if a value is a mapping whose keys are all strings.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, Mapping) and all(isinstance(key, str) for key in obj)


def is_value_producer(obj: Any) -> "TypeGuard[SQLValueProtocol]":
    """Check if a value exposes a callable ``sql_value()`` hook.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return obj is not None and not isinstance(obj, type) and isinstance(obj, SQLValueProtocol)


def _str_owner(cls: type) -> type:
    for klass in cls.__mro__:
        if "__str__" in vars(klass):
            return klass
    return object


def is_stringer(obj: Any) -> bool:
    """Check if a value's class supplies its own display text.

    ``object`` and the msgspec and pydantic record bases do not count. Builtin
    numbers, text and binary types and ``datetime`` have dedicated encoding
    rules and are excluded here.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    if obj is None or isinstance(obj, (type, bool, int, float, datetime, *_BYTES_LIKE)):
        return False
    owner = _str_owner(type(obj))
    return owner is not object and owner.__module__.partition(".")[0] not in _RECORD_LIBRARIES


def is_multi_value(obj: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if a value is a sequence that binds to several placeholders.

    Text and binary values are single values even though they are sequences.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, Sequence) and not isinstance(obj, _BYTES_LIKE)


def is_int_sequence(obj: Any) -> "TypeGuard[Sequence[int]]":
    """Check if a value is a sequence of integers (booleans excluded)."""
    return is_multi_value(obj) and all(isinstance(item, int) and not isinstance(item, bool) for item in obj)


def is_str_sequence(obj: Any) -> "TypeGuard[Sequence[str]]":
    """Check if a value is a sequence of strings."""
    return is_multi_value(obj) and all(isinstance(item, str) for item in obj)
