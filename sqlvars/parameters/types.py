"""Core parameter types used throughout sqlvars."""

from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

from typing_extensions import TypeAlias

__all__ = (
    "ClassifiedArguments",
    "LiteralKey",
    "Nullable",
    "ParameterInfo",
    "ParameterStyle",
)

T = TypeVar("T")

LiteralKey: TypeAlias = Union[int, str]
"""Positional placeholders are keyed by 0-based index, named ones by identifier."""


class ParameterStyle(str, Enum):
    """Parameter style enumeration with string values."""

    NONE = "none"
    QMARK = "qmark"
    NUMERIC = "numeric"
    NAMED_COLON = "named_colon"
    POSITIONAL_COLON = "positional_colon"
    POSITIONAL_PYFORMAT = "pyformat_positional"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


class ParameterInfo:
    """Immutable placeholder occurrence information.

    ``position`` is the index of the first character of ``placeholder_text``
    in the query. ``key`` is the lookup key for the literal: the 0-based
    ordinal for ``?``, the number minus one for ``$n`` and the identifier for
    ``:name``.
    """

    __slots__ = ("key", "ordinal", "placeholder_text", "position", "style")

    def __init__(
        self, key: LiteralKey, style: ParameterStyle, position: int, ordinal: int, placeholder_text: str
    ) -> None:
        self.key = key
        self.style = style
        self.position = position
        self.ordinal = ordinal
        self.placeholder_text = placeholder_text

    @property
    def end(self) -> int:
        return self.position + len(self.placeholder_text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return (
            self.key == other.key
            and self.style == other.style
            and self.position == other.position
            and self.placeholder_text == other.placeholder_text
        )

    def __hash__(self) -> int:
        return hash((self.key, self.style, self.position, self.placeholder_text))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join([f'key={self.key!r}', f'ordinal={self.ordinal!r}', f'placeholder_text={self.placeholder_text!r}', f'position={self.position!r}', f'style={self.style!r}'])})"


class ClassifiedArguments:
    """Encoded literals for one ``render_literal`` call.

    ``positional`` maps 0-based indexes to literal text and serves both ``?``
    and ``$n`` placeholders; ``named`` maps identifiers to literal text and
    serves ``:name`` placeholders. A structured record fills both.
    """

    __slots__ = ("named", "positional")

    def __init__(self, positional: Optional[dict[int, str]] = None, named: Optional[dict[str, str]] = None) -> None:
        self.positional = positional if positional is not None else {}
        self.named = named if named is not None else {}

    def lookup(self, key: LiteralKey) -> Optional[str]:
        """Return the literal for ``key`` or ``None`` when it was not supplied."""
        if isinstance(key, int):
            return self.positional.get(key)
        return self.named.get(key)

    def __len__(self) -> int:
        return len(self.positional) + len(self.named)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.positional == other.positional and self.named == other.named

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(named={self.named!r}, positional={self.positional!r})"


class Nullable(Generic[T]):
    """A value that may be absent, such as a nullable column read from a row.

    Encodes as its wrapped value when ``valid`` and as SQL ``NULL`` otherwise.
    """

    __slots__ = ("valid", "value")

    def __init__(self, value: Optional[T] = None, valid: Optional[bool] = None) -> None:
        self.value = value
        self.valid = value is not None if valid is None else valid

    def sql_value(self) -> Any:
        return self.value if self.valid else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nullable):
            return False
        return self.valid == other.valid and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.valid, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, valid={self.valid!r})"
