"""Literal rendering configuration."""

from typing import Final, Optional

__all__ = ("DEFAULT_LITERAL_CONFIG", "LiteralConfig")


class LiteralConfig:
    """Declarative configuration for rendering values as SQL literals."""

    __slots__ = (
        "binary_literal",
        "dialect",
        "float_precision",
        "null_literal",
        "strict",
        "undefined_prefix",
        "zero_time_literal",
    )

    def __init__(
        self,
        null_literal: str = "NULL",
        zero_time_literal: str = "'0000-00-00 00:00:00'",
        binary_literal: str = "'<binary>'",
        float_precision: int = 6,
        undefined_prefix: str = "placeholder is undefined: ",
        dialect: Optional[str] = None,
        strict: bool = False,
    ) -> None:
        """Initialize literal rendering configuration.

        Args:
            null_literal: Text emitted for ``None`` and empty nullable values
            zero_time_literal: Text emitted for ``datetime.min``
            binary_literal: Text emitted for byte strings that are not printable
            float_precision: Number of decimal places for floats
            undefined_prefix: Prefix returned with the query when no placeholder style is found
            dialect: sqlglot dialect used to quote text literals
            strict: Raise ``ValueProductionError`` when a ``sql_value()`` hook fails
                instead of rendering the null literal
        """
        self.null_literal = null_literal
        self.zero_time_literal = zero_time_literal
        self.binary_literal = binary_literal
        self.float_precision = float_precision
        self.undefined_prefix = undefined_prefix
        self.dialect = dialect
        self.strict = strict

    def replace(self, **changes: object) -> "LiteralConfig":
        """Return a copy with the given fields replaced."""
        values = {name: getattr(self, name) for name in self.__slots__}
        values.update(changes)
        return LiteralConfig(**values)  # type: ignore[arg-type]

    def hash(self) -> int:
        """Generate a deterministic hash for cache key generation."""
        return hash(tuple(getattr(self, name) for name in self.__slots__))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiteralConfig):
            return False
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __hash__(self) -> int:
        return self.hash()

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in sorted(self.__slots__))
        return f"{type(self).__name__}({fields})"


DEFAULT_LITERAL_CONFIG: Final[LiteralConfig] = LiteralConfig()
