"""Encoding of single Python values as SQL literal text.

Dispatch order, first match wins:

1.  ``None`` renders as ``NULL``.
2.  Values with a ``sql_value()`` hook are replaced by what it returns and
    encoded again.
3.  ``bool`` renders as ``true`` / ``false``.
4.  ``datetime`` renders as ``'YYYY-MM-DD HH:MM:SS.mmm'``; ``datetime.min``
    renders as ``'0000-00-00 00:00:00'``.
5.  Values whose class defines ``__str__`` render as quoted text.
6.  ``bytes`` render as quoted text when they decode to printable text and
    as ``'<binary>'`` otherwise.
7.  ``int`` renders as decimal text.
8.  ``float`` renders with six decimal places.
9.  ``str`` renders as quoted text.
10. Sequences of ``int`` or of ``str`` render as ``ARRAY[...]``.
11. Anything else is coerced (``bytearray``, ``memoryview``) or rendered as
    quoted ``str(value)``.

When ``str()`` raises, the default ``object`` repr is quoted instead, or
:class:`~sqlvars.exceptions.ValueProductionError` is raised under a strict
configuration.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any, Final, Optional

from mypy_extensions import mypyc_attr
from sqlglot import exp

from sqlvars.exceptions import ValueProductionError
from sqlvars.parameters.config import DEFAULT_LITERAL_CONFIG, LiteralConfig
from sqlvars.utils.logging import get_logger
from sqlvars.utils.type_guards import is_int_sequence, is_str_sequence, is_stringer, is_value_producer

__all__ = ("LiteralEncoder", "encode_literal", "quote_text")

logger = get_logger("parameters.encoder")

STRICT_LITERAL_CONFIG: Final[LiteralConfig] = LiteralConfig(strict=True)


def quote_text(text: str, dialect: Optional[str] = None) -> str:
    """Quote ``text`` as a SQL string literal, escaping embedded quotes.

    Args:
        text: Raw text.
        dialect: sqlglot dialect name. ``None`` doubles embedded single quotes.

    Returns:
        The quoted literal.
    """
    return exp.Literal.string(text).sql(dialect=dialect)


def format_timestamp(value: datetime) -> str:
    """Format ``value`` with millisecond precision, without quotes."""
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}.{value.microsecond // 1000:03d}"
    )


def is_zero_time(value: datetime) -> bool:
    return value.replace(tzinfo=None) == datetime.min


@mypyc_attr(allow_interpreted_subclasses=False)
class LiteralEncoder:
    """Turns one argument into literal SQL text.

    The encoder is stateless apart from its configuration and can be shared
    between threads.
    """

    __slots__ = ("config",)

    def __init__(self, config: Optional[LiteralConfig] = None) -> None:
        self.config = config or DEFAULT_LITERAL_CONFIG

    def encode(self, value: Any) -> str:
        """Encode ``value`` as literal SQL text.

        Args:
            value: Any argument value.

        Raises:
            ValueProductionError: ``sql_value()`` or ``str()`` failed and the configuration is strict.

        Returns:
            Literal text ready to be substituted for a placeholder.
        """
        if value is None:
            return self.config.null_literal
        if is_value_producer(value):
            produced = self._produce(value)
            if produced is value:
                return self.quote(self._display_text(value))
            return self.encode(produced)
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, datetime):
            return self.encode_time(value)
        if is_stringer(value):
            return self.quote(self._display_text(value))
        if isinstance(value, bytes):
            return self.encode_bytes(value)
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return f"{value:.{self.config.float_precision}f}"
        if isinstance(value, str):
            return self.quote(value)
        if is_int_sequence(value):
            return self._array(str(item) for item in value)
        if is_str_sequence(value):
            return self._array(self.quote(item) for item in value)
        return self._fallback(value)

    def encode_time(self, value: datetime) -> str:
        if is_zero_time(value):
            return self.config.zero_time_literal
        return f"'{format_timestamp(value)}'"

    def encode_bytes(self, value: bytes) -> str:
        try:
            text = value.decode("utf-8")
        except UnicodeDecodeError:
            return self.config.binary_literal
        if not text.isprintable():
            return self.config.binary_literal
        return self.quote(text)

    def quote(self, text: str) -> str:
        return quote_text(text, self.config.dialect)

    def _array(self, items: Iterable[str]) -> str:
        return f"ARRAY[{', '.join(items)}]"

    def _fallback(self, value: Any) -> str:
        if isinstance(value, (bytearray, memoryview)):
            return self.encode_bytes(bytes(value))
        if isinstance(value, Sequence):
            logger.debug("Rendering heterogeneous %s as text", type(value).__name__)
        return self.quote(self._display_text(value))

    def _produce(self, value: Any) -> Any:
        try:
            return value.sql_value()
        except Exception as exc:
            if self.config.strict:
                raise ValueProductionError(value, exc) from exc
            logger.warning("sql_value() failed for %s, rendering NULL: %s", type(value).__name__, exc)
            return None

    def _display_text(self, value: Any) -> str:
        try:
            return str(value)
        except Exception as exc:
            if self.config.strict:
                raise ValueProductionError(value, exc) from exc
            logger.warning("str() failed for %s, rendering its default repr: %s", type(value).__name__, exc)
            return object.__repr__(value)


def encode_literal(value: Any, config: Optional[LiteralConfig] = None) -> str:
    """Encode a single value as literal SQL text.

    Unlike :func:`sqlvars.render_literal`, failures of a ``sql_value()`` hook
    are raised unless a non-strict ``config`` is supplied.

    Args:
        value: Any argument value.
        config: Literal configuration. Defaults to a strict configuration.

    Returns:
        The literal text.
    """
    return LiteralEncoder(config or STRICT_LITERAL_CONFIG).encode(value)
