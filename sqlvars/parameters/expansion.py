"""Expansion of sequence arguments bound to ``IN (?)`` placeholders."""

import logging
from collections.abc import Sequence
from typing import Any

from sqlvars.exceptions import EmptyListParameterError, ExtraParameterError, MissingParameterError
from sqlvars.parameters.types import ParameterStyle
from sqlvars.parameters.validator import ParameterValidator
from sqlvars.utils.logging import get_logger, log_with_context
from sqlvars.utils.type_guards import is_multi_value, is_value_producer

__all__ = ("expand_in",)

logger = get_logger("parameters.expansion")
_validator = ParameterValidator()


def expand_in(sql: str, args: "Sequence[Any]") -> "tuple[str, list[Any]]":
    """Expand sequence arguments into one ``?`` placeholder per element.

    Every ``?`` in ``sql`` consumes the next argument from left to right. A
    scalar argument keeps its single placeholder. A sequence argument (other
    than ``str`` and ``bytes``) of length ``n`` turns its placeholder into
    ``n`` placeholders joined by ``", "`` and contributes its ``n`` elements,
    in order, to the returned arguments. Values with a ``sql_value()`` hook
    are resolved first; if the hook raises, the exception propagates
    unchanged.

    Example:
        Input:  "SELECT id FROM t WHERE id IN (?) AND pid = ?", [[1, 2, 3], 5]
        Output: "SELECT id FROM t WHERE id IN (?, ?, ?) AND pid = ?", [1, 2, 3, 5]

    Args:
        sql: SQL text with ``?`` placeholders.
        args: One argument per placeholder.

    Raises:
        EmptyListParameterError: A sequence argument is empty.
        MissingParameterError: The query has more placeholders than arguments.
        ExtraParameterError: The query has fewer placeholders than arguments.

    Returns:
        The rewritten SQL and the flattened arguments.
    """
    resolved: list[Any] = []
    lengths: list[int] = []
    for value in args:
        if is_value_producer(value):
            value = value.sql_value()
        if is_multi_value(value):
            if not value:
                msg = "Empty sequence passed to an IN placeholder"
                raise EmptyListParameterError(msg, sql)
            lengths.append(len(value))
        else:
            lengths.append(0)
        resolved.append(value)

    placeholder_count = _validator.count_parameters(sql, ParameterStyle.QMARK)
    if placeholder_count > len(resolved):
        msg = f"Number of placeholders ({placeholder_count}) exceeds number of arguments ({len(resolved)})"
        raise MissingParameterError(msg, sql)
    if placeholder_count < len(resolved):
        msg = f"Number of placeholders ({placeholder_count}) is less than number of arguments ({len(resolved)})"
        raise ExtraParameterError(msg, sql)

    if not any(lengths):
        return sql, list(args)

    result_parts: list[str] = []
    expanded: list[Any] = []
    current_pos = 0
    for value, length in zip(resolved, lengths):
        position = sql.index("?", current_pos)
        result_parts.append(sql[current_pos:position])
        if length:
            result_parts.append(", ".join(["?"] * length))
            expanded.extend(value)
        else:
            result_parts.append("?")
            expanded.append(value)
        current_pos = position + 1
    result_parts.append(sql[current_pos:])

    log_with_context(logger, logging.DEBUG, "Expanded IN arguments", arguments=len(resolved), bind_values=len(expanded))
    return "".join(result_parts), expanded
