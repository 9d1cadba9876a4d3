"""Rewriting ``?`` placeholders for drivers that use another positional style."""

from sqlvars.parameters.types import ParameterStyle

__all__ = ("rebind",)

_REBIND_TARGETS = frozenset({
    ParameterStyle.QMARK,
    ParameterStyle.NUMERIC,
    ParameterStyle.POSITIONAL_COLON,
    ParameterStyle.POSITIONAL_PYFORMAT,
})


def _placeholder(style: ParameterStyle, number: int) -> str:
    if style == ParameterStyle.NUMERIC:
        return f"${number}"
    if style == ParameterStyle.POSITIONAL_COLON:
        return f":{number}"
    return "%s"


def rebind(sql: str, style: ParameterStyle = ParameterStyle.NUMERIC) -> str:
    """Replace every ``?`` with the positional placeholder of ``style``.

    The n-th ``?`` (counting from 1) becomes ``$n`` for ``NUMERIC``, ``:n`` for
    ``POSITIONAL_COLON`` and ``%s`` for ``POSITIONAL_PYFORMAT``. All other text
    is copied unchanged, including ``?`` inside string literals.

    Example:
        Input:  "SELECT id FROM t WHERE id IN (?, ?, ?) AND pid = ?"
        Output: "SELECT id FROM t WHERE id IN ($1, $2, $3) AND pid = $4"

    Args:
        sql: SQL text with ``?`` placeholders.
        style: Target placeholder style.

    Raises:
        ValueError: ``style`` is not a positional style.

    Returns:
        The rewritten SQL text.
    """
    if style not in _REBIND_TARGETS:
        msg = f"Cannot rebind '?' placeholders to {style} style"
        raise ValueError(msg)
    if style == ParameterStyle.QMARK or "?" not in sql:
        return sql

    result_parts = []
    current_pos = 0
    number = 0
    position = sql.find("?")
    while position != -1:
        number += 1
        result_parts.append(sql[current_pos:position])
        result_parts.append(_placeholder(style, number))
        current_pos = position + 1
        position = sql.find("?", current_pos)
    result_parts.append(sql[current_pos:])
    return "".join(result_parts)
