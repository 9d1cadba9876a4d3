"""Placeholder style detection and placeholder extraction.

A query is treated as using exactly one placeholder style. Detection checks,
in priority order:

1. ``?`` anywhere in the text (qmark),
2. ``$<digits>`` (numeric),
3. ``:<identifier>`` preceded by a character other than ``:`` (named colon),

and reports :attr:`ParameterStyle.NONE` when none of them is present. The
text is not parsed: placeholders inside string literals and comments are
found like any other.
"""

import re
from typing import Final

from sqlvars.parameters.types import ParameterInfo, ParameterStyle
from sqlvars.utils.logging import get_logger

__all__ = ("NAMED_PLACEHOLDER", "NUMERIC_PLACEHOLDER", "ParameterValidator", "detect_style")

logger = get_logger("parameters.validator")

NUMERIC_PLACEHOLDER: Final = re.compile(r"\$(?P<number>\d+)")
"""``$1``, ``$2`` ... as used by PostgreSQL."""

NAMED_PLACEHOLDER: Final = re.compile(r"(?P<lead>[^:])(?P<placeholder>:(?P<name>[a-z0-9_]+))")
"""``:name`` with a non-colon lead character, so ``::type`` casts are not matched."""


def detect_style(sql: str) -> ParameterStyle:
    """Detect the placeholder style of ``sql``.

    Args:
        sql: SQL text.

    Returns:
        The detected style, or ``ParameterStyle.NONE`` when no placeholder is present.
    """
    if "?" in sql:
        return ParameterStyle.QMARK
    if NUMERIC_PLACEHOLDER.search(sql):
        return ParameterStyle.NUMERIC
    if NAMED_PLACEHOLDER.search(sql):
        return ParameterStyle.NAMED_COLON
    return ParameterStyle.NONE


class ParameterValidator:
    """Extracts placeholder occurrences with their exact text positions."""

    __slots__ = ()

    def detect_style(self, sql: str) -> ParameterStyle:
        style = detect_style(sql)
        logger.debug("Detected %s placeholder style", style)
        return style

    def extract_parameters(self, sql: str, style: ParameterStyle) -> list[ParameterInfo]:
        """Extract the placeholders of one style from ``sql``.

        Args:
            sql: SQL text.
            style: The placeholder style to look for.

        Returns:
            Occurrences sorted by position. ``?`` placeholders are keyed by their
            ordinal, ``$n`` placeholders by ``n - 1`` and ``:name`` placeholders by
            ``name``.
        """
        if style == ParameterStyle.QMARK:
            return [
                ParameterInfo(key=ordinal, style=style, position=position, ordinal=ordinal, placeholder_text="?")
                for ordinal, position in enumerate(_find_all(sql, "?"))
            ]
        if style == ParameterStyle.NUMERIC:
            return [
                ParameterInfo(
                    key=int(match.group("number")) - 1,
                    style=style,
                    position=match.start(),
                    ordinal=ordinal,
                    placeholder_text=match.group(0),
                )
                for ordinal, match in enumerate(NUMERIC_PLACEHOLDER.finditer(sql))
            ]
        if style == ParameterStyle.NAMED_COLON:
            return [
                ParameterInfo(
                    key=match.group("name"),
                    style=style,
                    position=match.start("placeholder"),
                    ordinal=ordinal,
                    placeholder_text=match.group("placeholder"),
                )
                for ordinal, match in enumerate(NAMED_PLACEHOLDER.finditer(sql))
            ]
        return []

    def count_parameters(self, sql: str, style: ParameterStyle) -> int:
        if style == ParameterStyle.QMARK:
            return sql.count("?")
        return len(self.extract_parameters(sql, style))


def _find_all(sql: str, char: str) -> "list[int]":
    positions: list[int] = []
    index = sql.find(char)
    while index != -1:
        positions.append(index)
        index = sql.find(char, index + 1)
    return positions
