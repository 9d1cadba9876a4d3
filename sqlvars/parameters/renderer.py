"""Literal rendering of parameterised SQL for logs and debugging.

The output inlines every argument as an escaped literal. It is meant to be
read by people, not sent to a server.
"""

from typing import Any, Optional

from mypy_extensions import mypyc_attr

from sqlvars.parameters.classifier import ArgumentClassifier
from sqlvars.parameters.config import DEFAULT_LITERAL_CONFIG, LiteralConfig
from sqlvars.parameters.types import ClassifiedArguments, ParameterInfo, ParameterStyle
from sqlvars.parameters.validator import ParameterValidator

__all__ = ("TemplateRenderer", "render_literal")


@mypyc_attr(allow_interpreted_subclasses=False)
class TemplateRenderer:
    """Substitutes encoded literals for placeholders in a single pass.

    Every placeholder is replaced at most once and replacement text is never
    scanned again, so literals that look like placeholders stay as they are
    and ``:name`` is never confused with ``:name2``.
    """

    __slots__ = ("classifier", "config", "validator")

    def __init__(self, config: Optional[LiteralConfig] = None) -> None:
        self.config = config or DEFAULT_LITERAL_CONFIG
        self.classifier = ArgumentClassifier(self.config)
        self.validator = ParameterValidator()

    def render(self, sql: str, *args: Any) -> str:
        """Render ``sql`` with ``args`` inlined as literals.

        Args:
            sql: SQL text with ``?``, ``$n`` or ``:name`` placeholders.
            *args: Positional arguments, or a single record or mapping for named placeholders.

        Returns:
            The rendered SQL, or ``sql`` prefixed with the configured undefined
            marker when it contains no recognised placeholder.
        """
        style = self.validator.detect_style(sql)
        if style == ParameterStyle.NONE:
            return self.config.undefined_prefix + sql
        if not args:
            return sql
        literals = self.classifier.classify(args)
        return self.substitute(sql, self.validator.extract_parameters(sql, style), literals)

    def substitute(self, sql: str, parameter_info: "list[ParameterInfo]", literals: ClassifiedArguments) -> str:
        """Replace each occurrence that has a literal, leaving the rest untouched.

        Args:
            sql: The original SQL text.
            parameter_info: Placeholder occurrences sorted by position.
            literals: Encoded literals.

        Returns:
            The rewritten SQL text.
        """
        if not parameter_info or not literals:
            return sql

        result_parts = []
        current_pos = 0
        for param in parameter_info:
            literal = literals.lookup(param.key)
            if literal is None:
                continue
            result_parts.append(sql[current_pos : param.position])
            result_parts.append(literal)
            current_pos = param.end

        result_parts.append(sql[current_pos:])
        return "".join(result_parts)


def render_literal(sql: str, *args: Any, config: Optional[LiteralConfig] = None) -> str:
    """Render ``sql`` with its arguments inlined as SQL literals.

    Intended for logging: argument content never raises (a failing
    ``sql_value()`` renders as ``NULL`` unless ``config`` is strict), and a
    query without placeholders comes back as
    ``"placeholder is undefined: " + sql``.

    Examples:
        >>> render_literal("$1, $2", 123, "test string")
        "123, 'test string'"
        >>> render_literal("(:name, :digit)", {"name": "a", "digit": 7})
        "('a', 7)"

    Args:
        sql: SQL text with ``?``, ``$n`` or ``:name`` placeholders.
        *args: Positional arguments, or a single record or mapping.
        config: Literal configuration.

    Returns:
        The rendered SQL.
    """
    return TemplateRenderer(config).render(sql, *args)
