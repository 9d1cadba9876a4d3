from typing import Any, Optional

__all__ = (
    "EmptyListParameterError",
    "ExtraParameterError",
    "MissingParameterError",
    "ParameterError",
    "SQLVarsError",
    "ValueProductionError",
)


class SQLVarsError(Exception):
    """Base exception class from which all sqlvars exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLVarsError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


# -- SQL Parameter Errors --
class ParameterError(SQLVarsError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MissingParameterError(ParameterError):
    """Raised when the query has more placeholders than supplied arguments."""


class ExtraParameterError(ParameterError):
    """Raised when more arguments are supplied than the query has placeholders."""


class EmptyListParameterError(ParameterError):
    """Raised when an empty sequence is bound to an ``IN (?)`` placeholder."""


class ValueProductionError(SQLVarsError):
    """A value's ``sql_value()`` or ``str()`` hook failed while it was being encoded.

    The original exception is always chained as ``__cause__``.
    """

    value_type: str

    def __init__(self, value: Any, reason: Optional[BaseException] = None) -> None:
        self.value_type = type(value).__name__
        message = f"Could not produce a storable value from {self.value_type}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(detail=message)
