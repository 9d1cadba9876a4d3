"""Runtime-checkable protocols for values that describe themselves.

These replace ad-hoc ``hasattr()`` probing in the encoder and the
``IN`` expansion.
"""

from typing import Any, Protocol, runtime_checkable

__all__ = ("SQLValueProtocol",)


@runtime_checkable
class SQLValueProtocol(Protocol):
    """Protocol for values that can produce their own storable value.

    ``sql_value()`` returns a plain value (``None``, ``bool``, ``int``,
    ``float``, ``str``, ``bytes``, ``datetime`` ...) that is encoded in
    place of the object. It may raise to report that no value can be
    produced.
    """

    def sql_value(self) -> Any:
        """Return the underlying storable value."""
        ...
