"""Detection of optional third-party record libraries.

pydantic and attrs are optional. Their presence is detected without
importing them so that ``import sqlvars`` stays cheap.
"""

from importlib.util import find_spec
from typing import Final

__all__ = ("ATTRS_INSTALLED", "PYDANTIC_INSTALLED", "module_available")


def module_available(name: str) -> bool:
    """Return True when ``name`` can be imported.

    Args:
        name: Top-level module name.

    Returns:
        Whether an import spec for the module exists.
    """
    try:
        return find_spec(name) is not None
    except (ImportError, ValueError):
        return False


PYDANTIC_INSTALLED: Final[bool] = module_available("pydantic")
ATTRS_INSTALLED: Final[bool] = module_available("attrs")
