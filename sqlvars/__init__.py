"""sqlvars: bind and inline SQL query parameters."""

from sqlvars import exceptions, parameters, utils
from sqlvars.__metadata__ import __version__
from sqlvars.exceptions import (
    EmptyListParameterError,
    ExtraParameterError,
    MissingParameterError,
    ParameterError,
    SQLVarsError,
    ValueProductionError,
)
from sqlvars.parameters import (
    LiteralConfig,
    Nullable,
    ParameterStyle,
    detect_style,
    encode_literal,
    expand_in,
    rebind,
    render_literal,
)
from sqlvars.protocols import SQLValueProtocol

__all__ = (
    "EmptyListParameterError",
    "ExtraParameterError",
    "LiteralConfig",
    "MissingParameterError",
    "Nullable",
    "ParameterError",
    "ParameterStyle",
    "SQLValueProtocol",
    "SQLVarsError",
    "ValueProductionError",
    "__version__",
    "detect_style",
    "encode_literal",
    "exceptions",
    "expand_in",
    "parameters",
    "rebind",
    "render_literal",
    "utils",
)
