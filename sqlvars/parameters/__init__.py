"""Parameter handling: literal rendering, ``IN`` expansion and placeholder rebinding."""

from sqlvars.parameters.classifier import ArgumentClassifier, FieldDescriptor, record_fields
from sqlvars.parameters.config import DEFAULT_LITERAL_CONFIG, LiteralConfig
from sqlvars.parameters.converter import rebind
from sqlvars.parameters.encoder import LiteralEncoder, encode_literal, quote_text
from sqlvars.parameters.expansion import expand_in
from sqlvars.parameters.renderer import TemplateRenderer, render_literal
from sqlvars.parameters.types import ClassifiedArguments, LiteralKey, Nullable, ParameterInfo, ParameterStyle
from sqlvars.parameters.validator import ParameterValidator, detect_style

__all__ = (
    "DEFAULT_LITERAL_CONFIG",
    "ArgumentClassifier",
    "ClassifiedArguments",
    "FieldDescriptor",
    "LiteralConfig",
    "LiteralEncoder",
    "LiteralKey",
    "Nullable",
    "ParameterInfo",
    "ParameterStyle",
    "ParameterValidator",
    "TemplateRenderer",
    "detect_style",
    "encode_literal",
    "expand_in",
    "quote_text",
    "rebind",
    "record_fields",
    "render_literal",
)
