"""Schema layer for parsing declaration files."""

from .errors import SchemaError, SchemaLoadError, SchemaValidationError
from .models import Declaration, EdgeGroupSpec
from .loader import (
    load_yaml,
    load_yaml_string,
    parse_declaration,
    parse_declaration_from_string,
    validate_data,
)

__all__ = [
    "SchemaError",
    "SchemaLoadError",
    "SchemaValidationError",
    "Declaration",
    "EdgeGroupSpec",
    "load_yaml",
    "load_yaml_string",
    "parse_declaration",
    "parse_declaration_from_string",
    "validate_data",
]
