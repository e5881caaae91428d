"""graphdesc: compile named nodes and edge groups into a validated Description."""

from .config import BuildSettings, DuplicatePolicy
from .description import (
    Description,
    DescriptionBuilder,
    DescriptionError,
    DuplicateEdgeGroup,
    DuplicateNode,
    EdgeGroup,
    InvalidName,
    UnknownNode,
    build_description,
)
from .schema import Declaration, parse_declaration, parse_declaration_from_string

__version__ = "0.1.0"

__all__ = [
    "BuildSettings",
    "DuplicatePolicy",
    "Description",
    "DescriptionBuilder",
    "DescriptionError",
    "DuplicateEdgeGroup",
    "DuplicateNode",
    "EdgeGroup",
    "InvalidName",
    "UnknownNode",
    "build_description",
    "Declaration",
    "parse_declaration",
    "parse_declaration_from_string",
]
