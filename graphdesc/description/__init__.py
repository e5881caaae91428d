"""Description layer: node registry, edge group resolution and the built artifact."""

from .errors import (
    DescriptionError,
    DuplicateEdgeGroup,
    DuplicateNode,
    InvalidName,
    UnknownNode,
)
from .registry import Node, NodeRegistry, NodeTable
from .resolver import DuplicatePolicy, EdgeGroup, resolve_group
from .model import Description
from .builder import DescriptionBuilder, build_description
from .serde import dumps, from_dict, load, loads, save, to_dict

__all__ = [
    "DescriptionError",
    "DuplicateEdgeGroup",
    "DuplicateNode",
    "InvalidName",
    "UnknownNode",
    "Node",
    "NodeRegistry",
    "NodeTable",
    "DuplicatePolicy",
    "EdgeGroup",
    "resolve_group",
    "Description",
    "DescriptionBuilder",
    "build_description",
    "dumps",
    "from_dict",
    "load",
    "loads",
    "save",
    "to_dict",
]
