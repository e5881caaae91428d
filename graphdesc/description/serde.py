"""Conversion between a Description and a tree of primitive values.

The tree has the form::

    {
        "version": 1,
        "nodes": ["device", "safety"],
        "node_data": {"device": {"kind": "sensor"}},
        "edge_groups": {"config_standard": [[0, 1]]},
    }

A node's id is its position in ``nodes``. ``node_data`` lists only nodes
that carry data and may be omitted. Restoring a tree goes through
``build_description``, so a restored Description is checked exactly like
a freshly built one.
"""

import json
import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from ..config import BuildSettings, DuplicatePolicy
from ..schema.errors import SchemaValidationError
from ..schema.loader import load_yaml, load_yaml_string, validate_data
from ..schema.models import Declaration, EdgeGroupSpec
from .builder import build_description
from .errors import UnknownNode
from .model import Description
from .registry import thaw

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1

SerialFormat = Literal["json", "yaml"]


class SerializedDescription(BaseModel):
    """Shape of a serialized Description."""

    version: int = FORMAT_VERSION
    nodes: list[str] = Field(default_factory=list)
    node_data: dict[str, dict[str, Any]] = Field(default_factory=dict)
    edge_groups: dict[str, list[tuple[int, int]]] = Field(default_factory=dict)


def to_dict(description: Description) -> dict[str, Any]:
    """Convert a Description to a tree of primitive values."""
    return {
        "version": FORMAT_VERSION,
        "nodes": description.node_names(),
        "node_data": {
            node.name: thaw(node.data) for node in description.nodes if node.data
        },
        "edge_groups": {
            name: [[source, target] for source, target in group]
            for name, group in description.edge_groups.items()
        },
    }


def from_dict(data: dict[str, Any]) -> Description:
    """Rebuild a Description from a tree produced by ``to_dict``.

    Args:
        data: The primitive tree.

    Returns:
        The validated Description.

    Raises:
        SchemaValidationError: If the tree has the wrong shape or version.
        DuplicateNode: If a node name appears twice.
        UnknownNode: If an edge uses an id outside the node list, or data
            is given for a name outside it.
    """
    serialized = validate_data(SerializedDescription, data)
    if serialized.version != FORMAT_VERSION:
        raise SchemaValidationError(
            f"Unsupported description version {serialized.version}",
            [
                {
                    "loc": "version",
                    "msg": f"expected {FORMAT_VERSION}",
                    "type": "version_mismatch",
                }
            ],
            model="SerializedDescription",
        )

    names = serialized.nodes
    groups = []
    for group_name, edges in serialized.edge_groups.items():
        adjacency: dict[str, list[str]] = {}
        for source, target in edges:
            adjacency.setdefault(_name_for(names, source, group_name), []).append(
                _name_for(names, target, group_name)
            )
        groups.append(EdgeGroupSpec(name=group_name, edges=adjacency))

    declaration = Declaration(
        nodes=names, node_data=serialized.node_data, edge_groups=groups
    )
    settings = BuildSettings(duplicates=DuplicatePolicy.ALLOW_DUPLICATES)
    return build_description(declaration, settings)


def _name_for(names: list[str], node_id: int, group_name: str) -> str:
    """Map a serialized id back to its node name."""
    if 0 <= node_id < len(names):
        return names[node_id]
    raise UnknownNode(str(node_id), group_name)


def dumps(description: Description, format: SerialFormat = "json") -> str:
    """Serialize a Description to JSON or YAML text."""
    data = to_dict(description)
    if format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=None)
    return json.dumps(data, indent=2)


def loads(text: str) -> Description:
    """Deserialize a Description from JSON or YAML text.

    Raises:
        SchemaLoadError: If the text cannot be parsed.
        SchemaValidationError: If the tree has the wrong shape.
        DescriptionError: If the tree fails build validation.
    """
    return from_dict(load_yaml_string(text))


def save(description: Description, path: str | Path) -> Path:
    """Write a Description to a file, choosing the format by suffix."""
    path = Path(path)
    text = dumps(description, format_for_path(path))
    path.write_text(text, encoding="utf-8")
    logger.debug("Saved description to %s", path)
    return path


def load(path: str | Path) -> Description:
    """Read a Description from a JSON or YAML file."""
    description = from_dict(load_yaml(path))
    logger.debug("Loaded description from %s", path)
    return description


def format_for_path(path: str | Path) -> SerialFormat:
    """Pick the serialization format for a file name."""
    if Path(path).suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "json"
