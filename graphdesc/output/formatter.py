"""Output formatting for descriptions and build errors."""

import json
from typing import Literal

from ..description.errors import (
    DescriptionError,
    DuplicateEdgeGroup,
    DuplicateNode,
    InvalidName,
    UnknownNode,
)
from ..description.model import Description
from ..description.registry import thaw
from ..description.serde import to_dict

OutputFormat = Literal["text", "json"]


def format_description(
    description: Description,
    format: OutputFormat = "text",
) -> str:
    """Format a description summary for output.

    Args:
        description: The description to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        data = {
            "node_count": len(description.nodes),
            "group_count": len(description.groups()),
            **to_dict(description),
        }
        return json.dumps(data, indent=2)
    return _format_text(description)


def _format_text(description: Description) -> str:
    """Format a description as human-readable text."""
    lines: list[str] = []

    # Nodes section
    lines.append("NODES:")
    if len(description.nodes):
        for node in description.nodes:
            lines.append(f"  {node.id}: {node.name}")
    else:
        lines.append("  (none)")

    # Groups section
    for group_name in description.groups():
        group = description.edge_group(group_name)
        lines.append("")
        lines.append(f"EDGE GROUP {group_name} ({len(group)} edges):")
        if not len(group):
            lines.append("  (none)")
        for source, target in group:
            lines.append(
                f"  {description.node_name(source)} -> {description.node_name(target)}"
            )

    lines.append("")
    lines.append(
        f"{len(description.nodes)} node(s), {len(description.groups())} edge group(s)"
    )
    return "\n".join(lines)


def format_node_report(
    description: Description,
    node_name: str,
    format: OutputFormat = "text",
) -> str:
    """Format the per-node queries for one node, including its data."""
    node_data = description.node_data(node_name)
    data = {
        "node": node_name,
        "id": description.node_id(node_name),
        "outgoing_edges": description.outgoing_edges(node_name),
        "incoming_edges": description.incoming_edges(node_name),
        "connected_nodes": description.connected_nodes(node_name),
        "data": thaw(node_data) if node_data is not None else None,
    }
    if format == "json":
        return json.dumps(data, indent=2)

    if data["id"] is None:
        return f"Node '{node_name}' not found"

    lines = [f"{node_name} (id {data['id']})"]
    for key in ("outgoing_edges", "incoming_edges", "connected_nodes"):
        values = ", ".join(data[key]) or "(none)"
        lines.append(f"  {key.replace('_', ' ')}: {values}")
    if data["data"]:
        lines.append(f"  data: {json.dumps(data['data'], sort_keys=True)}")
    return "\n".join(lines)


def format_build_error(error: DescriptionError, format: OutputFormat = "text") -> str:
    """Format a build failure, including the element that caused it."""
    details: dict[str, str | None] = {}
    if isinstance(error, DuplicateNode):
        code = "DUPLICATE_NODE"
        details["name"] = error.name
    elif isinstance(error, UnknownNode):
        code = "UNKNOWN_NODE"
        details["reference"] = error.reference
        details["group_name"] = error.group_name
    elif isinstance(error, DuplicateEdgeGroup):
        code = "DUPLICATE_EDGE_GROUP"
        details["group_name"] = error.group_name
    elif isinstance(error, InvalidName):
        code = "INVALID_NAME"
        details["kind"] = error.kind
        details["name"] = error.name
    else:
        code = "BUILD_ERROR"

    if format == "json":
        return json.dumps(
            {"valid": False, "code": code, "message": str(error), "details": details},
            indent=2,
        )
    return f"✘ {code}: {error}"
