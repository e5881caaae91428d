"""Pydantic models for graphdesc declarations."""

from typing import Any, Iterator

from pydantic import BaseModel, Field, model_validator


class EdgeGroupSpec(BaseModel):
    """A named adjacency list keyed by symbolic source names."""

    name: str
    edges: dict[str, list[str]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_targets(cls, data: dict) -> dict:
        """Normalize a single target to a one-element list."""
        if isinstance(data, dict):
            data = dict(data)
            edges = data.get("edges")
            if edges is None:
                data["edges"] = {}
            elif isinstance(edges, dict):
                data["edges"] = {
                    source: _normalize_target_list(targets)
                    for source, targets in edges.items()
                }
        return data


def _normalize_target_list(targets: Any) -> Any:
    if targets is None:
        return []
    if isinstance(targets, str):
        return [targets]
    return targets


class Declaration(BaseModel):
    """Root model for a declaration: node names plus named edge groups.

    Edge groups are kept as an ordered list so a repeated group name stays
    visible to the builder instead of being collapsed by a mapping.
    ``node_data`` holds the optional data mapping attached to a node.
    """

    nodes: list[str] = Field(default_factory=list)
    node_data: dict[str, dict[str, Any]] = Field(default_factory=dict)
    edge_groups: list[EdgeGroupSpec] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_declaration(cls, data: dict) -> dict:
        """Normalize the mapping shorthands for nodes and edge groups."""
        if not isinstance(data, dict):
            return data
        data = dict(data)

        # nodes: {device: {kind: sensor}, io: null} -> [device, io] + node_data
        nodes = data.get("nodes")
        if nodes is None:
            data["nodes"] = []
        elif isinstance(nodes, dict):
            node_data = dict(data.get("node_data") or {})
            for name, value in nodes.items():
                if value is not None:
                    node_data.setdefault(name, value)
            data["nodes"] = list(nodes.keys())
            data["node_data"] = node_data

        if data.get("node_data") is None:
            data["node_data"] = {}

        # edge_groups: {g: {a: [b]}} -> [{name: g, edges: {a: [b]}}]
        groups = data.get("edge_groups")
        if groups is None:
            data["edge_groups"] = []
        elif isinstance(groups, dict):
            data["edge_groups"] = [
                {"name": name, "edges": edges}
                for name, edges in groups.items()
            ]

        return data

    def iter_groups(self) -> Iterator[tuple[str, dict[str, list[str]]]]:
        """Iterate over (group_name, adjacency) pairs in declaration order."""
        for group in self.edge_groups:
            yield group.name, group.edges

    def get_group_names(self) -> list[str]:
        """Get all declared group names, repeats included."""
        return [group.name for group in self.edge_groups]
