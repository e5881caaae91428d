"""The immutable Description produced by a successful build."""

from types import MappingProxyType
from typing import Any, Iterator, Mapping

import networkx as nx

from .registry import NodeTable, thaw
from .resolver import EdgeGroup


class Description:
    """A validated node table plus one directed graph per edge group.

    Instances are created by the builder and expose no mutators, so they
    can be shared freely between readers. Lookups for unknown names, ids
    or groups return None or an empty result instead of raising.
    """

    def __init__(self, nodes: NodeTable, edge_groups: Mapping[str, EdgeGroup]):
        self._nodes = nodes
        self._edge_groups = MappingProxyType(dict(edge_groups))

    def __repr__(self) -> str:
        return (
            f"Description(nodes={len(self._nodes)}, "
            f"groups={list(self._edge_groups)!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Description):
            return NotImplemented
        return self._nodes == other._nodes and list(
            self._edge_groups.items()
        ) == list(other._edge_groups.items())

    __hash__ = None  # type: ignore[assignment]

    @property
    def nodes(self) -> NodeTable:
        """Get the node table."""
        return self._nodes

    @property
    def edge_groups(self) -> Mapping[str, EdgeGroup]:
        """Get a read-only view of the edge groups, in declaration order."""
        return self._edge_groups

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def node_id(self, name: str) -> int | None:
        """Get the id of a node, or None if no such node exists."""
        return self._nodes.id_of(name)

    def node_name(self, node_id: int) -> str | None:
        """Get the name of a node id, or None if no such id exists."""
        return self._nodes.name_of(node_id)

    def node_data(self, name: str) -> Mapping[str, Any] | None:
        """Get the read-only data of a node, or None if no such node exists."""
        return self._nodes.data_of(name)

    def node_names(self) -> list[str]:
        """Get all node names in id order."""
        return list(self._nodes.names)

    def edge_group(self, group_name: str) -> EdgeGroup | None:
        """Get an edge group by name."""
        return self._edge_groups.get(group_name)

    def groups(self) -> list[str]:
        """Get the edge group names in declaration order."""
        return list(self._edge_groups)

    def iter_named_edges(self) -> Iterator[tuple[str, str, str]]:
        """Iterate over every edge of every group.

        Yields:
            Tuples of (group_name, source_name, target_name).
        """
        names = self._nodes.names
        for group_name, group in self._edge_groups.items():
            for source, target in group:
                yield group_name, names[source], names[target]

    # -------------------------------------------------------------------------
    # Per-node queries
    # -------------------------------------------------------------------------

    def outgoing_edges(self, node_name: str) -> list[str]:
        """Get the group name of every edge leaving a node."""
        node_id = self._nodes.id_of(node_name)
        if node_id is None:
            return []
        edges = []
        for group_name, group in self._edge_groups.items():
            edges.extend(group_name for _ in group.successors(node_id))
        return edges

    def incoming_edges(self, node_name: str) -> list[str]:
        """Get the group name of every edge entering a node."""
        node_id = self._nodes.id_of(node_name)
        if node_id is None:
            return []
        edges = []
        for group_name, group in self._edge_groups.items():
            edges.extend(group_name for _ in group.predecessors(node_id))
        return edges

    def connected_nodes(self, node_name: str) -> list[str]:
        """Get the successors of a node across all groups."""
        node_id = self._nodes.id_of(node_name)
        if node_id is None:
            return []
        names = self._nodes.names
        return [
            names[target]
            for group in self._edge_groups.values()
            for target in group.successors(node_id)
        ]

    def has_direct_edge(self, source_name: str, target_name: str) -> bool:
        """Check whether any group has an edge from source to target."""
        source_id = self._nodes.id_of(source_name)
        target_id = self._nodes.id_of(target_name)
        if source_id is None or target_id is None:
            return False
        return any(
            group.has_edge(source_id, target_id)
            for group in self._edge_groups.values()
        )

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def to_networkx(self, group_name: str) -> nx.MultiDiGraph | None:
        """Export one edge group as a networkx multigraph.

        Every node of the table is included, keyed by id with its name and
        a plain copy of its data as attributes, so isolated nodes survive
        the export.

        Args:
            group_name: The edge group to export.

        Returns:
            A new MultiDiGraph, or None if the group does not exist.
        """
        group = self._edge_groups.get(group_name)
        if group is None:
            return None

        graph = nx.MultiDiGraph(name=group_name)
        for node in self._nodes:
            graph.add_node(node.id, name=node.name, data=thaw(node.data))
        for source, target in group:
            graph.add_edge(source, target, group=group_name)
        return graph
