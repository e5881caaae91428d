"""Builder for compiling a Declaration into a Description."""

import logging
from typing import Any, Iterable, Mapping

from ..config import BuildSettings
from ..schema.models import Declaration, EdgeGroupSpec
from .errors import DuplicateEdgeGroup
from .model import Description
from .registry import NodeRegistry
from .resolver import EdgeGroup, resolve_group

logger = logging.getLogger(__name__)


def build_description(
    declaration: Declaration, settings: BuildSettings | None = None
) -> Description:
    """Build a Description from a Declaration.

    Every node is registered before any edge is resolved. The first error
    aborts the build, so no partial Description is ever returned.

    Args:
        declaration: The parsed declaration.
        settings: Build settings; defaults to ``BuildSettings()``.

    Returns:
        The finished Description.

    Raises:
        InvalidName: If a node or group name is empty.
        DuplicateNode: If a node name is declared twice.
        DuplicateEdgeGroup: If a group name is declared twice.
        UnknownNode: If a group references an undeclared node, or data is
            given for a node that is not declared.
    """
    settings = settings or BuildSettings()

    registry = NodeRegistry()
    for name in declaration.nodes:
        registry.register(name, declaration.node_data.get(name))
    node_table = registry.finalize()
    for name in declaration.node_data:
        node_table.resolve(name)
    logger.debug("Registered %d nodes", len(node_table))

    # Resolve groups (after all nodes exist)
    edge_groups: dict[str, EdgeGroup] = {}
    for group_name, adjacency in declaration.iter_groups():
        if group_name in edge_groups:
            raise DuplicateEdgeGroup(group_name)
        edge_groups[group_name] = resolve_group(
            group_name, adjacency, node_table, settings.duplicates
        )
        logger.debug(
            "Resolved edge group '%s' with %d edges",
            group_name,
            len(edge_groups[group_name]),
        )

    description = Description(node_table, edge_groups)
    logger.info(
        "Built description with %d nodes and %d edge groups",
        len(node_table),
        len(edge_groups),
    )
    return description


class DescriptionBuilder:
    """Chained authoring API that records a declaration for ``build``.

    Example:
        >>> description = (
        ...     DescriptionBuilder()
        ...     .add_nodes("a", "b")
        ...     .add_edges("g", "a", ["b"])
        ...     .build()
        ... )
        >>> description.node_id("b")
        1
    """

    def __init__(self):
        self._nodes: list[str] = []
        self._node_data: dict[str, Mapping[str, Any]] = {}
        self._groups: dict[str, dict[str, list[str]]] = {}

    def add_node(
        self, name: str, data: Mapping[str, Any] | None = None
    ) -> "DescriptionBuilder":
        """Declare a node, optionally with a data mapping."""
        self._nodes.append(name)
        if data:
            self._node_data[name] = dict(data)
        return self

    def add_nodes(self, *names: str) -> "DescriptionBuilder":
        """Declare several nodes in order."""
        self._nodes.extend(names)
        return self

    def add_edges(
        self, group_name: str, source: str, targets: Iterable[str]
    ) -> "DescriptionBuilder":
        """Declare edges from ``source`` to each target in a group.

        A single target may be passed as a plain string. Repeated calls for
        the same group and source append to its targets.
        """
        if isinstance(targets, str):
            targets = [targets]
        adjacency = self._groups.setdefault(group_name, {})
        adjacency.setdefault(source, []).extend(targets)
        return self

    def declaration(self) -> Declaration:
        """Get the recorded declaration."""
        return Declaration(
            nodes=list(self._nodes),
            node_data=dict(self._node_data),
            edge_groups=[
                EdgeGroupSpec(
                    name=name,
                    edges={source: list(targets) for source, targets in edges.items()},
                )
                for name, edges in self._groups.items()
            ],
        )

    def build(self, settings: BuildSettings | None = None) -> Description:
        """Validate the recorded declaration and build a Description."""
        return build_description(self.declaration(), settings)
