"""Resolution of symbolic edge groups into directed graphs of node ids."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from ..config import DuplicatePolicy
from .errors import InvalidName
from .registry import NodeTable

Edge = tuple[int, int]


@dataclass(frozen=True)
class EdgeGroup:
    """A named directed graph over the node ids of one description.

    Edges are ordered by source declaration, then by target declaration.
    """

    name: str
    edges: tuple[Edge, ...]
    _successors: Mapping[int, tuple[int, ...]] = field(
        init=False, repr=False, compare=False
    )
    _predecessors: Mapping[int, tuple[int, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        successors: dict[int, list[int]] = {}
        predecessors: dict[int, list[int]] = {}
        for source, target in self.edges:
            successors.setdefault(source, []).append(target)
            predecessors.setdefault(target, []).append(source)

        object.__setattr__(
            self,
            "_successors",
            MappingProxyType({k: tuple(v) for k, v in successors.items()}),
        )
        object.__setattr__(
            self,
            "_predecessors",
            MappingProxyType({k: tuple(v) for k, v in predecessors.items()}),
        )

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __contains__(self, edge: object) -> bool:
        if not isinstance(edge, tuple) or len(edge) != 2:
            return False
        return self.has_edge(*edge)

    def successors(self, node_id: int) -> tuple[int, ...]:
        """Get target ids of edges leaving a node, in edge order."""
        return self._successors.get(node_id, ())

    def predecessors(self, node_id: int) -> tuple[int, ...]:
        """Get source ids of edges entering a node, in edge order."""
        return self._predecessors.get(node_id, ())

    def has_edge(self, source_id: int, target_id: int) -> bool:
        """Check whether at least one source -> target edge exists."""
        return target_id in self._successors.get(source_id, ())

    def sources(self) -> list[int]:
        """Get the ids that have outgoing edges, in first-seen order."""
        return list(self._successors)


def resolve_group(
    group_name: str,
    adjacency: Mapping[str, Iterable[str]],
    node_table: NodeTable,
    policy: DuplicatePolicy = DuplicatePolicy.ALLOW_DUPLICATES,
) -> EdgeGroup:
    """Resolve one symbolic adjacency list into an EdgeGroup.

    Each source is resolved before its targets, and targets in the order
    they are listed, so the first bad reference is the one reported.

    Args:
        group_name: The edge group name.
        adjacency: Mapping of source node name to target node names.
        node_table: The finalized node table to resolve against.
        policy: Whether repeated (source, target) pairs are kept or dropped.

    Returns:
        The resolved EdgeGroup.

    Raises:
        InvalidName: If the group name is empty.
        UnknownNode: If a source or target name is not in the node table.
    """
    if not group_name:
        raise InvalidName("edge group", group_name)

    policy = DuplicatePolicy(policy)
    edges: list[Edge] = []
    seen: set[Edge] = set()

    for source_name, target_names in adjacency.items():
        source_id = node_table.resolve(source_name, group_name)
        for target_name in target_names:
            edge = (source_id, node_table.resolve(target_name, group_name))
            if policy is DuplicatePolicy.DEDUPLICATE:
                if edge in seen:
                    continue
                seen.add(edge)
            edges.append(edge)

    return EdgeGroup(name=group_name, edges=tuple(edges))
