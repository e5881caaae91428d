"""Node registry and the frozen node table it produces."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from .errors import DuplicateNode, InvalidName, UnknownNode

EMPTY_DATA: Mapping[str, Any] = MappingProxyType({})


def freeze(value: Any) -> Any:
    """Recursively turn mappings into read-only views and lists into tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of ``freeze``: plain dicts and lists for serialization."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class Node:
    """A declared node, its assigned identifier and its data."""

    name: str
    id: int
    data: Mapping[str, Any] = field(default_factory=lambda: EMPTY_DATA, hash=False)


@dataclass(frozen=True)
class NodeTable:
    """Immutable name <-> id bijection with per-node data.

    A node's id is its position in ``names``; ``data`` is aligned with it.
    """

    names: tuple[str, ...]
    data: tuple[Mapping[str, Any], ...] = field(default=(), hash=False)
    _ids: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        data = list(self.data)[: len(self.names)]
        data.extend(EMPTY_DATA for _ in range(len(self.names) - len(data)))
        object.__setattr__(self, "data", tuple(freeze(item or {}) for item in data))

        ids = {name: node_id for node_id, name in enumerate(self.names)}
        object.__setattr__(self, "_ids", MappingProxyType(ids))

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[Node]:
        for node_id, name in enumerate(self.names):
            yield Node(name=name, id=node_id, data=self.data[node_id])

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def id_of(self, name: str) -> int | None:
        """Get the id for a node name, or None if it is not registered."""
        return self._ids.get(name)

    def name_of(self, node_id: int) -> str | None:
        """Get the name for a node id, or None if the id is out of range."""
        if isinstance(node_id, bool) or not isinstance(node_id, int):
            return None
        if 0 <= node_id < len(self.names):
            return self.names[node_id]
        return None

    def data_of(self, name: str) -> Mapping[str, Any] | None:
        """Get the read-only data of a node, or None if it is not registered."""
        node_id = self._ids.get(name)
        if node_id is None:
            return None
        return self.data[node_id]

    def resolve(self, name: str, group_name: str | None = None) -> int:
        """Resolve a symbolic node name to its id.

        Args:
            name: The node name to look up.
            group_name: The edge group making the reference, if any.

        Returns:
            The registered id.

        Raises:
            UnknownNode: If the name was never registered.
        """
        node_id = self._ids.get(name)
        if node_id is None:
            raise UnknownNode(name, group_name)
        return node_id


class NodeRegistry:
    """Assigns sequential ids to node names while a description is built."""

    def __init__(self):
        self._names: list[str] = []
        self._data: list[Mapping[str, Any]] = []
        self._ids: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._names)

    def register(self, name: str, data: Mapping[str, Any] | None = None) -> int:
        """Register a node name and return its new id.

        Args:
            name: The node name.
            data: Optional data mapping, copied and frozen on registration.

        Raises:
            InvalidName: If the name is empty.
            DuplicateNode: If the name is already registered.
        """
        if not name:
            raise InvalidName("node", name)
        if name in self._ids:
            raise DuplicateNode(name)

        node_id = len(self._names)
        self._names.append(name)
        self._data.append(freeze(data or {}))
        self._ids[name] = node_id
        return node_id

    def resolve(self, name: str) -> int:
        """Look up the id of a registered name."""
        node_id = self._ids.get(name)
        if node_id is None:
            raise UnknownNode(name)
        return node_id

    def finalize(self) -> NodeTable:
        """Freeze the registered names and data into a NodeTable."""
        return NodeTable(names=tuple(self._names), data=tuple(self._data))
