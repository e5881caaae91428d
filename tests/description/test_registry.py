"""Tests for the node registry and node table."""

from types import MappingProxyType

import pytest

from graphdesc.description.errors import DuplicateNode, InvalidName, UnknownNode
from graphdesc.description.registry import Node, NodeRegistry, NodeTable, freeze, thaw


class TestNodeRegistry:
    def test_register_assigns_sequential_ids(self):
        registry = NodeRegistry()

        assert registry.register("a") == 0
        assert registry.register("b") == 1
        assert registry.register("c") == 2
        assert len(registry) == 3

    def test_register_duplicate(self):
        registry = NodeRegistry()
        registry.register("a")

        with pytest.raises(DuplicateNode) as exc_info:
            registry.register("a")
        assert exc_info.value.name == "a"
        assert len(registry) == 1

    def test_register_empty_name(self):
        registry = NodeRegistry()

        with pytest.raises(InvalidName) as exc_info:
            registry.register("")
        assert exc_info.value.kind == "node"

    def test_resolve(self):
        registry = NodeRegistry()
        registry.register("a")
        registry.register("b")

        assert registry.resolve("b") == 1

    def test_resolve_unknown(self):
        registry = NodeRegistry()

        with pytest.raises(UnknownNode) as exc_info:
            registry.resolve("missing")
        assert exc_info.value.reference == "missing"
        assert exc_info.value.group_name is None

    def test_finalize(self):
        registry = NodeRegistry()
        for name in ["x", "y"]:
            registry.register(name)

        table = registry.finalize()
        assert table.names == ("x", "y")
        assert list(table) == [Node(name="x", id=0), Node(name="y", id=1)]


class TestNodeTable:
    @pytest.fixture
    def table(self):
        return NodeTable(names=("device", "safety", "io"))

    def test_bijection(self, table):
        for node in table:
            assert table.id_of(node.name) == node.id
            assert table.name_of(node.id) == node.name

    def test_missing_lookups_return_none(self, table):
        assert table.id_of("missing") is None
        assert table.name_of(3) is None
        assert table.name_of(-1) is None
        assert table.name_of(True) is None

    def test_contains(self, table):
        assert "safety" in table
        assert "missing" not in table

    def test_resolve_reports_group(self, table):
        with pytest.raises(UnknownNode) as exc_info:
            table.resolve("missing", "g")
        assert exc_info.value.reference == "missing"
        assert exc_info.value.group_name == "g"
        assert "'g'" in str(exc_info.value)

    def test_tables_compare_by_names(self, table):
        assert table == NodeTable(names=("device", "safety", "io"))
        assert table != NodeTable(names=("safety", "device", "io"))

    def test_default_data_is_empty(self, table):
        assert table.data_of("device") == {}
        assert table.data_of("missing") is None

    def test_table_is_frozen(self, table):
        with pytest.raises(AttributeError):
            table.names = ("other",)


class TestNodeData:
    def test_register_with_data(self):
        registry = NodeRegistry()
        registry.register("device", {"kind": "sensor"})
        registry.register("io")

        table = registry.finalize()
        assert table.data_of("device") == {"kind": "sensor"}
        assert table.data_of("io") == {}
        assert list(table)[0].data == {"kind": "sensor"}

    def test_data_copied_on_register(self):
        data = {"kind": "sensor", "pins": [1]}
        registry = NodeRegistry()
        registry.register("device", data)

        data["kind"] = "changed"
        data["pins"].append(2)
        assert registry.finalize().data_of("device") == {"kind": "sensor", "pins": (1,)}

    def test_data_is_read_only(self):
        table = NodeTable(names=("device",), data=({"limits": {"max": 3}},))

        with pytest.raises(TypeError):
            table.data_of("device")["kind"] = "x"
        with pytest.raises(TypeError):
            table.data_of("device")["limits"]["max"] = 4

    def test_tables_compare_data(self):
        table = NodeTable(names=("a",), data=({"x": 1},))
        assert table == NodeTable(names=("a",), data=({"x": 1},))
        assert table != NodeTable(names=("a",))


class TestFreezeThaw:
    def test_freeze_nested(self):
        frozen = freeze({"a": [1, {"b": 2}]})
        assert frozen["a"] == (1, {"b": 2})
        assert isinstance(frozen, MappingProxyType)

    def test_thaw_restores_plain_values(self):
        value = {"a": [1, {"b": [2]}], "c": "d"}
        assert thaw(freeze(value)) == value
        assert isinstance(thaw(freeze(value))["a"], list)
