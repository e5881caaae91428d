"""Tests for edge group resolution."""

import pytest

from graphdesc.config import DuplicatePolicy
from graphdesc.description.errors import InvalidName, UnknownNode
from graphdesc.description.registry import NodeTable
from graphdesc.description.resolver import EdgeGroup, resolve_group


@pytest.fixture
def table():
    return NodeTable(names=("a", "b", "c"))


class TestResolveGroup:
    def test_resolve_edges(self, table):
        group = resolve_group("g", {"a": ["b", "c"], "b": ["c"]}, table)

        assert group.name == "g"
        assert group.edges == ((0, 1), (0, 2), (1, 2))

    def test_unknown_target(self, table):
        with pytest.raises(UnknownNode) as exc_info:
            resolve_group("g", {"a": ["b", "z"]}, table)
        assert exc_info.value.reference == "z"
        assert exc_info.value.group_name == "g"

    def test_unknown_source(self, table):
        with pytest.raises(UnknownNode) as exc_info:
            resolve_group("g", {"z": []}, table)
        assert exc_info.value.reference == "z"

    def test_first_bad_reference_reported(self, table):
        with pytest.raises(UnknownNode) as exc_info:
            resolve_group("g", {"a": ["x"], "y": ["b"]}, table)
        assert exc_info.value.reference == "x"

    def test_empty_group_name(self, table):
        with pytest.raises(InvalidName) as exc_info:
            resolve_group("", {"a": ["b"]}, table)
        assert exc_info.value.kind == "edge group"

    def test_self_loop_allowed(self, table):
        group = resolve_group("g", {"a": ["a"]}, table)
        assert group.edges == ((0, 0),)

    def test_duplicates_kept_by_default(self, table):
        group = resolve_group("g", {"a": ["b", "b", "c"]}, table)
        assert group.edges == ((0, 1), (0, 1), (0, 2))

    def test_deduplicate(self, table):
        group = resolve_group(
            "g", {"a": ["b", "b", "c", "b"]}, table, DuplicatePolicy.DEDUPLICATE
        )
        assert group.edges == ((0, 1), (0, 2))

    def test_policy_accepts_string_value(self, table):
        group = resolve_group("g", {"a": ["b", "b"]}, table, "deduplicate")
        assert len(group) == 1

    def test_empty_adjacency(self, table):
        group = resolve_group("g", {}, table)
        assert len(group) == 0


class TestEdgeGroup:
    @pytest.fixture
    def group(self):
        return EdgeGroup(name="g", edges=((0, 1), (0, 2), (2, 1), (0, 1)))

    def test_successors(self, group):
        assert group.successors(0) == (1, 2, 1)
        assert group.successors(1) == ()

    def test_predecessors(self, group):
        assert group.predecessors(1) == (0, 2, 0)
        assert group.predecessors(0) == ()

    def test_has_edge(self, group):
        assert group.has_edge(2, 1)
        assert not group.has_edge(1, 2)

    def test_contains_pair(self, group):
        assert (0, 2) in group
        assert (1, 0) not in group
        assert "0" not in group

    def test_iteration_and_length(self, group):
        assert list(group) == [(0, 1), (0, 2), (2, 1), (0, 1)]
        assert len(group) == 4

    def test_sources(self, group):
        assert group.sources() == [0, 2]

    def test_equality_ignores_indexes(self, group):
        assert group == EdgeGroup(name="g", edges=((0, 1), (0, 2), (2, 1), (0, 1)))
        assert group != EdgeGroup(name="h", edges=group.edges)
