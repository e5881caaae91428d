"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from graphdesc.schema.loader import parse_declaration_from_string
from graphdesc.description.builder import build_description


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def standard_declaration_yaml() -> str:
    """Return a declaration with one edge group over six nodes."""
    return """
nodes: [device, safety, controller, power, control, io]

edge_groups:
  config_standard:
    device: [safety, controller, power, control, io]
    safety: [controller, power]
"""


@pytest.fixture
def two_group_declaration_yaml() -> str:
    """Return a declaration with two groups sharing a node set."""
    return """
nodes: [node1, node2, node3]

edge_groups:
  edge1:
    node1: [node2]
  edge2:
    node1: [node3]
    node2: [node1]
"""


@pytest.fixture
def standard_declaration(standard_declaration_yaml):
    """Return the parsed standard declaration."""
    return parse_declaration_from_string(standard_declaration_yaml)


@pytest.fixture
def standard_description(standard_declaration):
    """Return the description built from the standard declaration."""
    return build_description(standard_declaration)


@pytest.fixture
def two_group_description(two_group_declaration_yaml):
    """Return the description built from the two-group declaration."""
    return build_description(parse_declaration_from_string(two_group_declaration_yaml))
