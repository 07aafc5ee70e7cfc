"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from graphseed.graph.entities import Host, Port, Service
from graphseed.graph.node import GraphNode, NodeRef, ParentEdge
from graphseed.graph.requirements import RequirementTable


class StubNode(GraphNode):
    """Minimal hand-written GraphNode with a free-form type tag."""

    def __init__(self, node_type: str, edge: ParentEdge | None = None, **props: Any) -> None:
        self._type = node_type
        self._edge = edge
        self._props = props

    def node_type(self) -> str:
        return self._type

    def identifying_properties(self) -> dict[str, Any]:
        return dict(self._props)

    def properties(self) -> dict[str, Any]:
        return dict(self._props)

    def parent_edge(self) -> ParentEdge | None:
        return self._edge


@pytest.fixture
def stub_edge():
    return ParentEdge(
        ref=NodeRef(node_type="host", properties={"ip": "10.0.0.1"}),
        relationship="HAS_PORT",
    )


@pytest.fixture
def sample_host():
    return Host(ip="10.0.0.1", hostname="web-01", state="up")


@pytest.fixture
def sample_port(sample_host):
    return Port(number=80, protocol="tcp", state="open").belongs_to(sample_host)


@pytest.fixture
def sample_service(sample_port):
    return Service(name="http", version="nginx/1.24").belongs_to(sample_port)


@pytest.fixture
def k8s_table():
    return RequirementTable.default().with_types(
        roots=["k8s:namespace"], children=["k8s:pod"],
    )


@pytest.fixture
def make_node():
    """Factory for StubNode instances."""
    return StubNode
