"""Discovery results — per-run container of discovered nodes in parent-first order."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from graphseed.graph.custom import CustomEntity
from graphseed.graph.entities import (
    Api,
    Certificate,
    CloudAsset,
    Domain,
    Endpoint,
    Host,
    Port,
    Service,
    Subdomain,
    Technology,
)
from graphseed.graph.node import GraphNode

# Tools put their DiscoveryResult under this key in their output.
DISCOVERY_KEY = "discovery"

# Category order for all_nodes(). No category references a node in its own
# or a later tier, so emitting tier by tier puts parents first.
TIERS: tuple[tuple[str, ...], ...] = (
    ("hosts", "domains", "technologies", "certificates", "cloud_assets", "apis"),
    ("ports", "subdomains"),
    ("services",),
    ("endpoints",),
)
CATEGORIES: tuple[str, ...] = tuple(c for tier in TIERS for c in tier)


class DiscoveryResult(BaseModel):
    """Everything one discovery run found.

    One list per canonical category plus ``custom`` for any other GraphNode.
    Owned by a single discovery flow; not safe for concurrent mutation.

    Example::

        result = DiscoveryResult(
            hosts=[Host(ip="10.0.0.1")],
            ports=[Port(host_id="10.0.0.1", number=80)],
            services=[Service(port_id="10.0.0.1:80:tcp", name="http")],
        )
        result.all_nodes()  # [host, port, service]
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Tier 1: roots
    hosts: list[Host] = Field(default_factory=list)
    domains: list[Domain] = Field(default_factory=list)
    technologies: list[Technology] = Field(default_factory=list)
    certificates: list[Certificate] = Field(default_factory=list)
    cloud_assets: list[CloudAsset] = Field(default_factory=list)
    apis: list[Api] = Field(default_factory=list)
    # Tier 2
    ports: list[Port] = Field(default_factory=list)
    subdomains: list[Subdomain] = Field(default_factory=list)
    # Tier 3
    services: list[Service] = Field(default_factory=list)
    # Tier 4: leaves
    endpoints: list[Endpoint] = Field(default_factory=list)
    # Kept in append order, after every canonical category. Parent chains
    # inside custom must be pre-ordered by the tool.
    custom: list[GraphNode] = Field(default_factory=list)

    @field_validator("custom", mode="before")
    @classmethod
    def _parse_custom(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [CustomEntity.from_dict(v) if isinstance(v, Mapping) else v for v in value]

    def add_node(self, node: GraphNode) -> None:
        """Append a node to ``custom``."""
        self.custom.append(node)

    def all_nodes(self) -> list[GraphNode]:
        """All nodes, tier by tier, then custom nodes in append order."""
        nodes: list[GraphNode] = []
        for category in CATEGORIES:
            nodes.extend(getattr(self, category))
        nodes.extend(self.custom)
        return nodes

    def node_count(self) -> int:
        return sum(len(getattr(self, c)) for c in CATEGORIES) + len(self.custom)

    def is_empty(self) -> bool:
        return self.node_count() == 0

    def counts(self) -> dict[str, int]:
        """Per-category sizes, in emission order."""
        counts = {c: len(getattr(self, c)) for c in CATEGORIES}
        counts["custom"] = len(self.custom)
        return counts


def extract_discovery(payload: Any) -> DiscoveryResult | None:
    """Find the DiscoveryResult in a tool's output.

    Accepts a DiscoveryResult, a mapping that is itself a discovery result,
    or a mapping carrying one under ``DISCOVERY_KEY``. Returns None when the
    output has no discovery data. Malformed discovery data raises
    pydantic's ValidationError.
    """
    if isinstance(payload, DiscoveryResult):
        return payload
    if not isinstance(payload, Mapping):
        return None

    if DISCOVERY_KEY in payload:
        inner = payload[DISCOVERY_KEY]
        if isinstance(inner, DiscoveryResult):
            return inner
        if isinstance(inner, Mapping):
            return DiscoveryResult.model_validate(dict(inner))
        return None

    if payload and set(payload) <= {*CATEGORIES, "custom"}:
        return DiscoveryResult.model_validate(dict(payload))
    return None
