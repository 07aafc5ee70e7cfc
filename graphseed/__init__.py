"""graphseed — ordered, validated node streams for knowledge graph loaders."""

from __future__ import annotations

__version__ = "0.1.0"

from graphseed.graph import (  # noqa: E402
    CustomEntity,
    DiscoveryResult,
    GraphNode,
    NodeRef,
    NodeValidator,
    ParentEdge,
    RequirementTable,
    validate_node,
)

__all__ = [
    "CustomEntity",
    "DiscoveryResult",
    "GraphNode",
    "NodeRef",
    "NodeValidator",
    "ParentEdge",
    "RequirementTable",
    "__version__",
    "validate_node",
]
