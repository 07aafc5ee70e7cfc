"""Graph nodes — contract, catalog, custom entities, validation and ordering."""

from graphseed.graph.custom import CustomEntity, CustomEntityBuilder
from graphseed.graph.discovery import (
    DISCOVERY_KEY,
    TIERS,
    DiscoveryResult,
    extract_discovery,
)
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
from graphseed.graph.errors import (
    MissingParentError,
    NodeValidationError,
    TaxonomyLoadError,
    UnknownNodeTypeError,
)
from graphseed.graph.node import CatalogNode, GraphNode, NodeRef, ParentEdge, make_node_id
from graphseed.graph.requirements import RequirementTable
from graphseed.graph.validation import NodeValidator, validate_node

__all__ = [
    "DISCOVERY_KEY",
    "TIERS",
    "Api",
    "CatalogNode",
    "Certificate",
    "CloudAsset",
    "CustomEntity",
    "CustomEntityBuilder",
    "DiscoveryResult",
    "Domain",
    "Endpoint",
    "GraphNode",
    "Host",
    "MissingParentError",
    "NodeRef",
    "NodeValidationError",
    "NodeValidator",
    "ParentEdge",
    "Port",
    "RequirementTable",
    "Service",
    "Subdomain",
    "TaxonomyLoadError",
    "Technology",
    "UnknownNodeTypeError",
    "extract_discovery",
    "make_node_id",
    "validate_node",
]
