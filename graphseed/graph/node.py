"""Node abstraction — the contract every discoverable entity implements."""

from __future__ import annotations

import hashlib
import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from graphseed.taxonomy import NodeType, RelationType


def make_node_id(node_type: str, identifying: dict[str, Any]) -> str:
    """Deterministic ID from type + sorted identifying properties.

    Strings are trimmed and lowercased so that "Example.com " and
    "example.com" collapse to the same node.

    Examples:
        make_node_id("host", {"ip": "10.0.0.1"}) → "3f1c9a..."
    """
    raw = f"{node_type}:" + "&".join(
        f"{k}={_normalize(v)}" for k, v in sorted(identifying.items())
    )
    return hashlib.sha256(raw.encode()).hexdigest()[:16]


def _normalize(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value.strip().lower()
    if isinstance(value, (list, tuple, dict, set)):
        if isinstance(value, set):
            value = sorted(value, key=str)
        return json.dumps(value, sort_keys=True, default=str)
    return str(value)


def _is_set(value: Any) -> bool:
    """Sparse encoding: empty strings, zeros, None and empty containers are dropped."""
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) > 0
    if isinstance(value, (int, float)):
        return value != 0
    return True


class NodeRef(BaseModel):
    """Lookup key for another node: its type and identifying properties.

    Not an object reference. The loader resolves it later by matching
    identifying properties against stored nodes.
    """

    model_config = ConfigDict(frozen=True)

    node_type: str
    properties: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def of(cls, node: GraphNode) -> NodeRef:
        """Reference an in-memory node by its natural key."""
        return cls(node_type=node.node_type(), properties=node.identifying_properties())


class ParentEdge(BaseModel):
    """A parent reference together with the label of the edge leading to it."""

    model_config = ConfigDict(frozen=True)

    ref: NodeRef
    relationship: str = Field(min_length=1)


class GraphNode(ABC):
    """A discovered entity that can be stored in the knowledge graph.

    Implementations report a taxonomy type tag, the identifying properties
    forming the natural key, the full property set, and optionally a
    ParentEdge. Every method is side-effect free and returns fresh dicts.
    """

    @abstractmethod
    def node_type(self) -> str:
        """Taxonomy tag, e.g. "host" or "k8s:pod"."""

    @abstractmethod
    def identifying_properties(self) -> dict[str, Any]:
        """Natural key used to deduplicate the node across discoveries."""

    @abstractmethod
    def properties(self) -> dict[str, Any]:
        """All properties, a superset of identifying_properties()."""

    def parent_edge(self) -> ParentEdge | None:
        """Edge to the owning node, or None for a taxonomy root."""
        return None

    def parent_ref(self) -> NodeRef | None:
        edge = self.parent_edge()
        return edge.ref if edge is not None else None

    def relationship_type(self) -> str:
        edge = self.parent_edge()
        return edge.relationship if edge is not None else ""

    def node_id(self) -> str:
        return make_node_id(self.node_type(), self.identifying_properties())


class CatalogNode(BaseModel, GraphNode):
    """Base for canonical catalog entities.

    Subclasses declare their kind, identifying fields and, for dependent
    kinds, the relationship to the parent. An explicit parent attached via
    ``belongs_to`` wins over the legacy key field the subclass derives its
    fallback reference from.
    """

    model_config = ConfigDict(extra="forbid")

    node_kind: ClassVar[NodeType]
    id_fields: ClassVar[tuple[str, ...]]
    relationship: ClassVar[RelationType | None] = None

    _parent: NodeRef | None = PrivateAttr(default=None)

    def node_type(self) -> str:
        return str(self.node_kind)

    def identifying_properties(self) -> dict[str, Any]:
        data = self.model_dump(include=set(self.id_fields))
        return {name: data[name] for name in self.id_fields}

    def properties(self) -> dict[str, Any]:
        props = self.identifying_properties()
        for name, value in self.model_dump().items():
            if name in props:
                continue
            # booleans carry meaning when false
            if isinstance(value, bool) or _is_set(value):
                props[name] = value
        return props

    def parent_edge(self) -> ParentEdge | None:
        if self.relationship is None:
            return None
        ref = self._parent if self._parent is not None else self.legacy_parent_ref()
        if ref is None:
            return None
        return ParentEdge(ref=ref.model_copy(deep=True), relationship=self.relationship)

    def legacy_parent_ref(self) -> NodeRef | None:
        """Parent reference derived from the node's own key fields."""
        return None

    def _attach(self, ref: NodeRef) -> None:
        self._parent = ref
