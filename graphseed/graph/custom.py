"""Custom entities — generic nodes for kinds outside the canonical catalog.

A custom entity is keyed by ``(namespace, kind)`` instead of a canonical
type, e.g. ``k8s:pod`` or ``aws:security_group``. The namespace keeps
independently written tools from colliding on type tags.

Example::

    pod = (
        CustomEntity.builder("k8s", "pod")
        .with_id_props({"namespace": "default", "name": "web-01"})
        .with_all_props({"namespace": "default", "name": "web-01", "status": "Running"})
        .with_parent(NodeRef(node_type="k8s:namespace", properties={"name": "default"}))
        .build()
    )
    pod.node_type()          # "k8s:pod"
    pod.relationship_type()  # "BELONGS_TO"
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from graphseed.graph.node import GraphNode, NodeRef, ParentEdge
from graphseed.taxonomy import RelationType

DEFAULT_RELATIONSHIP = RelationType.BELONGS_TO.value


class CustomEntity(BaseModel, GraphNode):
    """Frozen generic node with a dynamic property bag."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(min_length=1)
    kind: str = Field(min_length=1)
    id_props: dict[str, Any] = Field(default_factory=dict)
    all_props: dict[str, Any] | None = None
    edge: ParentEdge | None = None

    @classmethod
    def builder(cls, namespace: str, kind: str) -> CustomEntityBuilder:
        return CustomEntityBuilder(namespace, kind)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CustomEntity:
        """Build from the wire shape tools emit for custom nodes.

        Accepts either ``node_type: "ns:kind"`` or separate ``namespace`` and
        ``kind`` keys. ``parent_type`` with a non-empty ``parent_id`` mapping
        attaches a parent; ``relationship_type`` defaults to BELONGS_TO.
        """
        namespace = data.get("namespace", "")
        kind = data.get("kind", "")
        node_type = data.get("node_type", "")
        if node_type and not (namespace and kind):
            namespace, sep, kind = node_type.partition(":")
            if not sep:
                msg = f"custom node type must be '<namespace>:<kind>', got {node_type!r}"
                raise ValueError(msg)

        builder = cls.builder(namespace, kind).with_id_props(data.get("id_properties") or {})
        if data.get("properties") is not None:
            builder.with_all_props(
                {**(data.get("id_properties") or {}), **data["properties"]},
            )

        parent_type = data.get("parent_type")
        parent_id = data.get("parent_id") or {}
        if parent_type and parent_id:
            builder.with_parent(
                NodeRef(node_type=parent_type, properties=dict(parent_id)),
                data.get("relationship_type") or DEFAULT_RELATIONSHIP,
            )
        return builder.build()

    def node_type(self) -> str:
        return f"{self.namespace}:{self.kind}"

    def identifying_properties(self) -> dict[str, Any]:
        return dict(self.id_props)

    def properties(self) -> dict[str, Any]:
        source = self.all_props if self.all_props is not None else self.id_props
        return dict(source)

    def parent_edge(self) -> ParentEdge | None:
        return self.edge.model_copy(deep=True) if self.edge is not None else None


class CustomEntityBuilder:
    """Fluent construction of a CustomEntity. Steps may run in any order."""

    def __init__(self, namespace: str, kind: str) -> None:
        self._namespace = namespace
        self._kind = kind
        self._id_props: dict[str, Any] = {}
        self._all_props: dict[str, Any] | None = None
        self._edge: ParentEdge | None = None

    def with_id_props(self, props: dict[str, Any]) -> CustomEntityBuilder:
        """Identifying properties, used for deduplication."""
        self._id_props = dict(props)
        return self

    def with_all_props(self, props: dict[str, Any]) -> CustomEntityBuilder:
        """Full property set; should include the identifying properties."""
        self._all_props = dict(props)
        return self

    def with_parent(
        self, parent: NodeRef, relationship: str = DEFAULT_RELATIONSHIP,
    ) -> CustomEntityBuilder:
        if parent is None:
            raise ValueError("CustomEntityBuilder.with_parent: parent cannot be None")
        if not parent.node_type:
            raise ValueError("CustomEntityBuilder.with_parent: parent.node_type cannot be empty")
        if not parent.properties:
            raise ValueError("CustomEntityBuilder.with_parent: parent.properties cannot be empty")
        self._edge = ParentEdge(
            ref=parent.model_copy(deep=True), relationship=relationship or DEFAULT_RELATIONSHIP,
        )
        return self

    def build(self) -> CustomEntity:
        if not self._namespace:
            raise ValueError("CustomEntityBuilder.build: namespace cannot be empty")
        if not self._kind:
            raise ValueError("CustomEntityBuilder.build: kind cannot be empty")
        return CustomEntity(
            namespace=self._namespace,
            kind=self._kind,
            id_props=self._id_props,
            all_props=self._all_props,
            edge=self._edge,
        )
