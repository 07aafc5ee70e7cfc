"""Canonical catalog entities — hosts, ports, services and their peers.

Each kind declares its identifying fields and, for dependent kinds, the
relationship to its parent. Dependent kinds can be attached to an in-memory
parent with ``belongs_to``; the parent's key is mirrored into the legacy key
field (``host_id``, ``port_id``, ``parent_domain``, ``service_id``) so code
reading those fields keeps working.

Example::

    host = Host(ip="192.168.1.10", hostname="web-server")
    port = Port(number=443, protocol="tcp").belongs_to(host)
    service = Service(name="https").belongs_to(port)
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from graphseed.graph.node import CatalogNode, NodeRef
from graphseed.taxonomy import NodeType, RelationType

# === Roots ===


class Host(CatalogNode):
    """A network host identified by its IP address."""

    node_kind: ClassVar[NodeType] = NodeType.HOST
    id_fields: ClassVar[tuple[str, ...]] = ("ip",)

    ip: str
    hostname: str = ""
    state: str = ""  # up, down, unknown
    os: str = ""


class Domain(CatalogNode):
    """A registered root domain."""

    node_kind: ClassVar[NodeType] = NodeType.DOMAIN
    id_fields: ClassVar[tuple[str, ...]] = ("name",)

    name: str
    registrar: str = ""
    created_at: str = ""
    expires_at: str = ""
    nameservers: list[str] = Field(default_factory=list)
    status: str = ""


class Technology(CatalogNode):
    """A framework, library or product, keyed by name and version."""

    node_kind: ClassVar[NodeType] = NodeType.TECHNOLOGY
    id_fields: ClassVar[tuple[str, ...]] = ("name", "version")

    name: str
    version: str = ""
    category: str = ""
    vendor: str = ""
    cpe: str = ""
    license: str = ""
    eol: str = ""


class Certificate(CatalogNode):
    """A TLS certificate, keyed by its fingerprint."""

    node_kind: ClassVar[NodeType] = NodeType.CERTIFICATE
    id_fields: ClassVar[tuple[str, ...]] = ("fingerprint",)

    fingerprint: str
    subject: str = ""
    issuer: str = ""
    not_before: str = ""
    not_after: str = ""
    serial_number: str = ""
    subject_alt_names: list[str] = Field(default_factory=list)
    signature_algorithm: str = ""
    key_size: int = 0
    self_signed: bool = False


class CloudAsset(CatalogNode):
    """A cloud provider resource."""

    node_kind: ClassVar[NodeType] = NodeType.CLOUD_ASSET
    id_fields: ClassVar[tuple[str, ...]] = ("provider", "resource_id")

    provider: str
    resource_id: str
    region: str = ""
    type: str = ""
    name: str = ""
    account_id: str = ""
    vpc: str = ""
    subnet_id: str = ""
    security_groups: list[str] = Field(default_factory=list)
    tags: dict[str, str] = Field(default_factory=dict)
    state: str = ""


class Api(CatalogNode):
    """A web API, keyed by its base URL."""

    node_kind: ClassVar[NodeType] = NodeType.API
    id_fields: ClassVar[tuple[str, ...]] = ("base_url",)

    base_url: str
    name: str = ""
    version: str = ""
    description: str = ""
    swagger_url: str = ""
    auth_type: str = ""
    rate_limit: str = ""
    status: str = ""


# === Dependents ===


class Port(CatalogNode):
    """A transport port on a host."""

    node_kind: ClassVar[NodeType] = NodeType.PORT
    id_fields: ClassVar[tuple[str, ...]] = ("host_id", "number", "protocol")
    relationship: ClassVar[RelationType | None] = RelationType.HAS_PORT

    host_id: str = ""
    number: int
    protocol: str = "tcp"
    state: str = ""  # open, closed, filtered

    @property
    def port_id(self) -> str:
        """Composite key services use to reference this port."""
        return f"{self.host_id}:{self.number}:{self.protocol}"

    def belongs_to(self, host: Host) -> Port:
        if host is None:
            raise ValueError("Port.belongs_to: host cannot be None")
        if not host.ip:
            raise ValueError("Port.belongs_to: host.ip cannot be empty")
        self._attach(NodeRef(node_type=NodeType.HOST, properties={"ip": host.ip}))
        self.host_id = host.ip
        return self

    def legacy_parent_ref(self) -> NodeRef | None:
        if not self.host_id:
            return None
        return NodeRef(node_type=NodeType.HOST, properties={"ip": self.host_id})


class Subdomain(CatalogNode):
    """A subdomain under a registered domain."""

    node_kind: ClassVar[NodeType] = NodeType.SUBDOMAIN
    id_fields: ClassVar[tuple[str, ...]] = ("parent_domain", "name")
    relationship: ClassVar[RelationType | None] = RelationType.HAS_SUBDOMAIN

    parent_domain: str = ""
    name: str
    record_type: str = ""
    record_value: str = ""
    ttl: int = 0
    status: str = ""

    def belongs_to(self, domain: Domain) -> Subdomain:
        if domain is None:
            raise ValueError("Subdomain.belongs_to: domain cannot be None")
        if not domain.name:
            raise ValueError("Subdomain.belongs_to: domain.name cannot be empty")
        self._attach(NodeRef(node_type=NodeType.DOMAIN, properties={"name": domain.name}))
        self.parent_domain = domain.name
        return self

    def legacy_parent_ref(self) -> NodeRef | None:
        if not self.parent_domain:
            return None
        return NodeRef(node_type=NodeType.DOMAIN, properties={"name": self.parent_domain})


class Service(CatalogNode):
    """A service running on a port."""

    node_kind: ClassVar[NodeType] = NodeType.SERVICE
    id_fields: ClassVar[tuple[str, ...]] = ("port_id", "name")
    relationship: ClassVar[RelationType | None] = RelationType.RUNS_SERVICE

    port_id: str = ""  # "{host_id}:{number}:{protocol}"
    name: str
    version: str = ""
    banner: str = ""

    @property
    def service_id(self) -> str:
        return f"{self.port_id}:{self.name}"

    def belongs_to(self, port: Port) -> Service:
        if port is None:
            raise ValueError("Service.belongs_to: port cannot be None")
        if port.number == 0:
            raise ValueError("Service.belongs_to: port.number cannot be zero")
        if not port.protocol:
            raise ValueError("Service.belongs_to: port.protocol cannot be empty")
        if not port.host_id:
            raise ValueError("Service.belongs_to: port.host_id cannot be empty")
        self._attach(NodeRef(node_type=NodeType.PORT, properties=port.identifying_properties()))
        self.port_id = port.port_id
        return self

    def legacy_parent_ref(self) -> NodeRef | None:
        parsed = parse_port_id(self.port_id)
        if parsed is None:
            return None
        host_id, number, protocol = parsed
        return NodeRef(
            node_type=NodeType.PORT,
            properties={"host_id": host_id, "number": number, "protocol": protocol},
        )


class Endpoint(CatalogNode):
    """A web endpoint served by a service."""

    node_kind: ClassVar[NodeType] = NodeType.ENDPOINT
    id_fields: ClassVar[tuple[str, ...]] = ("service_id", "url", "method")
    relationship: ClassVar[RelationType | None] = RelationType.HAS_ENDPOINT

    service_id: str = ""  # "{port_id}:{service name}" or an opaque service ID
    url: str
    method: str = "GET"
    status_code: int = 0
    headers: dict[str, str] = Field(default_factory=dict)
    response_time: int = 0
    content_type: str = ""
    content_length: int = 0

    def belongs_to(self, service: Service) -> Endpoint:
        if service is None:
            raise ValueError("Endpoint.belongs_to: service cannot be None")
        if not service.name:
            raise ValueError("Endpoint.belongs_to: service.name cannot be empty")
        if not service.port_id:
            raise ValueError("Endpoint.belongs_to: service.port_id cannot be empty")
        self._attach(
            NodeRef(node_type=NodeType.SERVICE, properties=service.identifying_properties()),
        )
        self.service_id = service.service_id
        return self

    def legacy_parent_ref(self) -> NodeRef | None:
        if not self.service_id:
            return None
        # service name never contains ":", the port id may (IPv6 hosts)
        port_id, sep, name = self.service_id.rpartition(":")
        if sep and port_id and name:
            return NodeRef(
                node_type=NodeType.SERVICE, properties={"port_id": port_id, "name": name},
            )
        # opaque service ID from a tool that does not use the composite form
        return NodeRef(node_type=NodeType.SERVICE, properties={"service_id": self.service_id})


def parse_port_id(port_id: str) -> tuple[str, int, str] | None:
    """Split "{host_id}:{number}:{protocol}" into its parts.

    Returns None when the value is empty or malformed. IPv6 host IDs keep
    their colons since the split is taken from the right.
    """
    parts = port_id.rsplit(":", 2)
    if len(parts) != 3:
        return None
    host_id, number, protocol = parts
    if not host_id or not protocol:
        return None
    try:
        return host_id, int(number), protocol
    except ValueError:
        return None
