"""Tests for DiscoveryResult ordering, counting and extraction."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from graphseed.graph.custom import CustomEntity
from graphseed.graph.discovery import (
    CATEGORIES,
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
from graphseed.graph.validation import NodeValidator


def _network_result(n_hosts: int = 3, n_ports: int = 2) -> DiscoveryResult:
    hosts = [Host(ip=f"10.0.0.{i}") for i in range(1, n_hosts + 1)]
    ports = [Port(number=p).belongs_to(h) for h in hosts for p in range(80, 80 + n_ports)]
    services = [Service(name=f"svc{i}").belongs_to(p) for i, p in enumerate(ports)]
    # appended out of tier order on purpose
    return DiscoveryResult(services=services, ports=ports, hosts=hosts)


class TestTiers:
    def test_every_category_has_one_tier(self):
        assert len(CATEGORIES) == len(set(CATEGORIES))
        assert set(CATEGORIES) == set(DiscoveryResult.model_fields) - {"custom"}

    def test_parent_kinds_sit_in_earlier_tiers(self):
        tier_of = {c: i for i, tier in enumerate(TIERS) for c in tier}
        assert tier_of["hosts"] < tier_of["ports"] < tier_of["services"] < tier_of["endpoints"]
        assert tier_of["domains"] < tier_of["subdomains"]


class TestAllNodes:
    def test_host_port_service_order(self):
        host = Host(ip="10.0.0.1")
        port = Port(host_id="10.0.0.1", number=80, protocol="tcp")
        service = Service(port_id="10.0.0.1:80:tcp", name="http")
        result = DiscoveryResult(services=[service], ports=[port], hosts=[host])

        nodes = result.all_nodes()
        assert nodes == [host, port, service]
        validator = NodeValidator()
        for node in nodes:
            validator.validate(node)

    def test_tier_order_and_insertion_order(self):
        result = _network_result()
        nodes = result.all_nodes()
        types = [n.node_type() for n in nodes]
        assert types == ["host"] * 3 + ["port"] * 6 + ["service"] * 6
        assert nodes[:3] == result.hosts
        assert nodes[3:9] == result.ports
        assert nodes[9:] == result.services

    def test_parents_precede_children(self):
        seen: set[tuple[str, frozenset]] = set()
        for node in _network_result().all_nodes():
            ref = node.parent_ref()
            if ref is not None:
                key = (ref.node_type, frozenset(ref.properties.items()))
                assert key in seen, f"{node.node_type()} emitted before its parent"
            seen.add((node.node_type(), frozenset(node.identifying_properties().items())))

    def test_full_catalog_order(self):
        result = DiscoveryResult(
            endpoints=[Endpoint(service_id="10.0.0.1:80:tcp:http", url="/")],
            services=[Service(port_id="10.0.0.1:80:tcp", name="http")],
            subdomains=[Subdomain(parent_domain="example.com", name="api")],
            ports=[Port(host_id="10.0.0.1", number=80)],
            apis=[Api(base_url="https://api.example.com")],
            cloud_assets=[CloudAsset(provider="aws", resource_id="i-1")],
            certificates=[Certificate(fingerprint="ab")],
            technologies=[Technology(name="nginx")],
            domains=[Domain(name="example.com")],
            hosts=[Host(ip="10.0.0.1")],
        )
        assert [n.node_type() for n in result.all_nodes()] == [
            "host", "domain", "technology", "certificate", "cloud_asset", "api",
            "port", "subdomain", "service", "endpoint",
        ]

    def test_custom_last_in_append_order(self, sample_host):
        first = CustomEntity.builder("k8s", "namespace").with_id_props({"name": "a"}).build()
        second = CustomEntity.builder("k8s", "pod").with_id_props({"name": "b"}).build()
        result = DiscoveryResult(custom=[first])
        result.add_node(second)
        result.hosts.append(sample_host)
        assert result.all_nodes() == [sample_host, first, second]

    def test_idempotent(self):
        result = _network_result()
        assert result.all_nodes() == result.all_nodes()

    def test_all_nodes_returns_new_list(self):
        result = _network_result()
        result.all_nodes().clear()
        assert result.node_count() == 15

    def test_empty(self):
        assert DiscoveryResult().all_nodes() == []


class TestCounts:
    def test_node_count_is_sum_of_lists(self):
        result = _network_result(n_hosts=2, n_ports=3)
        result.add_node(CustomEntity.builder("k8s", "pod").build())
        assert result.node_count() == 2 + 6 + 6 + 1
        assert result.node_count() == sum(result.counts().values())
        assert result.node_count() == len(result.all_nodes())

    def test_is_empty(self):
        result = DiscoveryResult()
        assert result.is_empty()
        assert result.node_count() == 0

    @pytest.mark.parametrize("category", [*CATEGORIES, "custom"])
    def test_any_single_node_makes_non_empty(self, category):
        nodes = {
            "hosts": Host(ip="h"),
            "domains": Domain(name="d"),
            "technologies": Technology(name="t"),
            "certificates": Certificate(fingerprint="f"),
            "cloud_assets": CloudAsset(provider="p", resource_id="r"),
            "apis": Api(base_url="u"),
            "ports": Port(number=1),
            "subdomains": Subdomain(name="s"),
            "services": Service(name="s"),
            "endpoints": Endpoint(url="/"),
            "custom": CustomEntity.builder("x", "y").build(),
        }
        result = DiscoveryResult(**{category: [nodes[category]]})
        assert not result.is_empty()
        assert result.node_count() == 1


class TestParsing:
    def test_model_validate_from_dicts(self):
        result = DiscoveryResult.model_validate({
            "hosts": [{"ip": "10.0.0.1", "hostname": "web"}],
            "ports": [{"host_id": "10.0.0.1", "number": 443}],
            "custom": [{"node_type": "k8s:pod", "id_properties": {"name": "web-01"}}],
        })
        assert result.hosts[0].hostname == "web"
        assert result.ports[0].parent_ref().properties == {"ip": "10.0.0.1"}
        assert result.custom[0].node_type() == "k8s:pod"

    def test_custom_rejects_non_nodes(self):
        with pytest.raises(ValidationError):
            DiscoveryResult(custom=[42])

    def test_unknown_field_in_entity_rejected(self):
        with pytest.raises(ValidationError):
            DiscoveryResult.model_validate({"hosts": [{"ip": "1.1.1.1", "colour": "red"}]})


class TestExtractDiscovery:
    def test_under_well_known_key(self):
        payload = {"scan_time": 1.2, DISCOVERY_KEY: {"hosts": [{"ip": "10.0.0.1"}]}}
        result = extract_discovery(payload)
        assert result is not None
        assert result.hosts[0].ip == "10.0.0.1"

    def test_payload_is_discovery(self):
        result = extract_discovery({"hosts": [{"ip": "10.0.0.1"}], "custom": []})
        assert result is not None
        assert result.node_count() == 1

    def test_instance_passthrough(self):
        result = DiscoveryResult()
        assert extract_discovery(result) is result
        assert extract_discovery({DISCOVERY_KEY: result}) is result

    @pytest.mark.parametrize(
        "payload",
        [None, "text", [], {}, {"stdout": "ok"}, {DISCOVERY_KEY: "nope"}],
    )
    def test_no_discovery(self, payload):
        assert extract_discovery(payload) is None

    def test_malformed_raises(self):
        with pytest.raises(ValidationError):
            extract_discovery({DISCOVERY_KEY: {"ports": [{"number": "not-a-number"}]}})
