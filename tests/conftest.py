"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from kube_gateway.config import Settings
from kube_gateway.main import create_app
from kube_gateway.services.gateway import ResourceGateway
from tests.factories import (
    FakeClusterClient,
    FakeMetricsClient,
    make_config_map,
    make_deployment,
    make_node,
    make_pod,
    make_service,
    node_sample,
    pod_sample,
)


@pytest.fixture
def settings():
    return Settings(app_env="test")


@pytest.fixture
def cluster():
    """A small cluster with user workloads next to system ones."""
    return FakeClusterClient(
        nodes=[make_node("node-a", ready="True"), make_node("node-b", ready="False")],
        objects={
            "pod": [
                make_pod("web-1", "default"),
                make_pod("coredns-abc", "kube-system"),
                make_pod("api-1", "shop", images=("api:2.0", "envoy:1.29")),
                make_pod("dashboard-1", "kubernetes-dashboard"),
            ],
            "deployment": [
                make_deployment("web", "default", replicas=3, available=3),
                make_deployment("coredns", "kube-system", replicas=2, available=1),
            ],
            "service": [
                make_service("web", "default", ports=((80, "TCP"), (443, "TCP"))),
                make_service("kube-dns", "kube-system", ports=((53, "UDP"),)),
            ],
            "configmap": [
                make_config_map("app-config", "default", data={"b": "2", "a": "1"}),
                make_config_map("kube-root-ca.crt", "kube-node-lease", data={"ca.crt": "..."}),
            ],
        },
    )


@pytest.fixture
def metrics():
    return FakeMetricsClient(
        nodes=[node_sample("node-a", "250m", "2048Ki"), node_sample("node-b", "1", "4Gi")],
        pods=[
            pod_sample("api-1", "shop", [("api", "10m", "64Mi"), ("envoy", "5m", "32Mi"), ("init", "1m", "8Mi")]),
            pod_sample("coredns-abc", "kube-system", [("coredns", "3m", "20Mi")]),
        ],
    )


@pytest.fixture
def gateway(cluster, metrics):
    return ResourceGateway(cluster, metrics)


@pytest.fixture
def api(settings, gateway):
    app = create_app(settings, gateway=gateway)
    with TestClient(app) as test_client:
        yield test_client
