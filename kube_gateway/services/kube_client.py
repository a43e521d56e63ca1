from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from kubernetes import client, config
from kubernetes.client import ApiClient
from kubernetes.config.config_exception import ConfigException

from kube_gateway.config import Settings

if TYPE_CHECKING:
    from kube_gateway.services.resources import ResourceKind

logger = structlog.get_logger(__name__)

METRICS_GROUP = "metrics.k8s.io"
METRICS_VERSION = "v1beta1"


def load_api_client(settings: Settings) -> ApiClient:
    """Build an authenticated ApiClient from in-cluster or kubeconfig credentials."""
    configuration = client.Configuration()
    try:
        if settings.in_cluster:
            config.load_incluster_config(client_configuration=configuration)
            source = "in-cluster"
        else:
            config.load_kube_config(
                config_file=settings.kube_config_path,
                context=settings.kube_context,
                client_configuration=configuration,
            )
            source = settings.kube_context or "current-context"
    except ConfigException as exc:
        logger.error("kubernetes.config_load_failed", error=str(exc))
        raise

    logger.info("kubernetes.config_loaded", source=source, host=configuration.host)
    return ApiClient(configuration)


class ClusterClient:
    """Typed access to the cluster objects the gateway serves.

    An empty namespace selector lists across all namespaces. Every call raises
    whatever the underlying client raises (``ApiException`` or a transport error).
    """

    def __init__(self, api_client: ApiClient) -> None:
        self.api_client = api_client
        self._apis: dict[str, Any] = {
            "core_v1": client.CoreV1Api(api_client),
            "apps_v1": client.AppsV1Api(api_client),
        }

    def _api(self, kind: ResourceKind) -> Any:
        return self._apis[kind.api_group]

    def list_nodes(self) -> list[client.V1Node]:
        return self._apis["core_v1"].list_node().items

    def list(self, kind: ResourceKind, namespace: str = "") -> list[Any]:
        api = self._api(kind)
        if namespace:
            return getattr(api, f"list_namespaced_{kind.stem}")(namespace).items
        return getattr(api, f"list_{kind.stem}_for_all_namespaces")().items

    def create(self, kind: ResourceKind, namespace: str, body: Any) -> Any:
        return getattr(self._api(kind), f"create_namespaced_{kind.stem}")(namespace, body)

    def delete(self, kind: ResourceKind, namespace: str, name: str) -> None:
        getattr(self._api(kind), f"delete_namespaced_{kind.stem}")(name, namespace)

    def close(self) -> None:
        self.api_client.close()


class MetricsClient:
    """Read-only access to the aggregated metrics.k8s.io API.

    The metrics API is not part of the generated typed clients, so samples come
    back as plain dicts from ``CustomObjectsApi``.
    """

    def __init__(self, api_client: ApiClient) -> None:
        self._api = client.CustomObjectsApi(api_client)

    def list_node_metrics(self) -> list[dict[str, Any]]:
        data = self._api.list_cluster_custom_object(
            group=METRICS_GROUP, version=METRICS_VERSION, plural="nodes"
        )
        return _items(data)

    def list_pod_metrics(self, namespace: str = "") -> list[dict[str, Any]]:
        if namespace:
            data = self._api.list_namespaced_custom_object(
                group=METRICS_GROUP, version=METRICS_VERSION, namespace=namespace, plural="pods"
            )
        else:
            data = self._api.list_cluster_custom_object(
                group=METRICS_GROUP, version=METRICS_VERSION, plural="pods"
            )
        return _items(data)


def _items(data: Any) -> list[dict[str, Any]]:
    items = data.get("items") if isinstance(data, dict) else None
    return list(items or [])
