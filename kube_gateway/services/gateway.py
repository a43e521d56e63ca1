from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel

from kube_gateway.config import RESERVED_NAMESPACES, Settings
from kube_gateway.exceptions import GatewayError, InternalError, api_error_message
from kube_gateway.schemas.kubernetes import ClusterLoad, ClusterSummary, ResourceGroup, ResourceSummary
from kube_gateway.services import translators
from kube_gateway.services.decoder import ContentDecoder
from kube_gateway.services.kube_client import ClusterClient, MetricsClient, load_api_client
from kube_gateway.services.namespaces import DEFAULT_NAMESPACE, apply_default_namespace, exclude_reserved
from kube_gateway.services.resources import DEPLOYMENT, POD, SERVICE, ResourceKind

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _group(items: Iterable[Any], summarize: Callable[[Any], ResourceSummary]) -> ResourceGroup:
    summaries = [summarize(item) for item in items]
    return ResourceGroup(count=len(summaries), items=summaries)


class ResourceGateway:
    """Request decoding, namespace policy and response shaping in front of the cluster.

    Holds no per-request state; the injected clients are shared by all requests.
    Blocking client calls run in a worker thread.
    """

    def __init__(
        self,
        cluster: ClusterClient,
        metrics: MetricsClient,
        decoder: ContentDecoder | None = None,
        *,
        default_namespace: str = DEFAULT_NAMESPACE,
        reserved_namespaces: Iterable[str] = RESERVED_NAMESPACES,
    ) -> None:
        self._cluster = cluster
        self._metrics = metrics
        self._decoder = decoder or ContentDecoder(getattr(cluster, "api_client", None))
        self._default_namespace = default_namespace
        self._reserved_namespaces = frozenset(reserved_namespaces)

    @classmethod
    def from_settings(cls, settings: Settings) -> ResourceGateway:
        api_client = load_api_client(settings)
        return cls(
            ClusterClient(api_client),
            MetricsClient(api_client),
            ContentDecoder(api_client),
            default_namespace=settings.default_namespace,
            reserved_namespaces=settings.reserved_namespaces,
        )

    def close(self) -> None:
        self._cluster.close()

    # ---------------------------
    # Per-kind operations
    # ---------------------------

    async def create_resource(self, kind: ResourceKind, content_type: str | None, body: bytes) -> Any:
        obj = self._decoder.decode(content_type, body, kind)
        namespace = apply_default_namespace(obj, self._default_namespace)
        logger.info("gateway.create", resource=kind.name, namespace=namespace, object_name=obj.metadata.name)
        created = await self._call(self._cluster.create, kind, namespace, obj)
        return self._decoder.encode(created)

    async def delete_resource(self, kind: ResourceKind, namespace: str, name: str) -> None:
        logger.info("gateway.delete", resource=kind.name, namespace=namespace, object_name=name)
        await self._call(self._cluster.delete, kind, namespace, name)

    async def list_resources(self, kind: ResourceKind) -> list[BaseModel]:
        items = await self._call(self._cluster.list, kind)
        visible = exclude_reserved(items, self._reserved_namespaces)
        return [kind.translate(item) for item in visible]

    # ---------------------------
    # Aggregations
    # ---------------------------

    async def cluster_info(self) -> ClusterSummary:
        """Counts and summaries for nodes, pods, services and deployments.

        Namespaced kinds are counted across every namespace, reserved ones included.
        """

        def _collect() -> tuple[list[Any], list[Any], list[Any], list[Any]]:
            nodes = self._cluster.list_nodes()
            pods = self._cluster.list(POD)
            services = self._cluster.list(SERVICE)
            deployments = self._cluster.list(DEPLOYMENT)
            return nodes, pods, services, deployments

        nodes, pods, services, deployments = await self._call(_collect)
        return ClusterSummary(
            nodes=_group(nodes, translators.node_summary),
            pods=_group(pods, translators.pod_summary),
            services=_group(services, translators.service_summary),
            deployments=_group(deployments, translators.deployment_summary),
        )

    async def cluster_load(self) -> ClusterLoad:
        def _collect() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
            return self._metrics.list_node_metrics(), self._metrics.list_pod_metrics()

        node_samples, pod_samples = await self._call(_collect)
        return ClusterLoad(
            node_metrics=[translators.node_load(sample) for sample in node_samples],
            pod_metrics=[row for sample in pod_samples for row in translators.pod_loads(sample)],
        )

    async def _call(self, fn: Callable[..., T], *args: Any) -> T:
        try:
            return await asyncio.to_thread(fn, *args)
        except GatewayError:
            raise
        except Exception as exc:
            message = api_error_message(exc)
            logger.warning("gateway.cluster_error", operation=getattr(fn, "__name__", "call"), error=message)
            raise InternalError(message) from exc
