"""
Translators from full cluster objects to the reduced views the gateway returns.

List views (``*_view``) feed the per-kind list endpoints; summaries
(``*_summary``) and loads feed the cluster aggregations. All functions are pure.
"""

from typing import Any

from kubernetes import client

from kube_gateway.exceptions import InternalError
from kube_gateway.schemas.kubernetes import (
    ConfigMapView,
    DeploymentView,
    NodeLoad,
    PodLoad,
    PodView,
    ResourceSummary,
    ServiceView,
)


def _meta(obj: Any) -> tuple[str, str]:
    md = getattr(obj, "metadata", None)
    return (getattr(md, "name", None) or "", getattr(md, "namespace", None) or "")


def _images(pod_spec: client.V1PodSpec | None) -> list[str]:
    containers = getattr(pod_spec, "containers", None) or []
    return [c.image or "" for c in containers]


def _phase(pod: client.V1Pod) -> str:
    return getattr(pod.status, "phase", None) or ""


# ---------------------------
# List views
# ---------------------------

def pod_view(pod: client.V1Pod) -> PodView:
    name, namespace = _meta(pod)
    return PodView(
        name=name,
        namespace=namespace,
        status=_phase(pod),
        pod_ip=getattr(pod.status, "pod_ip", None) or "",
        images=_images(pod.spec),
    )


def deployment_view(deployment: client.V1Deployment) -> DeploymentView:
    name, namespace = _meta(deployment)
    spec = deployment.spec
    replicas = getattr(spec, "replicas", None)
    if replicas is None:
        raise InternalError(f'deployment "{namespace}/{name}" has no desired replica count')

    template_spec = getattr(getattr(spec, "template", None), "spec", None)
    return DeploymentView(
        name=name,
        namespace=namespace,
        replicas=replicas,
        available_replicas=getattr(deployment.status, "available_replicas", None) or 0,
        images=_images(template_spec),
    )


def service_view(service: client.V1Service) -> ServiceView:
    name, namespace = _meta(service)
    spec = service.spec
    ports = [f"{port.port}/{port.protocol or ''}" for port in (getattr(spec, "ports", None) or [])]
    return ServiceView(
        name=name,
        namespace=namespace,
        type=getattr(spec, "type", None) or "",
        cluster_ip=getattr(spec, "cluster_ip", None) or "",
        ports=ports,
    )


def configmap_view(config_map: client.V1ConfigMap) -> ConfigMapView:
    name, namespace = _meta(config_map)
    # data is an unordered mapping; sort for reproducible output
    return ConfigMapView(name=name, namespace=namespace, keys=sorted(config_map.data or {}))


# ---------------------------
# Cluster summary
# ---------------------------

def node_summary(node: client.V1Node) -> ResourceSummary:
    status = "Unknown"
    for condition in getattr(node.status, "conditions", None) or []:
        if condition.type == "Ready":
            status = condition.status
            break
    return ResourceSummary(name=_meta(node)[0], status=status)


def pod_summary(pod: client.V1Pod) -> ResourceSummary:
    return ResourceSummary(name=_meta(pod)[0], status=_phase(pod))


def service_summary(service: client.V1Service) -> ResourceSummary:
    return ResourceSummary(name=_meta(service)[0], status=getattr(service.spec, "type", None) or "")


def deployment_summary(deployment: client.V1Deployment) -> ResourceSummary:
    status = deployment.status
    replicas = getattr(status, "replicas", None) or 0
    available = getattr(status, "available_replicas", None) or 0
    return ResourceSummary(
        name=_meta(deployment)[0],
        status="Available" if replicas == available else "Unavailable",
    )


# ---------------------------
# Cluster load
# ---------------------------

def _usage(sample: dict[str, Any]) -> tuple[str, str]:
    usage = sample.get("usage") or {}
    return str(usage.get("cpu") or "0"), str(usage.get("memory") or "0")


def node_load(sample: dict[str, Any]) -> NodeLoad:
    meta = sample.get("metadata") or {}
    cpu, memory = _usage(sample)
    return NodeLoad(name=str(meta.get("name") or ""), cpu=cpu, memory=memory)


def pod_loads(sample: dict[str, Any]) -> list[PodLoad]:
    """Expand one pod metrics sample into a row per container."""
    meta = sample.get("metadata") or {}
    name = str(meta.get("name") or "")
    namespace = str(meta.get("namespace") or "")
    rows: list[PodLoad] = []
    for container in sample.get("containers") or []:
        cpu, memory = _usage(container)
        rows.append(PodLoad(name=name, namespace=namespace, cpu=cpu, memory=memory))
    return rows
