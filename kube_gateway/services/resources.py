from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from kube_gateway.schemas.kubernetes import ConfigMapView, DeploymentView, PodView, ServiceView
from kube_gateway.services import translators


@dataclass(frozen=True)
class ResourceKind:
    """Everything the generic create/delete/list operations need to know about a kind.

    ``stem`` is the suffix the kubernetes client uses in its method names
    (``create_namespaced_<stem>``, ``list_<stem>_for_all_namespaces``...).
    """

    name: str
    plural: str
    kind: str
    model: str
    api_group: str
    stem: str
    view: type[BaseModel]
    translate: Callable[[Any], BaseModel]


POD = ResourceKind(
    name="pod",
    plural="pods",
    kind="Pod",
    model="V1Pod",
    api_group="core_v1",
    stem="pod",
    view=PodView,
    translate=translators.pod_view,
)

DEPLOYMENT = ResourceKind(
    name="deployment",
    plural="deployments",
    kind="Deployment",
    model="V1Deployment",
    api_group="apps_v1",
    stem="deployment",
    view=DeploymentView,
    translate=translators.deployment_view,
)

SERVICE = ResourceKind(
    name="service",
    plural="services",
    kind="Service",
    model="V1Service",
    api_group="core_v1",
    stem="service",
    view=ServiceView,
    translate=translators.service_view,
)

CONFIG_MAP = ResourceKind(
    name="configmap",
    plural="configmaps",
    kind="ConfigMap",
    model="V1ConfigMap",
    api_group="core_v1",
    stem="config_map",
    view=ConfigMapView,
    translate=translators.configmap_view,
)

RESOURCE_KINDS: dict[str, ResourceKind] = {k.name: k for k in (POD, DEPLOYMENT, SERVICE, CONFIG_MAP)}
