from pydantic import BaseModel, ConfigDict, Field


class _View(BaseModel):
    # Fields are populated by name and serialized by their camelCase alias
    model_config = ConfigDict(populate_by_name=True)


class ResourceSummary(_View):
    name: str
    status: str


class ResourceGroup(_View):
    count: int
    items: list[ResourceSummary] = Field(default_factory=list)


class ClusterSummary(_View):
    nodes: ResourceGroup
    pods: ResourceGroup
    services: ResourceGroup
    deployments: ResourceGroup


class PodView(_View):
    name: str
    namespace: str
    status: str
    pod_ip: str = Field(alias="podIP")
    images: list[str] = Field(default_factory=list)


class DeploymentView(_View):
    name: str
    namespace: str
    replicas: int
    available_replicas: int = Field(alias="availableReplicas")
    images: list[str] = Field(default_factory=list)


class ServiceView(_View):
    name: str
    namespace: str
    type: str
    cluster_ip: str = Field(alias="clusterIP")
    ports: list[str] = Field(default_factory=list)


class ConfigMapView(_View):
    name: str
    namespace: str
    keys: list[str] = Field(default_factory=list)


class NodeLoad(_View):
    name: str
    cpu: str
    memory: str


class PodLoad(_View):
    name: str
    namespace: str
    cpu: str
    memory: str


class ClusterLoad(_View):
    node_metrics: list[NodeLoad] = Field(default_factory=list, alias="nodeMetrics")
    pod_metrics: list[PodLoad] = Field(default_factory=list, alias="podMetrics")
