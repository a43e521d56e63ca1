from fastapi import APIRouter, Depends

from kube_gateway.dependencies import get_gateway
from kube_gateway.schemas.kubernetes import ClusterLoad, ClusterSummary
from kube_gateway.services.gateway import ResourceGateway

router = APIRouter(tags=["cluster"])


@router.get("/cluster-info", response_model=ClusterSummary, summary="Node, pod, service and deployment summary")
async def cluster_info(gateway: ResourceGateway = Depends(get_gateway)) -> ClusterSummary:
    return await gateway.cluster_info()


@router.get("/cluster-load", response_model=ClusterLoad, summary="Live node and per-container pod usage")
async def cluster_load(gateway: ResourceGateway = Depends(get_gateway)) -> ClusterLoad:
    return await gateway.cluster_load()
