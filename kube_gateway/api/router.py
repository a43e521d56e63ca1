from fastapi import APIRouter

from kube_gateway.api.routes import cluster, resources

api_router = APIRouter()
api_router.include_router(cluster.router)
api_router.include_router(resources.router)
