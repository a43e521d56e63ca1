from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from kube_gateway.dependencies import get_gateway
from kube_gateway.services.gateway import ResourceGateway
from kube_gateway.services.resources import RESOURCE_KINDS, ResourceKind


def build_resource_router(kind: ResourceKind) -> APIRouter:
    """Create, delete and list routes for one resource kind."""
    router = APIRouter(tags=[kind.plural])

    @router.post(
        f"/{kind.name}",
        name=f"create_{kind.name}",
        summary=f"Create a {kind.kind} from a JSON or YAML manifest",
    )
    async def create_resource(request: Request, gateway: ResourceGateway = Depends(get_gateway)) -> JSONResponse:
        body = await request.body()
        created = await gateway.create_resource(kind, request.headers.get("content-type"), body)
        return JSONResponse(content=created)

    @router.delete(
        f"/{kind.name}/{{namespace}}/{{name}}",
        name=f"delete_{kind.name}",
        summary=f"Delete a {kind.kind}",
    )
    async def delete_resource(
        namespace: str,
        name: str,
        gateway: ResourceGateway = Depends(get_gateway),
    ) -> Response:
        await gateway.delete_resource(kind, namespace, name)
        return Response(status_code=200)

    @router.get(
        f"/{kind.plural}",
        name=f"list_{kind.plural}",
        response_model=list[kind.view],
        summary=f"List {kind.kind} objects outside the reserved namespaces",
    )
    async def list_resources(gateway: ResourceGateway = Depends(get_gateway)):
        return await gateway.list_resources(kind)

    return router


router = APIRouter()
for _kind in RESOURCE_KINDS.values():
    router.include_router(build_resource_router(_kind))
