from fastapi import Request

from kube_gateway.services.gateway import ResourceGateway


def get_gateway(request: Request) -> ResourceGateway:
    return request.app.state.gateway
