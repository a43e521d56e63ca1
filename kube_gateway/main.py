import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import api_router
from .config import Settings, get_settings
from .core.logging import get_logger, setup_logging
from .core.request_context import request_id_var
from .exceptions import register_exception_handlers
from .services.gateway import ResourceGateway


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the cluster clients on startup unless a gateway was injected."""
    logger = get_logger(__name__)

    owns_gateway = app.state.gateway is None
    if owns_gateway:
        logger.info("Loading cluster credentials...")
        app.state.gateway = ResourceGateway.from_settings(app.state.settings)
        logger.info("Cluster and metrics clients ready")

    yield

    logger.info("Shutting down gateway...")
    if owns_gateway:
        app.state.gateway.close()
        app.state.gateway = None


def create_app(settings: Settings | None = None, gateway: ResourceGateway | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)
    access_logger = get_logger("kube_gateway.access")

    app = FastAPI(
        title="Kubernetes Resource Gateway",
        description="Inspect and mutate pods, deployments, services and config maps in one cluster",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gateway = gateway

    @app.middleware("http")
    async def request_id_and_access_log(request, call_next):
        start = time.perf_counter()
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            access_logger.info(
                "%s %s -> %s (%.1fms)",
                request.method,
                request.url.path,
                status_code,
                (time.perf_counter() - start) * 1000,
            )
            request_id_var.reset(token)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
