from typing import Any, Dict, Optional
import json

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = structlog.get_logger(__name__)


class GatewayError(Exception):
    """Base class for errors surfaced to gateway callers."""

    status_code = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequest(GatewayError):
    """The request payload could not be decoded into the target resource."""

    status_code = 400


class UnsupportedMediaType(GatewayError):
    """The declared content type is not one the decoder understands."""

    status_code = 415


class InternalError(GatewayError):
    """The cluster or metrics API failed, or returned an object we cannot use."""

    status_code = 500


def api_error_message(exc: BaseException) -> str:
    """Extract the most useful message from a cluster client failure.

    The API server answers failures with a ``Status`` object whose ``message``
    reads like ``pods "my-app" not found``; prefer that over the verbose
    ``ApiException`` rendering.
    """
    body = getattr(exc, "body", None)
    if body:
        try:
            status = json.loads(body)
        except (TypeError, ValueError):
            status = None
        if isinstance(status, dict) and status.get("message"):
            return str(status["message"])
    reason = getattr(exc, "reason", None)
    if reason:
        return str(reason)
    return str(exc) or exc.__class__.__name__


def _error_response(message: str, status_code: int, request: Request) -> JSONResponse:
    headers: Dict[str, Any] = {}
    req_id = getattr(request.state, "request_id", None)
    if req_id:
        headers["X-Request-ID"] = req_id
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the handlers that render every failure as ``{"error": message}``."""

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):  # type: ignore[override]
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "gateway.error",
            status=exc.status_code,
            error_type=exc.__class__.__name__,
            error=exc.message,
            path=request.url.path,
        )
        return _error_response(exc.message, exc.status_code, request)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):  # type: ignore[override]
        message = exc.detail if isinstance(exc.detail, str) else "request failed"
        logger.warning("gateway.http_error", status=exc.status_code, path=request.url.path)
        return _error_response(message, exc.status_code, request)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):  # type: ignore[override]
        errors = exc.errors()
        logger.info("gateway.validation_error", path=request.url.path, errors=len(errors))
        message = "; ".join(str(err.get("msg", "")) for err in errors) or "invalid request"
        return _error_response(message, 400, request)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):  # type: ignore[override]
        logger.exception("gateway.unhandled_exception", path=request.url.path)
        return _error_response("internal server error", 500, request)
