from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .infrastructure.store import InMemoryRecordStore
from .logging_config import get_logger

logger = get_logger(__name__)


def _create_minimal_app() -> FastAPI:
    """Create the FastAPI app object without running side-effectful wiring.
    Tests can import and call this to create fresh apps.
    """
    app = FastAPI(title="User Records Service")

    # Safe default: an in-memory store until startup wiring replaces it with
    # the configured backend.
    app.state.record_store = InMemoryRecordStore()
    return app


def create_app(store=None) -> FastAPI:
    """Create and wire a FastAPI application.

    This returns a fully routed app (routers + middleware) but doesn't build
    the configured store client; that is performed by the composition root at
    startup. Passing ``store`` pins the app to that store instead.
    """
    app = _create_minimal_app()
    if store is not None:
        app.state.record_store = store

    from .metrics import metrics_response
    from .middleware.metrics_middleware import MetricsMiddleware
    from .responses import JSON_HEADERS, STATUS_METHOD_NOT_ALLOWED, method_not_allowed
    from .routers import health, users

    app.include_router(health.router)
    app.include_router(users.router)

    app.add_middleware(MetricsMiddleware)

    @app.get("/metrics")
    async def _metrics():
        data, content_type = metrics_response()
        return Response(content=data, media_type=content_type)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == STATUS_METHOD_NOT_ALLOWED:
            status, body = method_not_allowed()
            logger.info("method_not_allowed", method=request.method, path=request.url.path)
            # keep the Allow header listing the supported methods
            headers = {**JSON_HEADERS, **(exc.headers or {})}
            return JSONResponse(status_code=status, content=body, headers=headers)
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    return app


__all__ = ["create_app", "_create_minimal_app"]
