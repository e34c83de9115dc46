"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount the portfolio API under the /v1 prefix
  - Expose health check and metrics endpoints

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID, logging context and HTTP metrics
  - interfaces.api.http.router: profiles, sources, cache admin, admin

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - DB pool only when repositories run against PostgreSQL
  - Health check validates DB only (doesn't call GitHub/Apify/Lingva)

Notes:
  - Middleware order matters: RequestContext → CORS → routes
  - /v1 prefix allows API versioning
  - /healthz follows Kubernetes health check convention
  - /metrics exposes Prometheus metrics
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from ..container import close_http_clients, get_user_repository
from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.metrics import get_metrics_response
from ..crosscutting.middleware import REQUEST_ID_HEADER, RequestContextMiddleware
from ..infrastructure.db.pool import close_pool, init_pool
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Pool when Postgres is used; HTTP clients closed on exit."""
    settings = get_settings()
    uses_postgres = settings.uses_postgres()

    if uses_postgres:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )

    try:
        logger.info(
            "Portfolio API starting up",
            extra={
                "app_env": settings.app_env,
                "repository_backend": "postgres" if uses_postgres else "memory",
                "cache_backend": settings.cache_backend,
                "linkedin_configured": settings.has_apify_token(),
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
            },
        )
        if not settings.has_apify_token():
            logger.warning("APIFY_TOKEN not configured: LinkedIn data disabled")

        yield

    finally:
        close_http_clients()
        if uses_postgres:
            close_pool()
        logger.info("Portfolio API shutting down")


def create_app() -> FastAPI:
    """Construye la app (factory para tests y para uvicorn --factory)."""
    settings = get_settings()

    fastapi_app = FastAPI(
        title="Portfolio API",
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "profiles", "description": "Public, own and aggregated profiles"},
            {"name": "github", "description": "Normalized GitHub data (cached)"},
            {"name": "linkedin", "description": "Normalized LinkedIn data (cached)"},
            {"name": "translation", "description": "Memoized translation"},
            {"name": "cache", "description": "Source cache administration (admin)"},
            {"name": "admin", "description": "User provisioning (admin)"},
        ],
    )

    # R: Middleware order (bottom = first to execute):
    # 1. CORSMiddleware - handles preflight
    # 2. RequestContextMiddleware - sets request_id, records metrics
    fastapi_app.add_middleware(RequestContextMiddleware)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # R: Register API routes under /v1 prefix for versioning
    fastapi_app.include_router(router, prefix="/v1")

    # R: Register exception handlers for structured error responses
    register_exception_handlers(fastapi_app)

    @fastapi_app.get("/healthz", tags=["health"])
    def healthz(request: Request):
        """Liveness + estado de la DB (in-memory cuenta como sana)."""
        db_status = _database_status()
        return {
            "ok": db_status != "disconnected",
            "db": db_status,
            "request_id": getattr(request.state, "request_id", None),
        }

    @fastapi_app.get("/readyz", tags=["health"])
    def readyz(request: Request):
        db_status = _database_status()
        return {
            "ok": db_status != "disconnected",
            "db": db_status,
            "request_id": getattr(request.state, "request_id", None),
        }

    @fastapi_app.get("/metrics", tags=["health"])
    def metrics():
        """Prometheus text format metrics."""
        body, content_type = get_metrics_response()
        return Response(content=body, media_type=content_type)

    return fastapi_app


def _database_status() -> str:
    """connected | disconnected | in-memory."""
    if not get_settings().uses_postgres():
        return "in-memory"
    try:
        if get_user_repository().ping():
            return "connected"
    except Exception as e:
        logger.warning("Health check: DB unavailable", extra={"error": str(e)})
    return "disconnected"


app = create_app()
