"""ImpactMap Backend: FastAPI application entry point."""

import signal
import threading
import uuid
from contextlib import asynccontextmanager

# configure_structlog MUST be called before all other app imports
# (structlog caches the processor chain on first use).
from impactmap.core.logging import configure_structlog
from impactmap.core.config import get_settings as _get_settings_early

_early_settings = _get_settings_early()
configure_structlog(
    log_level="DEBUG" if _early_settings.debug else "INFO",
    json_logs=not _early_settings.debug,
)

import structlog

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from impactmap.api.routes import api_router
from impactmap.core.config import get_settings
from impactmap.db.repository import InMemoryRepository
from impactmap.db.seed import seed_repository
from impactmap.middleware.correlation import (
    setup_correlation_middleware,
    get_correlation_id,
)
from impactmap.services.goal_service import GoalService

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    app.state.shutting_down = False

    def handle_sigterm(signum, frame):
        app.state.shutting_down = True
        logger.info("sigterm_received", action="health_check_503_draining_connections")

    # signal handlers can only be installed from the main thread
    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGTERM, handle_sigterm)

    settings = get_settings()
    logger.info("startup_begin", app_name=settings.app_name, debug=settings.debug)

    repository: InMemoryRepository = app.state.repository
    if settings.seed_on_startup:
        seed_repository(repository)
        # Seed progress values are snapshots; derive them from the seeded metrics
        GoalService(repository).recalculate_all()
        logger.info(
            "seed_loaded",
            goals=len(repository.list_goals()),
            solutions=len(repository.list_solutions()),
        )

    yield

    logger.info("shutdown_complete")


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Global exception handler for HTTPException with debug_id tracking."""
    debug_id = str(uuid.uuid4())

    logger.error(
        "http_exception",
        status_code=exc.status_code,
        debug_id=debug_id,
        correlation_id=get_correlation_id(),
        path=request.url.path,
        method=request.method,
        detail=exc.detail,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "debug_id": debug_id},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for unhandled errors with debug_id tracking.

    Logs full exception with traceback, returns generic 500 to client.
    """
    debug_id = str(uuid.uuid4())

    logger.error(
        "unhandled_exception",
        debug_id=debug_id,
        correlation_id=get_correlation_id(),
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "debug_id": debug_id},
    )


def create_app(repository: InMemoryRepository | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        repository: Goal/solution store to serve. A fresh empty one is
            created when omitted; seed data is loaded at startup when
            Settings.seed_on_startup is set.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="ImpactMap - goal, solution and progress tracking",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.repository = repository if repository is not None else InMemoryRepository()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list({settings.frontend_url, *settings.cors_origins}),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Correlation ID middleware (runs first on incoming requests)
    setup_correlation_middleware(app)

    app.exception_handler(HTTPException)(http_exception_handler)
    app.exception_handler(Exception)(generic_exception_handler)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "impactmap.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
