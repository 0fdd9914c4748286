"""Task Board API - Main Application Module.

This module initializes the FastAPI application with configuration,
middleware, routing, and lifecycle management for the task board service.
"""

import logging
import sys
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

# Add the project root to Python path if running directly
if __name__ == "__main__":
    project_root = Path(__file__).parent.parent
    sys.path.insert(0, str(project_root))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_config_summary, settings
from app.core.logging import setup_logging
from app.store import InMemoryStore

logger = logging.getLogger(__name__)


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle events."""
    store = app.state.store
    logger.info(
        "Starting %s with %d projects and %d tasks in memory",
        settings.app_name,
        len(store.list_projects()),
        len(store.list_tasks()),
    )
    logger.debug("Configuration: %s", get_config_summary())

    yield

    # State lives only for the process lifetime.
    logger.info("Shutting down %s; in-memory state discarded", settings.app_name)


def create_app(store: InMemoryStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns its store. Pass ``store`` to share a prepared
    instance, otherwise a new one is built from the settings.
    """
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="Personal task management with projects, manual ordering and analytics",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    if store is None:
        store = InMemoryStore(
            seed_defaults=settings.seed_default_projects,
            default_color=settings.default_project_color,
        )
    app.state.store = store

    # Add middleware
    setup_middleware(app)

    # Add exception handlers
    setup_exception_handlers(app)

    # Include routers
    setup_routers(app)

    return app


def setup_middleware(app: FastAPI):
    """Configure application middleware."""
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request ID middleware
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


def setup_exception_handlers(app: FastAPI):
    """Configure global exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Handle custom exceptions that have structured detail
        if isinstance(exc.detail, dict) and "message" in exc.detail:
            message = exc.detail["message"]
            error_code = exc.detail.get("error_code", "HTTP_ERROR")
            details = exc.detail.get("details")
        else:
            message = str(exc.detail) if exc.detail else "An error occurred"
            error_code = "HTTP_ERROR"
            details = None

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "status": "error",
                "message": message,
                "error_code": error_code,
                "details": details,
                "timestamp": _utcnow_iso(),
                "request_id": getattr(request.state, "request_id", None),
            },
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Convert errors to JSON-serializable format
        errors = []
        for error in exc.errors():
            error_dict = {
                "loc": error.get("loc", []),
                "msg": str(error.get("msg", "Validation error")),
                "type": error.get("type", "value_error"),
            }
            if "input" in error:
                error_dict["input"] = str(error["input"])
            errors.append(error_dict)

        return JSONResponse(
            status_code=422,
            content={
                "status": "error",
                "message": "Validation error",
                "error_code": "VALIDATION_ERROR",
                "details": errors,
                "timestamp": _utcnow_iso(),
                "request_id": getattr(request.state, "request_id", None),
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        request_id = getattr(request.state, "request_id", None)
        # Runs outside the request-id middleware, so the header is set here.
        headers = {"X-Request-ID": request_id} if request_id else None
        return JSONResponse(
            status_code=500,
            headers=headers,
            content={
                "status": "error",
                "message": "Internal server error",
                "error_code": "INTERNAL_ERROR",
                "details": None,
                "timestamp": _utcnow_iso(),
                "request_id": request_id,
            },
        )


def setup_routers(app: FastAPI):
    """Configure application routers."""
    # Import routers
    from app.domains.project.controller import router as project_router
    from app.domains.task.controller import router as task_router

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint with store counters."""
        store = request.app.state.store
        return {
            "status": "healthy",
            "version": settings.version,
            "environment": settings.environment,
            "timestamp": _utcnow_iso(),
            "store": {
                "tasks": len(store.list_tasks()),
                "projects": len(store.list_projects()),
            },
        }

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.version,
            "description": "Personal task management with projects, manual ordering and analytics",
            "docs_url": "/docs" if settings.is_development else None,
        }

    # Include domain routers
    app.include_router(task_router)
    app.include_router(project_router)


# Create the application instance
app = create_app()


def main():
    """Entry point for running the application directly."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
