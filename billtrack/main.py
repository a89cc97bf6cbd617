"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from typing import Dict, Any

from billtrack.config import settings
from billtrack.infrastructure.web.middleware.error_handler import ErrorHandlerMiddleware
from billtrack.infrastructure.web.routers import (
    clients,
    dashboard,
    projects,
    tasks
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    """
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}, timezone: {settings.timezone}")

    yield

    logger.info("Shutting down application")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(ErrorHandlerMiddleware)

    # Every workspace route is scoped by its owner
    workspace_prefix = f"{settings.api_prefix}/workspaces/{{owner_id}}"

    app.include_router(
        dashboard.router,
        prefix=f"{workspace_prefix}/dashboard",
        tags=["Dashboard"]
    )
    app.include_router(
        clients.router,
        prefix=f"{workspace_prefix}/clients",
        tags=["Clients"]
    )
    app.include_router(
        projects.router,
        prefix=f"{workspace_prefix}/projects",
        tags=["Projects"]
    )
    app.include_router(
        tasks.router,
        prefix=f"{workspace_prefix}/tasks",
        tags=["Tasks"]
    )

    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{settings.api_prefix}/docs" if settings.debug else None,
            "health": f"{settings.api_prefix}/health"
        }

    @app.get(f"{settings.api_prefix}/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": settings.api_version
        }

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Custom 404 error handler for unknown paths."""
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"The path {request.url.path} was not found",
                "path": request.url.path
            }
        )

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "billtrack.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
