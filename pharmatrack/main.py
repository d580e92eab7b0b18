"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from pharmatrack import __version__
from pharmatrack.api import auth_router, distribution_router, imports_router, uploads_router
from pharmatrack.api.errors import register_exception_handlers
from pharmatrack.config import Settings, get_settings
from pharmatrack.context import build_context
from pharmatrack.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    context = app.state.context
    logger.info("Using database %s", context.engine.url.render_as_string(hide_password=True))
    yield
    await context.engine.dispose()
    logger.info("Database engine disposed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application around an explicit service context.

    Args:
        settings: Settings to use; defaults to the environment-derived settings.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="PharmaTrack API",
        description="Pharmaceutical import and distribution order tracking",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.context = build_context(settings)
    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(imports_router)
    app.include_router(distribution_router)
    app.include_router(uploads_router)

    @app.get("/")
    @app.post("/")
    async def root() -> dict[str, str]:
        """Welcome message."""
        return {"message": "Welcome", "version": __version__}

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


def run() -> None:
    """Run the API server with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
