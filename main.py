"""
Edge Request Router
FastAPI application forwarding chat, translation and summarization requests
to Groq.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from edge_router.api.errors import register_exception_handlers
from edge_router.api.routers import api_router, root_router
from edge_router.config.logging import setup_logging
from edge_router.config.settings import Settings, get_settings
from edge_router.middleware.cors import CORSHeadersMiddleware
from edge_router.middleware.error_handling import ErrorHandlingMiddleware
from edge_router.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    # Startup
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} (environment: {settings.environment})")

    # A missing key only fails the AI requests, never startup
    if not settings.has_provider_key:
        logger.warning("GROQ_API_KEY is not set; AI endpoints will return 500")

    yield

    # Shutdown
    logger.info("Shutting down...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Edge handler forwarding chat, translation and summarization to Groq",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    register_exception_handlers(app)

    # Added innermost first: CORS wraps error handling so 500s carry the headers
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(CORSHeadersMiddleware)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)

    app.include_router(root_router)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )
