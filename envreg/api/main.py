"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, envreg.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from envreg import __version__
from envreg.api.deps.dependencies import get_service_cache
from envreg.configs import get_settings
from envreg.observability import configure_logging
from envreg.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    chat_router,
    compliance_router,
    conversations_router,
    health_router,
    laws_router,
    polimi_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and loads the law catalog at startup so a broken
    norms file fails fast.
    """
    configure_logging(get_settings().log_level)
    logger = logging.getLogger(__name__)

    # Startup
    cache = get_service_cache()
    catalog = cache.law_catalog
    logger.info("Law catalog ready", extra={"law_count": len(catalog)})
    if not get_settings().llm.is_configured:
        logger.warning("LLM_API_KEY is not configured; chat and analysis will fail")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="Environmental Regulation Assistant API",
        description=(
            "Law catalog, cited law chat and document compliance analysis for "
            "EU, Italian and Lombardy environmental regulations"
        ),
        version=__version__,
        docs_url=None if settings.is_production else "/docs",
        lifespan=lifespan,
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers under the versioned API prefix
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(laws_router, prefix=settings.api_prefix)
    app.include_router(chat_router, prefix=settings.api_prefix)
    app.include_router(conversations_router, prefix=settings.api_prefix)
    app.include_router(polimi_router, prefix=settings.api_prefix)
    app.include_router(compliance_router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "envreg.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
