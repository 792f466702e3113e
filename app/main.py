# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Feed Gateway API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
import time
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.auth import AUTH_HEADER, verify_auth_key
from app.config import Settings, get_settings
from app.exceptions import (
    GatewayException,
    gateway_exception_handler,
    unhandled_exception_handler,
)
from app.routers import parse
from core.services.feed_fetcher import FeedFetcher

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


async def log_requests(request: Request, call_next):
    """
    Log every request with its status and processing time.

    Only installed in development mode.
    """
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({process_time:.3f}s)"
    )
    return response


def create_app(
    settings: Optional[Settings] = None,
    fetcher: Optional[FeedFetcher] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Settings to bind for the app lifetime (defaults to environment)
        fetcher: Feed fetcher to use (defaults to a network-backed fetcher)

    Returns:
        The configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Feed Gateway API",
        description="Fetches RSS/Atom feeds and returns them as JSON, "
                    "optionally narrowed with a JSONPath expression.",
        version="1.0.0",
        dependencies=[Depends(verify_auth_key)],
    )

    app.state.settings = settings
    app.state.feed_fetcher = fetcher or FeedFetcher(user_agent=settings.USER_AGENT)

    # =========================================================================
    # Middleware
    # =========================================================================

    if settings.is_development:
        app.middleware("http")(log_requests)

    # Added last so it wraps everything, including 401 responses
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=[AUTH_HEADER],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(GatewayException, gateway_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(parse.router, prefix="/api", tags=["Parse"])

    logger.info(f"Feed Gateway configured in {settings.APP_ENV} mode (allowed host: {settings.ALLOWED_HOST})")
    return app


def build_app() -> FastAPI:
    """Process entry point: read settings once, configure logging, build the app."""
    settings = get_settings()
    configure_logging(settings)
    return create_app(settings)


app = build_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
