# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services.feed_fetcher import FeedFetcher


def get_app_settings(request: Request) -> Settings:
    """
    Get the Settings the application was created with.

    The instance is bound once by create_app() and shared by every request.
    """
    return request.app.state.settings


def get_feed_fetcher(request: Request) -> FeedFetcher:
    """Get the application's feed fetcher."""
    return request.app.state.feed_fetcher


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
FeedFetcherDep = Annotated[FeedFetcher, Depends(get_feed_fetcher)]
