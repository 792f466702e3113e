# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .feed_fetcher import FeedFetcher
from .feed_parser import parse_feed
from .query_service import evaluate_query, is_singular, project

__all__ = [
    "FeedFetcher",
    "parse_feed",
    "evaluate_query",
    "is_singular",
    "project",
]
