# =============================================================================
# core/services/feed_parser.py - Feed Text -> FeedDocument
# =============================================================================
# Thin adapter over feedparser. Format detection and RSS/Atom dialect
# handling belong to the library; this module only turns its result into
# a plain, JSON-safe document:
#
#   {"title": ..., "link": ..., "version": "rss20", "items": [{...}, ...]}
# =============================================================================

import io
import logging
import time
from datetime import datetime, timezone
from typing import Any

import feedparser

from app.exceptions import FeedParseError

logger = logging.getLogger(__name__)


def _to_json_safe(value: Any) -> Any:
    """Recursively convert feedparser values into JSON-representable ones."""
    # struct_time is a tuple subclass, so it must be checked first
    if isinstance(value, time.struct_time):
        return datetime(*value[:6], tzinfo=timezone.utc).isoformat()
    if isinstance(value, dict):
        return {str(key): _to_json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json_safe(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def parse_feed(content: bytes) -> dict[str, Any]:
    """
    Parse raw feed bytes into a FeedDocument.

    The body is handed to feedparser as a stream so it is never mistaken
    for a URL or a local file path.

    Args:
        content: Raw response body of the upstream feed

    Returns:
        Feed-level metadata plus an ordered "items" list of entries

    Raises:
        FeedParseError: If no RSS/Atom dialect could be recognized
    """
    parsed = feedparser.parse(io.BytesIO(content))

    if not parsed.get("version"):
        error = parsed.get("bozo_exception") or "unrecognized feed format"
        raise FeedParseError(str(error))

    if parsed.get("bozo"):
        logger.debug(f"Recovered from malformed {parsed.version} feed: {parsed.get('bozo_exception')}")

    document = _to_json_safe(parsed.feed)
    document["version"] = parsed.version
    document["items"] = _to_json_safe(parsed.entries)

    logger.debug(f"Parsed {parsed.version} feed '{document.get('title', '')}' with {len(document['items'])} items")
    return document
