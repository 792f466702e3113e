# =============================================================================
# core/services/feed_fetcher.py - Outbound Feed Retrieval
# =============================================================================
# Issues exactly one GET per request. No retries, no timeout override:
# failures are surfaced to the caller, never masked.
# =============================================================================

import logging

import httpx

from app.exceptions import TransportError, UpstreamError

logger = logging.getLogger(__name__)


class FeedFetcher:
    """
    Fetches raw feed documents over HTTP.

    A transport can be injected (e.g. httpx.MockTransport) so the fetcher
    can be exercised without network access.
    """

    def __init__(
        self,
        user_agent: str = "feed-gateway/1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.user_agent = user_agent
        self.transport = transport

    async def fetch(self, url: str) -> bytes:
        """
        Retrieve the document at a validated URL.

        Args:
            url: Absolute URL that already passed parameter validation

        Returns:
            The raw response body

        Raises:
            UpstreamError: If the server answers with a non-2xx status
            TransportError: If the server cannot be reached
        """
        async with httpx.AsyncClient(
            transport=self.transport,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
        ) as client:
            try:
                response = await client.get(url)
            except httpx.TransportError as e:
                logger.error(f"Transport failure fetching {url}: {e!r}")
                raise TransportError(url, str(e) or type(e).__name__)

        if not response.is_success:
            logger.warning(f"Upstream {url} answered {response.status_code} {response.reason_phrase}")
            raise UpstreamError(url, response.status_code, response.reason_phrase)

        logger.debug(f"Fetched {url}: {len(response.content)} bytes")
        return response.content
