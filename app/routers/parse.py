# =============================================================================
# app/routers/parse.py - Feed Parse Endpoint
# =============================================================================
# GET /api/parse?url=<feed url>&jq=<JSONPath>
#
# Pipeline: parameters -> fetch -> parse -> optional query -> JSON.
# Every failure leaves this handler as a GatewayException, which the
# application's exception handler turns into exactly one response.
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from app.dependencies import FeedFetcherDep, SettingsDep
from app.exceptions import GatewayException, InternalError
from core.models.params import parse_params
from core.services.feed_parser import parse_feed
from core.services.query_service import project

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/parse")
async def parse(
    request: Request,
    settings: SettingsDep,
    fetcher: FeedFetcherDep,
):
    """
    Fetch a feed and return it as JSON.

    Query parameters:
    - **url**: absolute URL of the feed; must point at the allowed host
    - **jq**: optional JSONPath expression applied to the parsed feed

    Returns the full feed document, or the query result when `jq` is given.
    """
    try:
        params = parse_params(request.url.query, settings.ALLOWED_HOST)

        content = await fetcher.fetch(params.url)
        feed = parse_feed(content)

        result = project(feed, params.query)
    except GatewayException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected failure parsing feed: {e}")
        raise InternalError(e)

    return JSONResponse(content=result)


@router.options("/parse")
async def parse_options():
    """
    Answer a bare OPTIONS request.

    Browser pre-flight requests are handled by the CORS middleware; this
    covers OPTIONS requests sent without CORS headers.
    """
    return Response(status_code=204, headers={"Allow": "GET, OPTIONS"})
