# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Compares the X-Auth-Key request header against the configured APP_SECRET.
#
# - development mode authorizes every request
# - OPTIONS requests pass through so CORS pre-flight checks succeed
# - an unset secret never matches, so every request is rejected
#
# Usage:
#   app = FastAPI(dependencies=[Depends(verify_auth_key)])
# =============================================================================

import logging
import secrets
from typing import Optional

from fastapi import Header, Request

from app.config import Settings
from app.dependencies import SettingsDep
from app.exceptions import AuthError

logger = logging.getLogger(__name__)

AUTH_HEADER = "X-Auth-Key"


def is_authorized(auth_key: Optional[str], settings: Settings) -> bool:
    """
    Decide whether a credential grants access.

    Args:
        auth_key: Value of the X-Auth-Key header, if any
        settings: Application settings holding the secret and mode

    Returns:
        True if the request may proceed
    """
    if settings.is_development:
        return True

    if not auth_key or not settings.APP_SECRET:
        return False

    return secrets.compare_digest(
        auth_key.encode("utf-8"),
        settings.APP_SECRET.encode("utf-8"),
    )


async def verify_auth_key(
    request: Request,
    settings: SettingsDep,
    auth_key: Optional[str] = Header(default=None, alias=AUTH_HEADER),
) -> None:
    """
    Reject the request unless it carries the shared secret.

    Raises:
        AuthError: 401 if the credential is missing or wrong
    """
    if request.method == "OPTIONS":
        return

    if not is_authorized(auth_key, settings):
        logger.warning(f"Rejected {request.method} {request.url.path}: missing or invalid {AUTH_HEADER}")
        raise AuthError()
