# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Shared-secret authentication via the X-Auth-Key header.
#
# Usage:
#   from app.auth import verify_auth_key
#
#   app = FastAPI(dependencies=[Depends(verify_auth_key)])
# =============================================================================

from app.auth.dependencies import AUTH_HEADER, is_authorized, verify_auth_key

__all__ = [
    "AUTH_HEADER",
    "is_authorized",
    "verify_auth_key",
]
