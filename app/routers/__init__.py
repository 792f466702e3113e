# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - parse.py: Feed fetch, parse and JSONPath projection endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import parse

__all__ = [
    "parse",
]
