# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - auth/: Shared-secret authentication dependency
# - routers/: API endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# fetching, parsing and querying to the core/ package.
# =============================================================================
