# =============================================================================
# core/ - Feed Pipeline Logic
# =============================================================================
# This package contains the request pipeline stages:
# - models/: Pydantic schemas for request parameters and query outcomes
# - services/: Feed fetching, feed parsing and JSONPath projection
#
# Code in this package does not use FastAPI routing or dependencies;
# failures are raised as app.exceptions types for the app layer to render.
# Services can be exercised without building the application.
# =============================================================================
