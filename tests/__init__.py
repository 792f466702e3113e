# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Feed Gateway API:
# - test_models.py: Parameter codec and query outcome models
# - test_feed_parser.py: feedparser adapter
# - test_feed_fetcher.py: Outbound fetch and its failure modes
# - test_query_service.py: JSONPath projection
# - test_auth.py: Shared-secret gate
# - test_config.py: Settings loading
# - test_parse_api.py: End-to-end tests for GET /api/parse
#
# Run tests with: pytest
# =============================================================================
