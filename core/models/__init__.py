# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - params.py: Query-string codec and ParseParams validation
# - query.py: QueryOutcome returned by JSONPath evaluation
# =============================================================================

from .params import (
    CoercedValue,
    ParseParams,
    coerce_value,
    parse_params,
    query_string_to_values,
)
from .query import QueryOutcome, QueryStatus

__all__ = [
    "CoercedValue",
    "ParseParams",
    "coerce_value",
    "parse_params",
    "query_string_to_values",
    "QueryOutcome",
    "QueryStatus",
]
