# =============================================================================
# core/models/query.py - Query Outcome Schema
# =============================================================================
# The result of projecting a JSONPath expression over a FeedDocument.
# Evaluation never raises: a bad expression is reported as FAILED and the
# caller decides what to return.
#
# Example:
#   outcome = evaluate_query("$.items[*].title", document)
#   if outcome.status is QueryStatus.FAILED:
#       logger.info(outcome.error)
#   return outcome.value
# =============================================================================

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QueryStatus(str, Enum):
    """
    How a query evaluation ended.

    - matched: at least one node matched
    - empty: the expression is valid but nothing matched
    - failed: the expression could not be compiled or evaluated
    """
    MATCHED = "matched"
    EMPTY = "empty"
    FAILED = "failed"


class QueryOutcome(BaseModel):
    """Result of evaluating one JSONPath expression."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(
        ...,
        description="The JSONPath expression that was evaluated"
    )

    status: QueryStatus = Field(
        ...,
        description="Whether the expression matched, matched nothing, or failed"
    )

    value: Any = Field(
        default_factory=list,
        description="Projected value; [] when nothing matched or evaluation failed"
    )

    error: str | None = Field(
        default=None,
        description="Error description if status=failed"
    )

    @property
    def failed(self) -> bool:
        return self.status is QueryStatus.FAILED
