# =============================================================================
# core/services/query_service.py - JSONPath Projection
# =============================================================================
# Narrows a FeedDocument with a caller-supplied JSONPath expression using
# jsonpath-ng's extended grammar (wildcards, descent, slices, filters).
#
# Result shape:
#   - nothing matched                     -> []
#   - singular path ($.items[0].title)    -> the matched value itself
#   - anything else ($.items[*].title)    -> list of matched values
#
# Malformed expressions never raise; they are reported through the
# on_error hook and come back as a FAILED outcome with an empty value.
# =============================================================================

import logging
from typing import Any, Callable

from jsonpath_ng.ext import parse as parse_jsonpath
from jsonpath_ng.jsonpath import Child, Fields, Index, JSONPath, Root, This

from core.models.query import QueryOutcome, QueryStatus

logger = logging.getLogger(__name__)

ErrorHook = Callable[[str, Exception], None]


def _ignore_error(expression: str, error: Exception) -> None:
    pass


def is_singular(node: JSONPath) -> bool:
    """
    Check whether a compiled path can select at most one node.

    Only root, field and single-index steps are singular; wildcards,
    slices, filters, descent and unions may select many.
    """
    if isinstance(node, (Root, This)):
        return True
    if isinstance(node, Child):
        return is_singular(node.left) and is_singular(node.right)
    if isinstance(node, Fields):
        return len(node.fields) == 1 and node.fields[0] != "*"
    if isinstance(node, Index):
        return len(getattr(node, "indices", (None,))) == 1
    return False


def evaluate_query(
    expression: str,
    document: Any,
    on_error: ErrorHook | None = None,
) -> QueryOutcome:
    """
    Evaluate a JSONPath expression against a document.

    Args:
        expression: JSONPath expression, e.g. "$.items[?(@.title)].link"
        document: JSON-representable document to search
        on_error: Called with (expression, error) when evaluation fails

    Returns:
        QueryOutcome: Never raises for a bad expression
    """
    hook = on_error or _ignore_error

    try:
        compiled = parse_jsonpath(expression)
        values = [match.value for match in compiled.find(document)]
    except Exception as e:
        logger.info(f"JSONPath expression {expression!r} failed: {e}")
        hook(expression, e)
        return QueryOutcome(
            expression=expression,
            status=QueryStatus.FAILED,
            value=[],
            error=str(e) or type(e).__name__,
        )

    if not values:
        return QueryOutcome(expression=expression, status=QueryStatus.EMPTY, value=[])

    value = values[0] if is_singular(compiled) and len(values) == 1 else values
    return QueryOutcome(expression=expression, status=QueryStatus.MATCHED, value=value)


def project(document: dict[str, Any], query: str | None) -> Any:
    """
    Apply an optional query to a FeedDocument.

    An empty or missing query returns the whole document unchanged.
    """
    if not query:
        return document

    outcome = evaluate_query(query, document)
    logger.debug(f"Query {query!r} -> {outcome.status.value}")
    return outcome.value
