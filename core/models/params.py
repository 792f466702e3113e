# =============================================================================
# core/models/params.py - Query-String Parameter Codec
# =============================================================================
# Turns the raw query string of GET /api/parse into a validated ParseParams:
#
#   "url=https://rsshub.app/x&jq=$.items[0].title"
#       -> {"url": "https://rsshub.app/x", "jq": "$.items[0].title"}
#       -> ParseParams(url=..., query=...)
#
# Values are loosely typed: each one is parsed as JSON when possible
# ("42" -> 42, "true" -> True) and kept as the raw string otherwise.
# =============================================================================

import json
import logging
from typing import Any, NamedTuple
from urllib.parse import parse_qsl

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from app.exceptions import ParamsValidationError

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_HOST = "rsshub.app"

_http_url = TypeAdapter(AnyHttpUrl)


class CoercedValue(NamedTuple):
    """A query-string value after best-effort JSON parsing."""
    value: Any
    parsed: bool


def coerce_value(raw: str) -> CoercedValue:
    """
    Parse a single query-string value as JSON, falling back to the raw text.

    Never raises: "hello" is not JSON and comes back unchanged.
    """
    try:
        return CoercedValue(json.loads(raw), True)
    except (ValueError, RecursionError):
        return CoercedValue(raw, False)


def query_string_to_values(query_string: str) -> dict[str, Any]:
    """
    Group a raw query string into a record of coerced values.

    A key given once is bound to its value; a repeated key is bound to
    the ordered list of its values.

    Args:
        query_string: Raw query string without the leading "?"

    Returns:
        Mapping of parameter name to coerced value(s), in first-seen order
    """
    grouped: dict[str, list[Any]] = {}
    for key, raw in parse_qsl(query_string, keep_blank_values=True):
        grouped.setdefault(key, []).append(coerce_value(raw).value)

    return {
        key: values[0] if len(values) == 1 else values
        for key, values in grouped.items()
    }


class ParseParams(BaseModel):
    """
    Validated parameters for GET /api/parse.

    The allowed upstream host is passed through the validation context
    so the model stays independent of application settings.

    Example:
        {
            "url": "https://rsshub.app/github/issue/python/cpython",
            "jq": "$.items[*].title"
        }
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    url: str = Field(
        ...,
        description="Absolute http(s) URL of the feed to fetch"
    )

    query: str | None = Field(
        default=None,
        alias="jq",
        description="Optional JSONPath expression applied to the parsed feed"
    )

    @field_validator("url")
    @classmethod
    def check_url(cls, value: str, info: ValidationInfo) -> str:
        try:
            _http_url.validate_python(value)
        except ValidationError:
            raise ValueError("Invalid url")

        allowed_host = (info.context or {}).get("allowed_host", DEFAULT_ALLOWED_HOST)
        if allowed_host not in value:
            raise ValueError(f"URL must contain '{allowed_host}'")
        return value


def format_validation_errors(exc: ValidationError) -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into one entry per failing field."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "__root__",
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors(include_url=False)
    ]


def parse_params(
    query_string: str,
    allowed_host: str = DEFAULT_ALLOWED_HOST,
) -> ParseParams:
    """
    Decode and validate the query string of a parse request.

    Args:
        query_string: Raw query string of the incoming request
        allowed_host: Substring every target URL must contain

    Returns:
        ParseParams: The validated parameters

    Raises:
        ParamsValidationError: Listing every failing field
    """
    record = query_string_to_values(query_string)

    try:
        return ParseParams.model_validate(
            record,
            context={"allowed_host": allowed_host},
        )
    except ValidationError as e:
        errors = format_validation_errors(e)
        logger.debug(f"Rejected parameters {record}: {errors}")
        raise ParamsValidationError(errors)
