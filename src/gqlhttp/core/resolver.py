"""
Response resolver.

Maps the pipeline outcome and negotiated media type to the final response:

| Outcome                          | application/graphql+json | application/json |
|----------------------------------|--------------------------|------------------|
| HTTP-layer error                 | 400/405/406/415          | same             |
| executed (with or without errors)| 200                      | 200              |
| request errors, no data          | 400                      | 200              |
| internal error                   | 500                      | 500              |
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from .errors import HttpError, MethodNotAllowedError
from .media_types import MediaType
from .types import ResponseDecision

if TYPE_CHECKING:
    from ..runtime.executor import ExecutionOutcome


INTERNAL_ERROR_MESSAGE = "Internal server error."

# Status for request errors (no data) per response media type
REQUEST_ERROR_STATUS: dict[MediaType, int] = {
    MediaType.GRAPHQL_JSON: 400,
    MediaType.JSON: 200,
}


def resolve_http_error(error: HttpError, media_type: MediaType) -> ResponseDecision:
    headers = {}
    if isinstance(error, MethodNotAllowedError):
        headers["Allow"] = error.allow
    return ResponseDecision(
        status_code=error.status_code,
        body=error.to_body(),
        content_type=media_type.content_type,
        headers=headers,
    )


def resolve_execution(outcome: "ExecutionOutcome", media_type: MediaType) -> ResponseDecision:
    status_code = REQUEST_ERROR_STATUS[media_type] if outcome.request_error else 200
    return ResponseDecision(
        status_code=status_code,
        body=outcome.to_body(),
        content_type=media_type.content_type,
    )


def resolve_internal_error(media_type: MediaType) -> ResponseDecision:
    return ResponseDecision(
        status_code=500,
        body={"errors": [{"message": INTERNAL_ERROR_MESSAGE}]},
        content_type=media_type.content_type,
    )


def resolve(
    outcome: Union[HttpError, "ExecutionOutcome", BaseException],
    media_type: MediaType,
) -> ResponseDecision:
    """
    Produce the response for a pipeline outcome.

    Args:
        outcome: HTTP-layer error, execution outcome, or any other exception
        media_type: Negotiated response media type

    Returns:
        ResponseDecision
    """
    if isinstance(outcome, HttpError):
        return resolve_http_error(outcome, media_type)
    if isinstance(outcome, BaseException):
        return resolve_internal_error(media_type)
    return resolve_execution(outcome, media_type)
