"""
Decoding of GraphQL-over-HTTP responses into typed results.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from ..core.errors import ResponseDecodeError


class ErrorLocation(BaseModel):
    line: int
    column: int


class GraphQLErrorEntry(BaseModel):
    """
    Single entry of a response `errors` list.

    Unknown keys are preserved.
    """
    model_config = ConfigDict(extra="allow")

    message: str
    locations: Optional[list[ErrorLocation]] = None
    path: Optional[list[Union[str, int]]] = None
    extensions: Optional[dict[str, Any]] = None


class GraphQLResult(BaseModel):
    """
    Decoded GraphQL response.

    Example:
    {
        "data": {"test": "Hello World"},
        "errors": [{"message": "Throws!", "path": ["thrower"]}]
    }
    """
    data: Optional[dict[str, Any]] = None
    errors: Optional[list[GraphQLErrorEntry]] = None
    extensions: Optional[dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        """True when the response carries no errors."""
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Envelope as received, without keys that were absent."""
        return self.model_dump(exclude_unset=True)


def decode_response(response: httpx.Response) -> GraphQLResult:
    """
    Decode an HTTP response into a GraphQLResult.

    Raises:
        ResponseDecodeError: Body is not JSON or not a GraphQL response envelope
    """
    try:
        payload = response.json()
    except ValueError as e:
        raise ResponseDecodeError(
            "The message body is invalid. Invalid JSON format.",
            status_code=response.status_code,
        ) from e

    if not isinstance(payload, dict) or not ("data" in payload or "errors" in payload):
        raise ResponseDecodeError(
            'The message body is invalid. Expected an object with "data" or "errors".',
            status_code=response.status_code,
        )

    try:
        return GraphQLResult.model_validate(payload)
    except ValidationError as e:
        raise ResponseDecodeError(
            f"The message body is invalid. {e.error_count()} invalid field(s).",
            status_code=response.status_code,
        ) from e
