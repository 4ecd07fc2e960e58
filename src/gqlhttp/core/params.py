"""
GraphQL parameter extraction.

Parameters are read from two sources:

1. URL query string (GET, and as a fallback layer for POST):
   ?query={test}&operationName=Q&variables={"who":"Dolly"}

2. JSON message body (POST with application/json or application/graphql+json):
   {"query": "{test}", "operationName": "Q", "variables": {"who": "Dolly"}}

For POST, body values take precedence over query string values.
"""

from __future__ import annotations

import json
from typing import Any, Optional
from urllib.parse import parse_qsl

from .errors import BadRequestError, UnsupportedMediaTypeError
from .media_types import REQUEST_MEDIA_TYPES, parse_media_type
from .types import GraphQLParameters, IncomingRequest


PARAMETER_NAMES = ("query", "operationName", "variables")

SUPPORTED_CHARSETS = frozenset({"utf-8", "utf8"})

# Error messages
MISSING_PARAMETER = 'The parameter is required. "{name}"'
INVALID_STRING_PARAMETER = 'The parameter is invalid. "{name}" must be a string.'
MALFORMED_VARIABLES = 'The parameter is invalid. "variables" is malformed JSON.'
INVALID_VARIABLES = 'The parameter is invalid. "variables" must be a JSON object.'
MISSING_CONTENT_TYPE = 'The header is required. "Content-Type"'
UNSUPPORTED_MEDIA_TYPE = 'The media type is not supported. "{media_type}"'
UNSUPPORTED_CHARSET = 'The charset is not supported. "{charset}"'
MALFORMED_BODY = "The message body is invalid. Invalid JSON format."
INVALID_BODY = "The message body is invalid. It must be a JSON object."


def check_content_type(request: IncomingRequest) -> None:
    """
    Ensure a POST request declares a JSON media type in UTF-8.

    Raises:
        UnsupportedMediaTypeError: Header missing, unsupported type or charset
    """
    raw = request.content_type
    if raw is None or not raw.strip():
        raise UnsupportedMediaTypeError(MISSING_CONTENT_TYPE)

    parsed = parse_media_type(raw)
    if parsed.essence not in REQUEST_MEDIA_TYPES:
        raise UnsupportedMediaTypeError(
            UNSUPPORTED_MEDIA_TYPE.format(media_type=parsed.essence)
        )

    charset = parsed.params.get("charset")
    if charset is not None and charset.lower() not in SUPPORTED_CHARSETS:
        raise UnsupportedMediaTypeError(UNSUPPORTED_CHARSET.format(charset=charset))


def read_query_string(query_string: str) -> dict[str, Any]:
    """Read GraphQL parameters from a URL query component. First value wins."""
    values: dict[str, Any] = {}
    for key, value in parse_qsl(query_string, keep_blank_values=True):
        if key in PARAMETER_NAMES and key not in values:
            values[key] = value
    return values


def read_body(body: bytes, *, allow_empty: bool = False) -> dict[str, Any]:
    """
    Decode a JSON message body into a parameter mapping.

    Args:
        body: Raw body bytes
        allow_empty: Treat an empty body as `{}` instead of malformed JSON

    Raises:
        BadRequestError: Body is not JSON or not a JSON object
    """
    if not body.strip():
        if allow_empty:
            return {}
        raise BadRequestError(MALFORMED_BODY)

    try:
        decoded = json.loads(body)
    except ValueError:
        raise BadRequestError(MALFORMED_BODY)

    if not isinstance(decoded, dict):
        raise BadRequestError(INVALID_BODY)

    return {
        key: value
        for key, value in decoded.items()
        if key in PARAMETER_NAMES and value is not None
    }


def _read_variables(value: Any) -> Optional[dict[str, Any]]:
    if value is None:
        return None

    # Query string variables arrive URL-decoded but still JSON-encoded
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            value = json.loads(value)
        except ValueError:
            raise BadRequestError(MALFORMED_VARIABLES)

    if value is None:
        return None
    if not isinstance(value, dict):
        raise BadRequestError(INVALID_VARIABLES)
    return value


def build_parameters(source: dict[str, Any]) -> GraphQLParameters:
    """
    Validate raw parameter values and build GraphQLParameters.

    Raises:
        BadRequestError: Missing query or a parameter of the wrong shape
    """
    query = source.get("query")
    if query is None or query == "":
        raise BadRequestError(MISSING_PARAMETER.format(name="query"))
    if not isinstance(query, str):
        raise BadRequestError(INVALID_STRING_PARAMETER.format(name="query"))

    operation_name = source.get("operationName")
    if operation_name is not None and not isinstance(operation_name, str):
        raise BadRequestError(INVALID_STRING_PARAMETER.format(name="operationName"))

    return GraphQLParameters(
        query=query,
        operation_name=operation_name or None,
        variables=_read_variables(source.get("variables")),
    )


def extract_parameters(request: IncomingRequest) -> GraphQLParameters:
    """
    Extract GraphQL parameters from a GET or POST request.

    For POST the media type must already have been checked with
    `check_content_type`. An empty POST body is accepted only when the
    query string supplies `query`.

    Raises:
        BadRequestError: Parameters missing or malformed
    """
    from_query_string = read_query_string(request.query_string)

    if request.method.upper() == "GET":
        return build_parameters(from_query_string)

    from_body = read_body(request.body, allow_empty="query" in from_query_string)
    return build_parameters({**from_query_string, **from_body})
