"""
Outbound GraphQL-over-HTTP request construction.

GET:  parameters go to the URL query string, variables JSON-encoded
POST: parameters go to a JSON body
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

import httpx

from ..core.errors import RequestBuildError


DEFAULT_ACCEPT = "application/graphql+json, application/json;q=0.9"
SUPPORTED_METHODS = ("GET", "POST")


def _parse_url(url: str | httpx.URL) -> httpx.URL:
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise RequestBuildError(f"Invalid URL: {url!r}") from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise RequestBuildError(f"Invalid URL: {url!r}")
    return parsed


def build_request(
    url: str | httpx.URL,
    query: str,
    variables: Optional[Mapping[str, Any]] = None,
    operation_name: Optional[str] = None,
    method: str = "POST",
    headers: Optional[Mapping[str, str]] = None,
) -> httpx.Request:
    """
    Build a GraphQL-over-HTTP request.

    Args:
        url: Absolute http(s) URL of the GraphQL endpoint
        query: GraphQL document
        variables: Variable values
        operation_name: Operation to execute when the document has several
        method: "GET" or "POST"
        headers: Extra request headers

    Returns:
        httpx.Request ready to be sent

    Raises:
        RequestBuildError: Invalid URL, method, query or variables
    """
    method = method.upper()
    if method not in SUPPORTED_METHODS:
        raise RequestBuildError(f'The method is not supported. "{method}"')
    if not isinstance(query, str) or not query:
        raise RequestBuildError('The parameter is required. "query"')

    target = _parse_url(url)
    request_headers = {"accept": DEFAULT_ACCEPT}
    request_headers.update({key.lower(): value for key, value in (headers or {}).items()})

    try:
        if method == "GET":
            params = {"query": query}
            if operation_name is not None:
                params["operationName"] = operation_name
            if variables is not None:
                params["variables"] = json.dumps(variables)
            return httpx.Request(
                "GET", target.copy_merge_params(params), headers=request_headers
            )

        body: dict[str, Any] = {"query": query}
        if operation_name is not None:
            body["operationName"] = operation_name
        if variables is not None:
            body["variables"] = dict(variables)
        request_headers["content-type"] = "application/json"
        return httpx.Request(
            "POST", target, headers=request_headers, content=json.dumps(body).encode("utf-8")
        )
    except (TypeError, ValueError) as e:
        raise RequestBuildError(f"Variables are not JSON serializable: {e}") from e
