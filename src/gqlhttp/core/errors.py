"""
Custom exceptions for gqlhttp.

HTTP-layer errors carry a fixed status code on the class. They are raised by
the request validator and turned into responses by the handler.
"""

from __future__ import annotations

from typing import Optional


class GqlHttpError(Exception):
    """Base exception for all gqlhttp errors."""
    pass


class HttpError(GqlHttpError):
    """Client-caused error that terminates the pipeline before execution."""

    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_body(self) -> dict:
        return {"errors": [{"message": self.message}]}


class BadRequestError(HttpError):
    """Missing or malformed GraphQL parameters, unsupported method."""
    status_code = 400


class MethodNotAllowedError(HttpError):
    """Mutation requested via GET."""
    status_code = 405

    def __init__(self, message: str, allow: str = "POST"):
        self.allow = allow
        super().__init__(message)


class NotAcceptableError(HttpError):
    """Accept header names no supported response media type."""
    status_code = 406


class UnsupportedMediaTypeError(HttpError):
    """Content-Type missing or not supported for the method."""
    status_code = 415


class RequestBuildError(GqlHttpError):
    """Raised when an outbound GraphQL request cannot be constructed."""
    pass


class ResponseDecodeError(GqlHttpError):
    """Raised when a response is not a valid GraphQL-over-HTTP envelope."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class TransportError(GqlHttpError):
    """Raised when a GraphQL request cannot be delivered."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Request to '{url}' failed: {message}")
