"""
Core module - request validation, content negotiation and response decisions.
"""

from __future__ import annotations

from .errors import (
    BadRequestError,
    GqlHttpError,
    HttpError,
    MethodNotAllowedError,
    NotAcceptableError,
    RequestBuildError,
    ResponseDecodeError,
    TransportError,
    UnsupportedMediaTypeError,
)
from .media_types import MediaType, negotiate, parse_accept, parse_media_type
from .params import check_content_type, extract_parameters
from .resolver import resolve
from .types import GraphQLParameters, IncomingRequest, ResponseDecision
from .validator import RequestValidator, ValidationOutcome, validate_request

__all__ = [
    # Errors
    "GqlHttpError",
    "HttpError",
    "BadRequestError",
    "MethodNotAllowedError",
    "NotAcceptableError",
    "UnsupportedMediaTypeError",
    "RequestBuildError",
    "ResponseDecodeError",
    "TransportError",
    # Types
    "IncomingRequest",
    "GraphQLParameters",
    "ResponseDecision",
    # Negotiation
    "MediaType",
    "negotiate",
    "parse_accept",
    "parse_media_type",
    # Extraction and validation
    "check_content_type",
    "extract_parameters",
    "RequestValidator",
    "ValidationOutcome",
    "validate_request",
    # Resolver
    "resolve",
]
