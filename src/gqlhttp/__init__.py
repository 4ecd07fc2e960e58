"""
gqlhttp - GraphQL over HTTP for Python.

Validates GraphQL-over-HTTP requests, negotiates the response media type,
executes operations with graphql-core and maps the result onto the status
codes required by the GraphQL-over-HTTP specification.

Usage:
    from gqlhttp import HandlerConfig, create_app

    app = create_app(HandlerConfig(schema=schema))
"""

from __future__ import annotations

from .api import create_graphql_router
from .app import create_app
from .client import GraphQLClient, GraphQLResult, build_request, decode_response
from .config import HandlerConfig, Settings, load_settings
from .core import (
    BadRequestError,
    GqlHttpError,
    GraphQLParameters,
    HttpError,
    IncomingRequest,
    MediaType,
    MethodNotAllowedError,
    NotAcceptableError,
    RequestBuildError,
    RequestValidator,
    ResponseDecision,
    ResponseDecodeError,
    TransportError,
    UnsupportedMediaTypeError,
    ValidationOutcome,
    extract_parameters,
    negotiate,
    resolve,
    validate_request,
)
from .handler import GraphQLHttpHandler, create_handler
from .playground import get_playground_html
from .runtime import ExecutionOutcome, RequestContext, execute_graphql

__version__ = "0.1.0"

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
    "MediaType",
    # Pipeline
    "negotiate",
    "extract_parameters",
    "RequestValidator",
    "ValidationOutcome",
    "validate_request",
    "resolve",
    "execute_graphql",
    "ExecutionOutcome",
    "RequestContext",
    "GraphQLHttpHandler",
    "create_handler",
    # Configuration
    "HandlerConfig",
    "Settings",
    "load_settings",
    # FastAPI
    "create_graphql_router",
    "create_app",
    "get_playground_html",
    # Client
    "GraphQLClient",
    "GraphQLResult",
    "build_request",
    "decode_response",
]
