"""
Client module - building GraphQL-over-HTTP requests and decoding responses.
"""

from __future__ import annotations

from .client import GraphQLClient
from .decoder import ErrorLocation, GraphQLErrorEntry, GraphQLResult, decode_response
from .request_builder import build_request

__all__ = [
    "GraphQLClient",
    "GraphQLResult",
    "GraphQLErrorEntry",
    "ErrorLocation",
    "build_request",
    "decode_response",
]
