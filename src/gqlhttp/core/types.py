"""
Request and response data structures shared by the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class IncomingRequest:
    """
    Transport-neutral view of an inbound HTTP request.

    Header names are matched case-insensitively. `query_string` is the raw
    URL query component without the leading "?".
    """
    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    query_string: str = ""

    def header(self, name: str) -> Optional[str]:
        """Get a header value by case-insensitive name."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    @property
    def content_type(self) -> Optional[str]:
        return self.header("content-type")

    @property
    def accept(self) -> Optional[str]:
        return self.header("accept")


@dataclass(frozen=True)
class GraphQLParameters:
    """GraphQL execution parameters extracted from a request."""
    query: str
    operation_name: Optional[str] = None
    variables: Optional[dict[str, Any]] = None


@dataclass(frozen=True)
class ResponseDecision:
    """
    Final outbound response: status, JSON body and content type.

    `headers` holds extra response headers such as `Allow` for 405.
    """
    status_code: int
    body: dict[str, Any]
    content_type: str
    headers: Mapping[str, str] = field(default_factory=dict)
