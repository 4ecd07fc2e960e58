"""
Async HTTP client for GraphQL endpoints.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from ..core.errors import TransportError
from .decoder import GraphQLResult, decode_response
from .request_builder import build_request

logger = logging.getLogger(__name__)


class GraphQLClient:
    """
    HTTP client for a single GraphQL endpoint.

    Usage:
        async with GraphQLClient("http://localhost:8000/graphql") as client:
            result = await client.execute("{ test }")
            print(result.data)
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 30.0,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize GraphQL client.

        Args:
            url: GraphQL endpoint URL
            timeout: HTTP request timeout in seconds
            headers: Headers sent with every request
            transport: Custom httpx transport (e.g. httpx.ASGITransport)
        """
        self.url = url
        self.timeout = timeout
        self.headers = dict(headers or {})
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self.transport)
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GraphQLClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def execute(
        self,
        query: str,
        variables: Optional[Mapping[str, Any]] = None,
        operation_name: Optional[str] = None,
        method: str = "POST",
    ) -> GraphQLResult:
        """
        Execute a GraphQL operation.

        Raises:
            RequestBuildError: Request could not be constructed
            TransportError: Endpoint could not be reached
            ResponseDecodeError: Response is not a GraphQL response
        """
        request = build_request(
            self.url,
            query,
            variables=variables,
            operation_name=operation_name,
            method=method,
            headers=self.headers,
        )
        request.extensions["timeout"] = httpx.Timeout(self.timeout).as_dict()
        client = await self._get_client()

        try:
            response = await client.send(request)
        except httpx.RequestError as e:
            raise TransportError(self.url, str(e)) from e

        logger.debug(f"{method} {self.url} -> {response.status_code}")
        return decode_response(response)
