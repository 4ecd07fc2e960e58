"""
FastAPI router for GraphQL over HTTP.

Endpoints (path configurable, default /graphql):
- GET  - Query via URL parameters (mutations rejected with 405)
- POST - Query or mutation via JSON body

Other methods reach the pipeline as well and are answered with 400.
When the playground is enabled, browsers asking for text/html on GET get
the GraphQL Playground page instead.
"""

from __future__ import annotations

import json

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from ..config import HandlerConfig
from ..core.media_types import prefers_html
from ..core.types import IncomingRequest, ResponseDecision
from ..handler import GraphQLHttpHandler
from ..playground import get_playground_html


# HEAD is added by Starlette alongside GET. CORS preflight requests are
# answered by the middleware before they reach the endpoint.
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


async def to_incoming_request(request: Request) -> IncomingRequest:
    """Convert a Starlette request to an IncomingRequest."""
    body = await request.body()
    return IncomingRequest(
        method=request.method,
        headers=dict(request.headers),
        body=body,
        query_string=request.url.query,
    )


def to_response(decision: ResponseDecision) -> Response:
    """Convert a ResponseDecision to a Starlette response."""
    return Response(
        content=json.dumps(decision.body, ensure_ascii=False),
        status_code=decision.status_code,
        headers=dict(decision.headers),
        media_type=decision.content_type,
    )


def create_graphql_router(config: HandlerConfig, path: str = "/graphql") -> APIRouter:
    """
    Create a router serving a GraphQL endpoint.

    Args:
        config: Handler configuration (schema, resolvers, hooks)
        path: URL path of the endpoint

    Returns:
        Configured FastAPI router
    """
    handler = GraphQLHttpHandler(config)
    router = APIRouter()

    @router.api_route(path, methods=ROUTED_METHODS, include_in_schema=False)
    async def graphql_endpoint(request: Request) -> Response:
        if (
            config.playground
            and request.method == "GET"
            and prefers_html(request.headers.get("accept"))
        ):
            return HTMLResponse(
                get_playground_html(endpoint=request.url.path, title=config.playground_title)
            )

        incoming = await to_incoming_request(request)
        decision = await handler.handle(incoming)
        return to_response(decision)

    return router
