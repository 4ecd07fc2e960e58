"""
GraphQL-over-HTTP pipeline.

negotiate -> validate -> execute -> resolve -> response hook

Every request produces a ResponseDecision with a JSON-compatible body.
Unexpected faults, including bodies that cannot be encoded, are logged and
answered with 500.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from inspect import isawaitable
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder

from .config import HandlerConfig
from .core.media_types import MediaType
from .core.resolver import resolve
from .core.types import IncomingRequest, ResponseDecision
from .core.validator import RequestValidator
from .runtime.context import RequestContext
from .runtime.executor import execute_graphql

logger = logging.getLogger(__name__)


class GraphQLHttpHandler:
    """
    Transport-neutral GraphQL-over-HTTP request handler.

    Usage:
        handler = GraphQLHttpHandler(HandlerConfig(schema=schema))
        decision = await handler.handle(request)
    """

    def __init__(self, config: HandlerConfig, validator: Optional[RequestValidator] = None):
        self.config = config
        self.validator = validator or RequestValidator()

    async def handle(self, request: IncomingRequest) -> ResponseDecision:
        context = RequestContext(request=request, media_type=MediaType.JSON)
        hook_applied = False
        try:
            validation = self.validator.validate(request)
            context = RequestContext(request=request, media_type=validation.media_type)

            if validation.is_valid:
                context_value = await self._get_context_value(request)
                outcome = await execute_graphql(
                    self.config.schema,
                    validation.params,
                    root_value=self.config.root_value,
                    context_value=context_value,
                    field_resolver=self.config.field_resolver,
                    type_resolver=self.config.type_resolver,
                )
                if outcome.request_error:
                    logger.debug(f"Request error: {outcome.errors}")

                decision = resolve(outcome, context.media_type)
                context = RequestContext(
                    request=request,
                    media_type=context.media_type,
                    params=validation.params,
                    outcome=outcome,
                    context_value=context_value,
                )
            else:
                decision = resolve(validation.error, context.media_type)

            hook_applied = True
            return encode_decision(self._apply_hook(decision, context))

        except Exception as e:
            logger.exception(f"Unhandled error while processing {request.method} request")
            decision = resolve(e, context.media_type)

        if hook_applied:
            return decision
        try:
            return encode_decision(self._apply_hook(decision, context))
        except Exception:
            logger.exception("Response hook failed on internal error response")
            return decision

    async def _get_context_value(self, request: IncomingRequest) -> Any:
        if self.config.context_factory is None:
            return self.config.context_value
        value = self.config.context_factory(request)
        if isawaitable(value):
            value = await value
        return value

    def _apply_hook(self, decision: ResponseDecision, context: RequestContext) -> ResponseDecision:
        if self.config.response_hook is None:
            return decision
        return self.config.response_hook(decision, context)


def create_handler(config: HandlerConfig) -> GraphQLHttpHandler:
    """Create a handler for the given configuration."""
    return GraphQLHttpHandler(config)


def encode_decision(decision: ResponseDecision) -> ResponseDecision:
    """
    Convert the decision body to JSON-compatible values.

    Error extensions come from resolvers and may hold values such as datetimes.

    Raises:
        ValueError: The body holds a value that cannot be encoded
    """
    return replace(decision, body=jsonable_encoder(decision.body))
