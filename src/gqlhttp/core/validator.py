"""
Request validator.

Runs the HTTP-layer checks in order, stopping at the first failure:

1. Accept header negotiable                      -> 406
2. Method supported, Content-Type supported      -> 400 / 415
3. GraphQL parameters extractable                -> 400
4. No mutation selected on GET                   -> 405
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from graphql import GraphQLError, OperationType, get_operation_ast, parse

from .errors import BadRequestError, HttpError, MethodNotAllowedError, NotAcceptableError
from .media_types import MediaType, negotiate
from .params import check_content_type, extract_parameters
from .types import GraphQLParameters, IncomingRequest

logger = logging.getLogger(__name__)


SUPPORTED_METHODS = ("GET", "POST")

UNSUPPORTED_METHOD = 'The method is not supported. "{method}"'
MUTATION_VIA_GET = "Mutation operations are not allowed via GET. Use POST instead."


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of request validation.

    Exactly one of `params` and `error` is set. `media_type` is the
    negotiated response type, or application/json when negotiation failed.
    """
    media_type: MediaType
    params: Optional[GraphQLParameters] = None
    error: Optional[HttpError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


class RequestValidator:
    """
    Validates an inbound request and extracts its GraphQL parameters.

    Usage:
        validator = RequestValidator()
        outcome = validator.validate(request)
        if outcome.is_valid:
            ...
    """

    def validate(self, request: IncomingRequest) -> ValidationOutcome:
        try:
            media_type = negotiate(request.accept)
        except NotAcceptableError as e:
            return ValidationOutcome(media_type=MediaType.JSON, error=e)

        try:
            method = self.check_method(request)
            if method == "POST":
                check_content_type(request)
            params = extract_parameters(request)
            if method == "GET":
                self.check_operation(params)
        except HttpError as e:
            logger.debug(f"Rejected {request.method} request ({e.status_code}): {e.message}")
            return ValidationOutcome(media_type=media_type, error=e)

        return ValidationOutcome(media_type=media_type, params=params)

    def check_method(self, request: IncomingRequest) -> str:
        """Return the normalized method or raise for anything but GET/POST."""
        method = request.method.upper()
        if method not in SUPPORTED_METHODS:
            raise BadRequestError(UNSUPPORTED_METHOD.format(method=method))
        return method

    def check_operation(self, params: GraphQLParameters) -> None:
        """
        Reject a GET request whose selected operation is a mutation.

        Documents that do not parse, or where no operation can be selected,
        are left for the executor to report.
        """
        try:
            document = parse(params.query)
        except GraphQLError:
            return

        operation = get_operation_ast(document, params.operation_name)
        if operation is not None and operation.operation == OperationType.MUTATION:
            raise MethodNotAllowedError(MUTATION_VIA_GET, allow="POST")


def validate_request(request: IncomingRequest) -> ValidationOutcome:
    """Convenience function to validate a request."""
    return RequestValidator().validate(request)
