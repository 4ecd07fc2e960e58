"""
Execution delegate backed by graphql-core.

Runs a GraphQL operation and reports whether any errors are request errors
(the operation never reached the root resolvers) or field errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from inspect import isawaitable
from typing import Any, Optional

from graphql import (
    ExecutionContext,
    GraphQLError,
    GraphQLFieldResolver,
    GraphQLSchema,
    GraphQLTypeResolver,
    execute,
    parse,
    validate,
)

from ..core.types import GraphQLParameters


@dataclass(frozen=True)
class ExecutionOutcome:
    """
    Result of executing a GraphQL operation.

    `request_error` is True when execution never started: the document did
    not parse or validate, the operation could not be selected, or variables
    could not be coerced. In that case `data` is always absent.
    """
    data: Optional[dict[str, Any]] = None
    errors: Optional[list[dict[str, Any]]] = None
    extensions: Optional[dict[str, Any]] = None
    request_error: bool = False

    @classmethod
    def from_request_errors(cls, errors: list[GraphQLError]) -> "ExecutionOutcome":
        return cls(errors=[error.formatted for error in errors], request_error=True)

    def to_body(self) -> dict[str, Any]:
        """Serialize as a GraphQL response envelope. Absent keys are omitted."""
        body: dict[str, Any] = {}
        if not self.request_error:
            body["data"] = self.data
        if self.errors:
            body["errors"] = self.errors
        if self.extensions is not None:
            body["extensions"] = self.extensions
        return body


async def execute_graphql(
    schema: GraphQLSchema,
    params: GraphQLParameters,
    root_value: Any = None,
    context_value: Any = None,
    field_resolver: Optional[GraphQLFieldResolver] = None,
    type_resolver: Optional[GraphQLTypeResolver] = None,
) -> ExecutionOutcome:
    """
    Parse, validate and execute a GraphQL operation.

    Field resolution failures end up in `errors`. An invalid schema raises
    TypeError from graphql-core and is left to the caller.

    Args:
        schema: Executable GraphQL schema
        params: Validated request parameters
        root_value: Root value passed to top-level resolvers
        context_value: Context passed to every resolver
        field_resolver: Custom default field resolver
        type_resolver: Custom default type resolver for abstract types

    Returns:
        ExecutionOutcome
    """
    try:
        document = parse(params.query)
    except GraphQLError as error:
        return ExecutionOutcome.from_request_errors([error])

    validation_errors = validate(schema, document)
    if validation_errors:
        return ExecutionOutcome.from_request_errors(validation_errors)

    # Operation selection and variable coercion happen while building the
    # execution context, before any resolver runs
    context = ExecutionContext.build(
        schema,
        document,
        root_value=root_value,
        context_value=context_value,
        raw_variable_values=params.variables,
        operation_name=params.operation_name,
        field_resolver=field_resolver,
        type_resolver=type_resolver,
    )
    if isinstance(context, list):
        return ExecutionOutcome.from_request_errors(context)

    result = execute(
        schema,
        document,
        root_value=root_value,
        context_value=context_value,
        variable_values=params.variables,
        operation_name=params.operation_name,
        field_resolver=field_resolver,
        type_resolver=type_resolver,
    )
    if isawaitable(result):
        result = await result

    return ExecutionOutcome(
        data=result.data,
        errors=[error.formatted for error in result.errors] if result.errors else None,
        extensions=result.extensions,
    )
