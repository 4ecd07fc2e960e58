"""
Shared fixtures for gqlhttp tests.

Schema:

    schema {
      query: QueryRoot
      mutation: MutationRoot
    }

    type QueryRoot {
      test(who: String): String
      thrower: String
      nonNullThrower: String!
      asyncTest: String
      greeting: String
      echo: String
    }

    type MutationRoot {
      writeTest: QueryRoot
    }
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Mapping, Optional

import pytest
from fastapi.testclient import TestClient
from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from gqlhttp import GraphQLHttpHandler, HandlerConfig, IncomingRequest, Settings, create_app


def _resolve_thrower(root, info):
    raise Exception("Throws!")


async def _resolve_async_test(root, info):
    await asyncio.sleep(0)
    return "Hello async"


def _resolve_greeting(root, info):
    if isinstance(info.context, dict):
        return info.context.get("greeting")
    return None


QueryRootType = GraphQLObjectType(
    name="QueryRoot",
    fields={
        "test": GraphQLField(
            GraphQLString,
            args={"who": GraphQLArgument(GraphQLString)},
            resolve=lambda root, info, who=None: "Hello " + (who or "World"),
        ),
        "thrower": GraphQLField(GraphQLString, resolve=_resolve_thrower),
        "nonNullThrower": GraphQLField(GraphQLNonNull(GraphQLString), resolve=_resolve_thrower),
        "asyncTest": GraphQLField(GraphQLString, resolve=_resolve_async_test),
        "greeting": GraphQLField(GraphQLString, resolve=_resolve_greeting),
        "echo": GraphQLField(GraphQLString),
    },
)

MutationRootType = GraphQLObjectType(
    name="MutationRoot",
    fields={
        "writeTest": GraphQLField(QueryRootType, resolve=lambda root, info: {}),
    },
)

SCHEMA = GraphQLSchema(query=QueryRootType, mutation=MutationRootType)


def make_request(
    method: str = "GET",
    query_string: str = "",
    headers: Optional[Mapping[str, str]] = None,
    body: bytes = b"",
) -> IncomingRequest:
    """Build an IncomingRequest for tests."""
    return IncomingRequest(
        method=method,
        headers=dict(headers or {}),
        body=body,
        query_string=query_string,
    )


def json_post(body: Any, **headers: str) -> IncomingRequest:
    """POST request with an application/json body."""
    return make_request(
        "POST",
        headers={"content-type": "application/json", **headers},
        body=json.dumps(body).encode(),
    )


@pytest.fixture
def schema() -> GraphQLSchema:
    return SCHEMA


@pytest.fixture
def config(schema: GraphQLSchema) -> HandlerConfig:
    return HandlerConfig(schema=schema)


@pytest.fixture
def handler(config: HandlerConfig) -> GraphQLHttpHandler:
    return GraphQLHttpHandler(config)


@pytest.fixture
def settings() -> Settings:
    return Settings(path="/graphql", playground=False, cors_origins=[])


@pytest.fixture
def app(config: HandlerConfig, settings: Settings):
    return create_app(config, settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
