"""
Hello world GraphQL endpoint.

Usage:
    uvicorn example.hello.main:app --reload
    # or
    gqlhttp serve example.hello.main:config --playground

    curl 'http://127.0.0.1:8000/graphql?query=%7Btest%7D'
"""

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from gqlhttp import HandlerConfig, Settings, create_app

QueryRoot = GraphQLObjectType(
    name="QueryRoot",
    fields={
        "test": GraphQLField(
            GraphQLString,
            args={"who": GraphQLArgument(GraphQLString)},
            resolve=lambda root, info, who=None: "Hello " + (who or "World"),
        ),
    },
)

schema = GraphQLSchema(query=QueryRoot)

config = HandlerConfig(schema=schema, playground=True)

app = create_app(config, Settings())
