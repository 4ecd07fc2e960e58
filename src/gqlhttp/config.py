"""
Configuration for gqlhttp.

- HandlerConfig: per-invocation execution settings (schema, resolvers, hooks)
- Settings: server settings loaded from environment variables or YAML
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, List, Optional, Union

import yaml
from graphql import GraphQLFieldResolver, GraphQLSchema, GraphQLTypeResolver
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.types import IncomingRequest, ResponseDecision
from .runtime.context import RequestContext


ContextFactory = Callable[[IncomingRequest], Union[Any, Awaitable[Any]]]
ResponseHook = Callable[[ResponseDecision, RequestContext], ResponseDecision]


@dataclass
class HandlerConfig:
    """
    Configuration for a GraphQL-over-HTTP handler.

    Args:
        schema: Executable GraphQL schema
        root_value: Root value for top-level resolvers
        context_value: Static context passed to resolvers
        context_factory: Builds the context per request (sync or async);
            takes precedence over context_value
        field_resolver: Custom default field resolver
        type_resolver: Custom default type resolver
        response_hook: Pure function applied once to the final response
        playground: Serve GraphQL Playground to browsers on GET
        playground_title: Page title for the playground
    """
    schema: GraphQLSchema
    root_value: Any = None
    context_value: Any = None
    context_factory: Optional[ContextFactory] = None
    field_resolver: Optional[GraphQLFieldResolver] = None
    type_resolver: Optional[GraphQLTypeResolver] = None
    response_hook: Optional[ResponseHook] = None
    playground: bool = False
    playground_title: str = "GraphQL Playground"


class Settings(BaseSettings):
    """Server settings loaded from environment variables (GQLHTTP_*)."""

    model_config = SettingsConfigDict(
        env_prefix="GQLHTTP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Endpoint
    path: str = "/graphql"
    playground: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"
    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]


def load_settings(config_file: Path | str | None = None, **overrides: Any) -> Settings:
    """
    Load settings from a YAML file, environment and explicit overrides.

    Values from the file take precedence over the environment; keyword
    overrides that are not None take precedence over both.
    """
    data: dict[str, Any] = {}
    if config_file is not None:
        config_file = Path(config_file)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        data = yaml.safe_load(config_file.read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_file}")

    data.update({key: value for key, value in overrides.items() if value is not None})
    return Settings(**data)
