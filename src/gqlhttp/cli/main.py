#!/usr/bin/env python3
"""
gqlhttp CLI - Main entry point.

Usage:
    gqlhttp serve app.schema:schema            # Serve a schema over HTTP
    gqlhttp serve app.schema:config --playground
    gqlhttp settings --config gqlhttp.yaml     # Show effective settings
"""

from __future__ import annotations

import argparse
import importlib
import os
import sys
from typing import List, Optional

import yaml
from graphql import GraphQLSchema

from .. import __version__
from ..config import HandlerConfig, Settings, load_settings


def load_target(target: str) -> HandlerConfig:
    """
    Import a schema or handler config from a "module:attribute" string.

    Raises:
        ValueError: Target is not in "module:attribute" form
        TypeError: Attribute is neither a GraphQLSchema nor a HandlerConfig
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise ValueError(f"Expected 'module:attribute', got '{target}'")

    # Allow importing modules from the current directory
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())

    module = importlib.import_module(module_name)
    obj = getattr(module, attribute)

    if isinstance(obj, HandlerConfig):
        return obj
    if isinstance(obj, GraphQLSchema):
        return HandlerConfig(schema=obj)
    raise TypeError(f"'{target}' is a {type(obj).__name__}, expected GraphQLSchema or HandlerConfig")


def _settings_from_args(args: argparse.Namespace) -> Settings:
    return load_settings(
        config_file=args.config,
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
        path=getattr(args, "path", None),
        playground=True if getattr(args, "playground", False) else None,
    )


def cmd_serve(args: argparse.Namespace) -> int:
    """Serve a GraphQL schema."""
    import uvicorn

    from ..app import create_app

    try:
        config = load_target(args.target)
        settings = _settings_from_args(args)
    except (ImportError, AttributeError, TypeError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1

    app = create_app(config, settings)
    print(f"Serving GraphQL at http://{settings.host}:{settings.port}{settings.path}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
    return 0


def cmd_settings(args: argparse.Namespace) -> int:
    """Print effective settings as YAML."""
    try:
        settings = _settings_from_args(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(yaml.dump(settings.model_dump(), default_flow_style=False, sort_keys=False), end="")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="gqlhttp",
        description="gqlhttp - GraphQL over HTTP server",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Serve a GraphQL schema")
    serve_parser.add_argument("target", help="Schema or HandlerConfig as module:attribute")
    serve_parser.add_argument("--config", "-c", help="YAML settings file")
    serve_parser.add_argument("--host", help="Bind host")
    serve_parser.add_argument("--port", "-p", type=int, help="Bind port")
    serve_parser.add_argument("--path", help="Endpoint path (default: /graphql)")
    serve_parser.add_argument("--playground", action="store_true", help="Enable GraphQL Playground")

    # settings
    settings_parser = subparsers.add_parser("settings", help="Show effective settings")
    settings_parser.add_argument("--config", "-c", help="YAML settings file")
    settings_parser.add_argument("--host", help="Bind host")
    settings_parser.add_argument("--port", "-p", type=int, help="Bind port")
    settings_parser.add_argument("--path", help="Endpoint path (default: /graphql)")

    return parser


def app(args: Optional[List[str]] = None) -> int:
    """Main CLI application."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        return 0

    commands = {
        "serve": cmd_serve,
        "settings": cmd_settings,
    }

    handler = commands.get(parsed.command)
    if handler:
        return handler(parsed)

    parser.print_help()
    return 1


def main() -> None:
    """Entry point for CLI."""
    sys.exit(app())


if __name__ == "__main__":
    main()
