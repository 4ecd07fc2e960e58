"""
gqlhttp CLI - Command line tools for serving GraphQL schemas.
"""

from __future__ import annotations

from .main import app, main

__all__ = ["main", "app"]
