"""
Runtime module - GraphQL execution and request context.
"""

from __future__ import annotations

from .context import RequestContext
from .executor import ExecutionOutcome, execute_graphql

__all__ = [
    "ExecutionOutcome",
    "RequestContext",
    "execute_graphql",
]
