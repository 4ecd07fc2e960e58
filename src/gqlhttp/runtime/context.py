"""
Request context passed to the response hook.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.media_types import MediaType
from ..core.types import GraphQLParameters, IncomingRequest
from .executor import ExecutionOutcome


@dataclass(frozen=True)
class RequestContext:
    """
    Everything known about a request once its response has been decided.

    Contains:
    - request: The inbound request
    - media_type: Negotiated response media type
    - params: Extracted parameters (None when validation failed)
    - outcome: Execution outcome (None when execution did not run)
    - context_value: Context that was handed to resolvers
    """
    request: IncomingRequest
    media_type: MediaType
    params: Optional[GraphQLParameters] = None
    outcome: Optional[ExecutionOutcome] = None
    context_value: Any = None
