"""
Media type parsing and response content negotiation.

Two response media types are supported:
- application/graphql+json
- application/json

Wildcards (`*/*`, `application/*`) resolve to application/json unless the
client refuses it with q=0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import NotAcceptableError

logger = logging.getLogger(__name__)


class MediaType(str, Enum):
    """Response media types the server can produce."""
    GRAPHQL_JSON = "application/graphql+json"
    JSON = "application/json"

    @property
    def content_type(self) -> str:
        """Value for the outbound Content-Type header."""
        return f"{self.value}; charset=UTF-8"


# Media ranges recognized in Accept, mapped to what they resolve to
ACCEPT_MAPPING: dict[str, MediaType] = {
    "application/graphql+json": MediaType.GRAPHQL_JSON,
    "application/json": MediaType.JSON,
    "application/*": MediaType.JSON,
    "*/*": MediaType.JSON,
}

MEDIA_TYPES_BY_VALUE: dict[str, MediaType] = {media_type.value: media_type for media_type in MediaType}

# Order in which a wildcard range picks a concrete type
WILDCARD_PREFERENCE = (MediaType.JSON, MediaType.GRAPHQL_JSON)

# Request body media types accepted on POST
REQUEST_MEDIA_TYPES = frozenset({MediaType.GRAPHQL_JSON.value, MediaType.JSON.value})

NOT_ACCEPTABLE_MESSAGE = (
    'The media type is not acceptable. '
    'Use "application/graphql+json" or "application/json".'
)


@dataclass(frozen=True)
class ParsedMediaType:
    """A media type with its parameters, e.g. `application/json; charset=utf-8`."""
    essence: str
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AcceptEntry:
    """Single media range from an Accept header."""
    media_range: str
    quality: float
    index: int


def parse_media_type(value: str) -> ParsedMediaType:
    """
    Parse a Content-Type style value.

    Type and parameter names are lowercased; quoted parameter values are
    unquoted.

    Examples:
        "application/json; charset=UTF-8"
        -> ParsedMediaType("application/json", {"charset": "UTF-8"})
    """
    parts = value.split(";")
    essence = parts[0].strip().lower()
    params: dict[str, str] = {}
    for part in parts[1:]:
        if "=" not in part:
            continue
        key, _, raw = part.partition("=")
        key = key.strip().lower()
        raw = raw.strip()
        if len(raw) >= 2 and raw[0] == raw[-1] == '"':
            raw = raw[1:-1]
        if key:
            params[key] = raw
    return ParsedMediaType(essence=essence, params=params)


def _parse_quality(raw: Optional[str]) -> float:
    if raw is None:
        return 1.0
    try:
        quality = float(raw)
    except ValueError:
        return 0.0
    return min(max(quality, 0.0), 1.0)


def parse_accept(header: Optional[str]) -> list[AcceptEntry]:
    """
    Parse an Accept header into entries in declaration order.

    A missing or blank header is equivalent to `*/*`.
    """
    if header is None or not header.strip():
        return [AcceptEntry(media_range="*/*", quality=1.0, index=0)]

    entries: list[AcceptEntry] = []
    for raw in header.split(","):
        if not raw.strip():
            continue
        parsed = parse_media_type(raw)
        entries.append(
            AcceptEntry(
                media_range=parsed.essence,
                quality=_parse_quality(parsed.params.get("q")),
                index=len(entries),
            )
        )
    return entries


def _resolve_range(media_range: str, refused: set[MediaType]) -> Optional[MediaType]:
    resolved = ACCEPT_MAPPING.get(media_range)
    if resolved is None or media_range in MEDIA_TYPES_BY_VALUE:
        return resolved
    # Wildcard: skip types the client refused explicitly with q=0
    for media_type in WILDCARD_PREFERENCE:
        if media_type not in refused:
            return media_type
    return None


def negotiate(accept_header: Optional[str]) -> MediaType:
    """
    Pick the response media type for an Accept header.

    Candidates are ranked by quality; equal quality falls back to
    declaration order. A wildcard never resolves to a type listed with q=0.

    Raises:
        NotAcceptableError: If no supported type is accepted with q > 0
    """
    entries = parse_accept(accept_header)
    refused = {
        MEDIA_TYPES_BY_VALUE[entry.media_range]
        for entry in entries
        if entry.quality == 0 and entry.media_range in MEDIA_TYPES_BY_VALUE
    }

    best: Optional[tuple[float, int, MediaType]] = None
    for entry in entries:
        if entry.quality <= 0:
            continue
        media_type = _resolve_range(entry.media_range, refused)
        if media_type is None:
            continue
        rank = (-entry.quality, entry.index, media_type)
        if best is None or rank[:2] < best[:2]:
            best = rank

    if best is None:
        logger.debug(f"Accept header not negotiable: {accept_header!r}")
        raise NotAcceptableError(NOT_ACCEPTABLE_MESSAGE)
    return best[2]


def prefers_html(accept_header: Optional[str]) -> bool:
    """Check whether text/html outranks every JSON type in the Accept header."""
    entries = [e for e in parse_accept(accept_header) if e.quality > 0]
    html = [e for e in entries if e.media_range == "text/html"]
    if not html:
        return False
    best_html = min(html, key=lambda e: (-e.quality, e.index))
    for entry in entries:
        if entry.media_range in ("application/graphql+json", "application/json"):
            if (-entry.quality, entry.index) < (-best_html.quality, best_html.index):
                return False
    return True
