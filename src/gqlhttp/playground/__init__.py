"""
GraphQL Playground - interactive query editor.

Loads the graphql-playground-react bundle from a CDN.

Usage:
    from gqlhttp.playground import get_playground_html

    html = get_playground_html(endpoint="/graphql")
"""

from __future__ import annotations

import html
import json
from typing import Any, Optional


PLAYGROUND_VERSION = "1.7.42"
CDN_URL = "//cdn.jsdelivr.net/npm/graphql-playground-react@{version}/build"


def get_playground_html(
    *,
    endpoint: str = "/graphql",
    title: str = "GraphQL Playground",
    version: str = PLAYGROUND_VERSION,
    settings: Optional[dict[str, Any]] = None,
) -> str:
    """
    Get Playground HTML with injected configuration.

    Args:
        endpoint: URL of the GraphQL endpoint
        title: Page title
        version: graphql-playground-react version to load
        settings: Extra playground settings, e.g. {"editor.theme": "light"}

    Returns:
        HTML string
    """
    cdn = CDN_URL.format(version=version)
    config: dict[str, Any] = {"endpoint": endpoint}
    if settings:
        config["settings"] = settings

    # Keep "</script>" out of the inline script
    config_json = json.dumps(config).replace("</", "<\\/")

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="user-scalable=no, initial-scale=1.0, minimum-scale=1.0, maximum-scale=1.0, minimal-ui" />
  <title>{html.escape(title)}</title>
  <link rel="stylesheet" href="{cdn}/static/css/index.css" />
  <link rel="shortcut icon" href="{cdn}/favicon.png" />
  <script src="{cdn}/static/js/middleware.js"></script>
</head>
<body>
  <div id="root"></div>
  <script>
    window.addEventListener("load", function () {{
      GraphQLPlayground.init(document.getElementById("root"), {config_json});
    }});
  </script>
</body>
</html>
"""


__all__ = [
    "get_playground_html",
    "PLAYGROUND_VERSION",
]
