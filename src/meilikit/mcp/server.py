"""Meilikit MCP server entrypoint using FastMCP.

Exposes document, task and index operations of a Meilisearch server as tools.
Run with:
  - meilikit-mcp
  - or: python -m meilikit.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

import logging
from typing import Optional

from fastmcp import FastMCP

from meilikit.config import Settings, load_settings
from meilikit.log import configure_logging
from meilikit.mcp.tools import (
    register_document_tools,
    register_index_tools,
    register_task_tools,
)

logger = logging.getLogger(__name__)


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("Meilikit MCP Server")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool (does not contact Meilisearch)."""
    return "ok"


# ----- Entrypoint -----

def main() -> None:
    """Initialize state and run the MCP server."""
    global _state
    settings = load_settings()
    configure_logging(settings.app.log_level)
    _state = AppState(settings)
    logger.info("Using Meilisearch at %s", settings.meilisearch.host)
    # Register tools
    register_document_tools(mcp, get_state=lambda: _state)
    register_task_tools(mcp, get_state=lambda: _state)
    register_index_tools(mcp, get_state=lambda: _state)
    # Choose transport based on configuration: stdio (default), http, or sse
    transport = settings.app.transport
    if transport in ("http", "sse"):
        mcp.run(transport=transport, host=settings.app.host, port=settings.app.port)
    else:
        mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
