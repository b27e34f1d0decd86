"""Logging setup for meilikit entrypoints.

Library modules only create loggers via ``logging.getLogger(__name__)``;
configuring handlers is left to the application, or to ``configure_logging``
when running the bundled MCP server.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger to write to stderr.

    stdout is reserved for the MCP stdio transport, so records never go there.
    Safe to call multiple times.
    """
    log_level = (level or "INFO").upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr, force=True)
    # httpx logs every request at INFO; keep it quiet unless we are debugging
    if log_level != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
