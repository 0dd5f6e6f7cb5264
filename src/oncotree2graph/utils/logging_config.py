"""Logging setup shared by the command line entry point."""

from __future__ import annotations

import logging
import sys

from oncotree2graph.config import ONCOTREE2GRAPH_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Send package logs to stderr at ``level`` (env default otherwise)."""
    resolved = level or ONCOTREE2GRAPH_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    package_logger = logging.getLogger("oncotree2graph")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(resolved)
    package_logger.propagate = False

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
