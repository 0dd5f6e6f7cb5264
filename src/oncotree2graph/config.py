"""Local configuration for oncotree2graph."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_API_URL = "https://oncotree.mskcc.org/api/tumorTypes/tree"
DEFAULT_VERSION = "oncotree_latest_stable"
DEFAULT_CACHE_DIR = ".oncotree2graph_cache"
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "oncotree2graph/0.1"
DEFAULT_LOG_LEVEL = "INFO"

ONCOTREE2GRAPH_API_URL = os.getenv("ONCOTREE2GRAPH_API_URL", DEFAULT_API_URL)
ONCOTREE2GRAPH_DEFAULT_VERSION = os.getenv("ONCOTREE2GRAPH_DEFAULT_VERSION", DEFAULT_VERSION)
# Raw tree documents are stored here verbatim, one directory per version.
ONCOTREE2GRAPH_CACHE_PATH = Path(os.getenv("ONCOTREE2GRAPH_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
ONCOTREE2GRAPH_CACHE_TTL_SECONDS = int(os.getenv("ONCOTREE2GRAPH_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
ONCOTREE2GRAPH_FETCH_TIMEOUT_S = float(os.getenv("ONCOTREE2GRAPH_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
ONCOTREE2GRAPH_FETCH_MAX_RETRIES = int(os.getenv("ONCOTREE2GRAPH_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
ONCOTREE2GRAPH_FETCH_BACKOFF_S = float(os.getenv("ONCOTREE2GRAPH_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
ONCOTREE2GRAPH_USER_AGENT = os.getenv("ONCOTREE2GRAPH_USER_AGENT", DEFAULT_USER_AGENT)
ONCOTREE2GRAPH_LOG_LEVEL = os.getenv("ONCOTREE2GRAPH_LOG_LEVEL", DEFAULT_LOG_LEVEL)
