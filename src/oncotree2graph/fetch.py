"""Fetch and cache the OncoTree tumor-type tree."""

from __future__ import annotations

import logging

from oncotree2graph.cache_utils import (
    cache_dir_for,
    is_cache_fresh,
    mkdir_async,
    read_bytes_async,
    write_bytes_async,
)
from oncotree2graph.config import (
    ONCOTREE2GRAPH_API_URL,
    ONCOTREE2GRAPH_CACHE_PATH,
    ONCOTREE2GRAPH_CACHE_TTL_SECONDS,
)
from oncotree2graph.exceptions import FetchError
from oncotree2graph.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)

TREE_FILENAME = "tumor_types_tree.json"


async def fetch_oncotree(
    *,
    version: str | None = None,
    url: str | None = None,
    use_cache: bool = True,
) -> bytes:
    """Fetch the nested tumor-type tree and cache the raw response.

    The response body is stored byte-for-byte so a later build can be
    reproduced from exactly what the API returned.

    Args:
        version: OncoTree release to request. None lets the API choose.
        url: Endpoint override. Defaults to ONCOTREE2GRAPH_API_URL.
        use_cache: Whether to serve a fresh cached copy if one exists.

    Returns:
        The raw JSON document bytes.

    Raises:
        FetchError: If the request fails or returns a non-success status.
    """
    endpoint = url or ONCOTREE2GRAPH_API_URL
    cache_dir = cache_dir_for(version, ONCOTREE2GRAPH_CACHE_PATH, endpoint=endpoint)
    tree_path = cache_dir / TREE_FILENAME

    if use_cache and is_cache_fresh(tree_path, ONCOTREE2GRAPH_CACHE_TTL_SECONDS):
        logger.debug("Using cached tree document at %s", tree_path)
        return await read_bytes_async(tree_path)

    params = {"version": version} if version else None
    logger.info("Fetching tumor-type tree from %s (version=%s)", endpoint, version)

    raw = await fetch_with_retries(
        endpoint,
        params=params,
        not_found_message=f"OncoTree version {version!r} not found at {endpoint}",
    )
    if not raw:
        raise FetchError(f"Empty response body from {endpoint}")

    await mkdir_async(cache_dir, parents=True, exist_ok=True)
    await write_bytes_async(tree_path, raw)
    return raw
