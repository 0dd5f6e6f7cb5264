"""HTTP helper for fetching the tree document with retry logic."""

from __future__ import annotations

import asyncio
from typing import Final, Mapping

import httpx

from oncotree2graph.config import (
    ONCOTREE2GRAPH_FETCH_BACKOFF_S,
    ONCOTREE2GRAPH_FETCH_MAX_RETRIES,
    ONCOTREE2GRAPH_FETCH_TIMEOUT_S,
    ONCOTREE2GRAPH_USER_AGENT,
)
from oncotree2graph.exceptions import FetchError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    params: Mapping[str, str] | None = None,
    not_found_message: str | None = None,
) -> bytes:
    """GET ``url`` and return the raw body, retrying transient failures.

    Retryable statuses and transport errors back off exponentially. A 404 is
    final and is not retried.

    Raises:
        FetchError: On 404, or when every attempt failed.
    """
    last_exc: Exception | None = None

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(ONCOTREE2GRAPH_FETCH_TIMEOUT_S),
        headers={"User-Agent": ONCOTREE2GRAPH_USER_AGENT, "Accept": "application/json"},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as client:
        for attempt in range(ONCOTREE2GRAPH_FETCH_MAX_RETRIES + 1):
            try:
                response = await client.get(url, params=params)
            except httpx.RequestError as exc:
                last_exc = exc
            else:
                if response.status_code == 404:
                    raise FetchError(not_found_message or f"Resource not found at {url}")
                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                elif response.is_success:
                    return response.content
                else:
                    # other 4xx will not improve on retry
                    raise FetchError(f"HTTP {response.status_code} from {url}")

            if attempt < ONCOTREE2GRAPH_FETCH_MAX_RETRIES:
                await asyncio.sleep(ONCOTREE2GRAPH_FETCH_BACKOFF_S * (2**attempt))

    raise FetchError(f"Failed to fetch {url}: {last_exc}")
