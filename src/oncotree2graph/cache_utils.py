"""Cache utilities for storing fetched documents on disk."""

from __future__ import annotations

import asyncio
import hashlib
from datetime import datetime, timezone
from pathlib import Path


def is_cache_fresh(path: Path, ttl_seconds: int) -> bool:
    """Check if a cached file is still fresh based on its modification time.

    Args:
        path: Path to the cached file.
        ttl_seconds: Time-to-live in seconds. If <= 0, cache is considered
            fresh indefinitely (cache forever mode).

    Returns:
        True if the cache is fresh and usable, False otherwise.
    """
    if not path.exists():
        return False
    if ttl_seconds <= 0:
        return True
    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    age_seconds = (datetime.now(timezone.utc) - mtime).total_seconds()
    return age_seconds <= ttl_seconds


def cache_dir_for(version: str | None, base_path: Path, *, endpoint: str) -> Path:
    """Get the cache directory for an ontology release served by ``endpoint``.

    Args:
        version: OncoTree release name (e.g. "oncotree_2021_11_02"), or None
            for whatever the API serves by default.
        base_path: The base cache directory path.
        endpoint: URL the document is fetched from. Different endpoints never
            share a cache directory.

    Returns:
        Path to the cache directory for this release and endpoint.
    """
    key = (version or "default").strip().replace("/", "_").replace("\\", "_") or "default"
    digest = hashlib.sha256(endpoint.encode("utf-8")).hexdigest()[:12]
    return base_path / f"{key}__{digest}"


async def read_bytes_async(path: Path) -> bytes:
    """Read raw bytes from a file using a thread pool."""
    return await asyncio.to_thread(path.read_bytes)


async def write_bytes_async(path: Path, content: bytes) -> None:
    """Write raw bytes to a file using a thread pool."""
    await asyncio.to_thread(path.write_bytes, content)


async def mkdir_async(
    path: Path, parents: bool = False, exist_ok: bool = False
) -> None:
    """Create a directory asynchronously using a thread pool.

    Args:
        path: Path to the directory to create.
        parents: If True, create parent directories as needed.
        exist_ok: If True, don't raise an error if directory exists.
    """
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)
