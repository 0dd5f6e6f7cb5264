"""Ingestion output model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class IngestionResult(BaseModel):
    """Final ingestion output."""

    summary: str
    tree: str
    node_count: int
    edge_count: int
    unmapped_colors: list[str] = Field(default_factory=list)
