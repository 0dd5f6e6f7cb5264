"""Shared schemas for oncotree2graph."""

from oncotree2graph.schemas.ingestion import IngestionResult
from oncotree2graph.schemas.records import (
    DEFAULT_COLOR,
    DEFAULT_MAIN_TYPE,
    DEFAULT_TISSUE,
    Edge,
    NodeRecord,
)
from oncotree2graph.schemas.tree import TreeNode

__all__ = [
    "DEFAULT_COLOR",
    "DEFAULT_MAIN_TYPE",
    "DEFAULT_TISSUE",
    "Edge",
    "IngestionResult",
    "NodeRecord",
    "TreeNode",
]
