"""Ingestion pipeline for OncoTree JSON -> ontology graph."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

import networkx as nx

from oncotree2graph.builder import build_graph
from oncotree2graph.colors import apply_color_mapping
from oncotree2graph.config import ONCOTREE2GRAPH_DEFAULT_VERSION
from oncotree2graph.document import TreeDocument
from oncotree2graph.fetch import fetch_oncotree
from oncotree2graph.graph import assemble_graph, save_graph
from oncotree2graph.output_formatter import format_summary, format_tree
from oncotree2graph.schemas import IngestionResult
from oncotree2graph.tables import GraphBuildResult

logger = logging.getLogger(__name__)


@dataclass
class BuildOptions:
    """Options for building the ontology graph.

    Attributes:
        version: OncoTree release to fetch.
        url: Endpoint override for the tree API.
        use_cache: If True, reuse a fresh cached document.
        output_path: If set, write the assembled graph as node-link JSON here.
        map_colors: If True, attach renderer colors to graph nodes.
    """

    version: str | None = ONCOTREE2GRAPH_DEFAULT_VERSION
    url: str | None = None
    use_cache: bool = True
    output_path: Path | None = None
    map_colors: bool = True


def build_from_bytes(raw: bytes | str) -> GraphBuildResult:
    """Parse a raw tree document and build its edge list and node table."""
    return build_graph(TreeDocument.from_json(raw))


async def ingest_oncotree(
    options: BuildOptions | None = None,
    *,
    raw: bytes | None = None,
) -> tuple[IngestionResult, nx.DiGraph]:
    """Fetch, flatten and assemble the OncoTree ontology graph.

    Args:
        options: Build options. Uses defaults if None.
        raw: Pre-fetched document bytes. When given, nothing is fetched.

    Returns:
        Tuple of (result, graph).

    Raises:
        FetchError: If the document cannot be fetched.
        MalformedDocumentError: If the document is not a well-formed tree.
        DuplicateCodeError: If two nodes share a code.
    """
    opts = options or BuildOptions()

    if raw is None:
        raw = await fetch_oncotree(
            version=opts.version, url=opts.url, use_cache=opts.use_cache
        )

    document = TreeDocument.from_json(raw)
    result = build_graph(document)
    graph = assemble_graph(result)

    unmapped: list[str] = []
    if opts.map_colors:
        unmapped = apply_color_mapping(graph)

    if opts.output_path is not None:
        await asyncio.to_thread(save_graph, graph, opts.output_path)

    ingestion = IngestionResult(
        summary=format_summary(result, version=opts.version),
        tree=format_tree(document),
        node_count=len(result.nodes),
        edge_count=len(result.edges),
        unmapped_colors=unmapped,
    )
    return ingestion, graph
