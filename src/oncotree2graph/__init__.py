"""oncotree2graph: flatten the OncoTree ontology into a directed graph."""

from oncotree2graph.builder import GraphBuilder, build_graph, extract_record
from oncotree2graph.document import TreeDocument
from oncotree2graph.exceptions import (
    DuplicateCodeError,
    FetchError,
    GraphAssemblyError,
    MalformedDocumentError,
    NoColorMappedError,
    Oncotree2graphError,
)
from oncotree2graph.graph import assemble_graph, load_graph, save_graph
from oncotree2graph.ingestion import BuildOptions, build_from_bytes, ingest_oncotree
from oncotree2graph.schemas import Edge, IngestionResult, NodeRecord, TreeNode
from oncotree2graph.tables import EdgeList, GraphBuildResult, NodeTable

__all__ = [
    "BuildOptions",
    "DuplicateCodeError",
    "Edge",
    "EdgeList",
    "FetchError",
    "GraphAssemblyError",
    "GraphBuildResult",
    "GraphBuilder",
    "IngestionResult",
    "MalformedDocumentError",
    "NoColorMappedError",
    "NodeRecord",
    "NodeTable",
    "Oncotree2graphError",
    "TreeDocument",
    "TreeNode",
    "assemble_graph",
    "build_from_bytes",
    "build_graph",
    "extract_record",
    "ingest_oncotree",
    "load_graph",
    "save_graph",
]
