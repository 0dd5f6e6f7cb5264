"""Assemble, query and persist the ontology graph."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import networkx as nx

from oncotree2graph.exceptions import GraphAssemblyError
from oncotree2graph.schemas import Edge, NodeRecord
from oncotree2graph.tables import EdgeList, GraphBuildResult, NodeTable

logger = logging.getLogger(__name__)

_NODE_FIELDS = tuple(name for name in NodeRecord.model_fields if name != "code")


def assemble_graph(result: GraphBuildResult) -> nx.DiGraph:
    """Join an edge list and node table into a directed graph.

    Every node record becomes a node keyed by its code, whether or not it
    has incident edges. Edges point from parent to child.

    Raises:
        GraphAssemblyError: If an edge endpoint has no node record.
    """
    dangling = result.dangling_codes()
    if dangling:
        raise GraphAssemblyError(
            f"Edge endpoints without node records: {', '.join(sorted(dangling))}"
        )

    graph = nx.DiGraph()
    for record in result.nodes.values():
        graph.add_node(record.code, **record.model_dump(exclude={"code"}))
    graph.add_edges_from((edge.from_code, edge.to_code) for edge in result.edges)

    logger.debug(
        "Assembled graph with %d nodes and %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def graph_to_result(graph: nx.DiGraph) -> GraphBuildResult:
    """Recover the edge list and node table from an assembled graph."""
    try:
        nodes = NodeTable(
            NodeRecord(code=code, **{name: data[name] for name in _NODE_FIELDS})
            for code, data in graph.nodes(data=True)
        )
    except KeyError as exc:
        raise GraphAssemblyError(f"Graph node is missing attribute {exc}") from exc
    edges = EdgeList(Edge(from_code=u, to_code=v) for u, v in graph.edges())
    return GraphBuildResult(edges=edges, nodes=nodes)


def find_roots(graph: nx.DiGraph) -> list[str]:
    """Codes of nodes with no parent."""
    return sorted(code for code, degree in graph.in_degree() if degree == 0)


def subtree(graph: nx.DiGraph, code: str) -> nx.DiGraph:
    """Return the subgraph rooted at ``code``, including ``code`` itself.

    Raises:
        GraphAssemblyError: If ``code`` is not in the graph.
    """
    if code not in graph:
        raise GraphAssemblyError(f"Unknown node code: {code!r}")
    members = nx.descendants(graph, code) | {code}
    return graph.subgraph(members).copy()


def save_graph(graph: nx.DiGraph, path: Path) -> Path:
    """Write ``graph`` as node-link JSON."""
    data = nx.node_link_data(graph, edges="edges")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    logger.info("Saved graph to %s", path)
    return path


def load_graph(path: Path) -> nx.DiGraph:
    """Read a graph written by ``save_graph``."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return nx.node_link_graph(data, directed=True, edges="edges")
