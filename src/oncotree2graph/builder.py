"""Flatten a nested ontology tree into an edge list and a node table."""

from __future__ import annotations

import logging

from oncotree2graph.document import TreeDocument
from oncotree2graph.exceptions import DuplicateCodeError
from oncotree2graph.schemas import (
    DEFAULT_COLOR,
    DEFAULT_MAIN_TYPE,
    DEFAULT_TISSUE,
    Edge,
    NodeRecord,
    TreeNode,
)
from oncotree2graph.tables import EdgeList, GraphBuildResult, NodeTable

logger = logging.getLogger(__name__)


def extract_record(node: TreeNode) -> NodeRecord:
    """Build the node record for ``node``, substituting defaults for absent fields."""
    return NodeRecord(
        code=node.code,
        description=node.name,
        tissue=node.tissue if node.tissue is not None else DEFAULT_TISSUE,
        main_type=node.main_type if node.main_type is not None else DEFAULT_MAIN_TYPE,
        color=node.color if node.color is not None else DEFAULT_COLOR,
        level=node.level,
    )


class _NodeTableBuilder:
    """Per-build accumulator of node records; rejects repeated codes."""

    def __init__(self) -> None:
        self._records: dict[str, NodeRecord] = {}

    def add(self, record: NodeRecord) -> None:
        if record.code in self._records:
            raise DuplicateCodeError(record.code)
        self._records[record.code] = record

    def freeze(self) -> NodeTable:
        return NodeTable(self._records.values())


class GraphBuilder:
    """Depth-first, pre-order traversal engine over a TreeDocument.

    Edges are combined on return: every recursive call hands back the full
    edge contribution of its subtree, and the caller unions it with its own.
    Node records go into an accumulator owned by a single ``build`` call, so
    repeated or concurrent builds never share state.
    """

    def __init__(self, document: TreeDocument) -> None:
        self.document = document

    def build(self, root: TreeNode) -> GraphBuildResult:
        """Traverse the tree under ``root``.

        Args:
            root: Node to start from; normally ``document.root()``.

        Returns:
            GraphBuildResult with one record per node and one edge per
            parent/child pair.

        Raises:
            DuplicateCodeError: If two nodes share a code.
            MalformedDocumentError: If any visited node is malformed.
        """
        table = _NodeTableBuilder()
        edges = self._visit(root, EdgeList(), table)
        nodes = table.freeze()

        logger.info(
            "Built ontology graph from %s: %d nodes, %d edges",
            root.code,
            len(nodes),
            len(edges),
        )
        return GraphBuildResult(edges=edges, nodes=nodes)

    def _visit(
        self, node: TreeNode, inherited: EdgeList, table: _NodeTableBuilder
    ) -> EdgeList:
        table.add(extract_record(node))

        children = self.document.children(node)
        if not children:
            return inherited

        logger.debug("Visiting %s with %d children", node.code, len(children))
        own = [Edge(from_code=node.code, to_code=child.code) for child in children]
        subtrees = [self._visit(child, EdgeList(), table) for child in children]
        return inherited.union(own, *subtrees)


def build_graph(document: TreeDocument) -> GraphBuildResult:
    """Build the edge list and node table for a whole document."""
    return GraphBuilder(document).build(document.root())
