"""Format build results into summary and tree outputs."""

from __future__ import annotations

from oncotree2graph.document import TreeDocument
from oncotree2graph.schemas import DEFAULT_TISSUE, TreeNode
from oncotree2graph.tables import GraphBuildResult


def format_summary(result: GraphBuildResult, *, version: str | None = None) -> str:
    """Create a short human-readable summary of a build."""
    records = result.nodes.records()
    roots = sorted(result.nodes.codes() - {edge.to_code for edge in result.edges})
    tissues = {r.tissue for r in records if r.tissue != DEFAULT_TISSUE}

    summary_lines = [f"Version: {version or 'default'}"]
    if roots:
        summary_lines.append(f"Root: {', '.join(roots)}")
    summary_lines.append(f"Nodes: {len(result.nodes)}")
    summary_lines.append(f"Edges: {len(result.edges)}")
    if records:
        summary_lines.append(f"Max level: {max(r.level for r in records)}")
    summary_lines.append(f"Tissues: {len(tissues)}")
    return "\n".join(summary_lines)


def format_tree(document: TreeDocument) -> str:
    """Render the document as an indented ``CODE: name`` tree."""
    return "Tumor types:\n" + _create_tree(document, document.root())


def _create_tree(document: TreeDocument, node: TreeNode, indent: int = 0) -> str:
    line = " " * (indent * 4) + (f"{node.code}: {node.name}" if node.name else node.code)
    lines = [line]
    for child in sorted(document.children(node), key=lambda c: c.code):
        lines.append(_create_tree(document, child, indent + 1))
    return "\n".join(lines)
