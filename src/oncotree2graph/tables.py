"""Immutable edge and node collections produced by a graph build."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping

from oncotree2graph.exceptions import DuplicateCodeError
from oncotree2graph.schemas import Edge, NodeRecord


class EdgeList:
    """Ordered, duplicate-free collection of parent -> child edges."""

    __slots__ = ("_edges",)

    def __init__(self, edges: Iterable[Edge] = ()) -> None:
        # dict.fromkeys keeps first-seen order while dropping repeats
        self._edges: tuple[Edge, ...] = tuple(dict.fromkeys(edges))

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __contains__(self, edge: object) -> bool:
        return edge in self._edges

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeList):
            return NotImplemented
        return self._edges == other._edges

    def __repr__(self) -> str:
        return f"EdgeList({len(self._edges)} edges)"

    def union(self, *others: Iterable[Edge]) -> EdgeList:
        """Return a new EdgeList holding these edges followed by any new ones."""
        combined: list[Edge] = list(self._edges)
        for other in others:
            combined.extend(other)
        return EdgeList(combined)

    def as_set(self) -> frozenset[Edge]:
        return frozenset(self._edges)

    def endpoints(self) -> set[str]:
        """Codes appearing on either end of any edge."""
        codes: set[str] = set()
        for edge in self._edges:
            codes.add(edge.from_code)
            codes.add(edge.to_code)
        return codes

    def to_rows(self) -> list[dict[str, str]]:
        return [edge.model_dump(by_alias=True) for edge in self._edges]


class NodeTable(Mapping[str, NodeRecord]):
    """Read-only mapping from node code to its record, in insertion order."""

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[NodeRecord] = ()) -> None:
        self._records: dict[str, NodeRecord] = {}
        for record in records:
            if record.code in self._records:
                raise DuplicateCodeError(record.code)
            self._records[record.code] = record

    def __getitem__(self, code: str) -> NodeRecord:
        return self._records[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"NodeTable({len(self._records)} records)"

    def records(self) -> tuple[NodeRecord, ...]:
        return tuple(self._records.values())

    def codes(self) -> set[str]:
        return set(self._records)

    def as_set(self) -> frozenset[NodeRecord]:
        return frozenset(self._records.values())

    def to_rows(self) -> list[dict[str, str | int]]:
        return [record.model_dump() for record in self._records.values()]


@dataclass(frozen=True)
class GraphBuildResult:
    """Edge list and node table from one traversal.

    Attributes:
        edges: Every parent -> child edge discovered.
        nodes: One record per visited node.
    """

    edges: EdgeList
    nodes: NodeTable

    def structurally_equal(self, other: GraphBuildResult) -> bool:
        """Compare with another result, ignoring row order."""
        return (
            self.edges.as_set() == other.edges.as_set()
            and self.nodes.as_set() == other.nodes.as_set()
        )

    def dangling_codes(self) -> set[str]:
        """Edge endpoints that have no node record."""
        return self.edges.endpoints() - self.nodes.codes()
