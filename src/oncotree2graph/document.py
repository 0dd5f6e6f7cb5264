"""Read-only tree view over a parsed OncoTree document."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from pydantic import ValidationError

from oncotree2graph.exceptions import MalformedDocumentError
from oncotree2graph.schemas import TreeNode

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("code", "level")


class TreeDocument:
    """Expose the single root of a nested, code-keyed ontology document.

    The payload is expected to have exactly one top-level key whose value is
    the root node, e.g. ``{"TISSUE": {"code": "TISSUE", "level": 0, ...}}``.
    Nodes are validated lazily as they are materialized by ``root`` and
    ``children``.
    """

    def __init__(self, payload: Mapping[str, Any]) -> None:
        if not isinstance(payload, Mapping):
            raise MalformedDocumentError(
                f"Expected a JSON object at the top level, got {type(payload).__name__}"
            )
        self._payload = payload

    @classmethod
    def from_json(cls, raw: bytes | str) -> TreeDocument:
        """Parse a JSON document into a TreeDocument.

        Raises:
            MalformedDocumentError: If the input is not valid JSON.
        """
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedDocumentError(f"Invalid JSON document: {exc}") from exc
        return cls(payload)

    def root(self) -> TreeNode:
        """Return the single top-level node.

        Raises:
            MalformedDocumentError: If there is not exactly one top-level
                entry, or the root lacks a required field.
        """
        keys = list(self._payload)
        if len(keys) != 1:
            raise MalformedDocumentError(
                f"Expected exactly one top-level entry, found {len(keys)}: {keys[:5]}"
            )
        root = _parse_node(self._payload[keys[0]], key=keys[0])
        logger.debug("Parsed root node %s (%d children)", root.code, len(root.children))
        return root

    def children(self, node: TreeNode) -> tuple[TreeNode, ...]:
        """Return the immediate children of ``node``; empty for a leaf."""
        return tuple(
            _parse_node(payload, key=key) for key, payload in node.children.items()
        )


def _parse_node(payload: Any, *, key: str) -> TreeNode:
    if not isinstance(payload, Mapping):
        raise MalformedDocumentError(f"Node {key!r} is not an object")

    missing = [name for name in _REQUIRED_FIELDS if payload.get(name) is None]
    if missing:
        raise MalformedDocumentError(
            f"Node {key!r} is missing required field(s): {', '.join(missing)}"
        )

    children = payload.get("children")
    if children is None:
        children = {}
    elif not isinstance(children, Mapping):
        raise MalformedDocumentError(f"Node {key!r} has non-object children")

    level = payload["level"]
    # bool is an int subclass; "level": true is not a depth
    if isinstance(level, bool) or not isinstance(level, int):
        raise MalformedDocumentError(f"Node {key!r} has non-integer level: {level!r}")

    try:
        return TreeNode(
            code=payload["code"],
            name=payload.get("name") or "",
            tissue=payload.get("tissue"),
            main_type=payload.get("mainType"),
            color=payload.get("color"),
            level=level,
            children=dict(children),
        )
    except ValidationError as exc:
        raise MalformedDocumentError(f"Node {key!r} is malformed: {exc}") from exc
