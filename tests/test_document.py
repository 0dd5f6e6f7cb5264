"""Tests for the TreeDocument parsing adapter."""

from __future__ import annotations

import json
from typing import Any

import pytest
from conftest import make_node

from oncotree2graph.document import TreeDocument
from oncotree2graph.exceptions import MalformedDocumentError


class TestFromJson:
    """Tests for TreeDocument.from_json."""

    def test_parses_bytes(self, sample_tree_bytes: bytes) -> None:
        document = TreeDocument.from_json(sample_tree_bytes)

        assert document.root().code == "TISSUE"

    def test_parses_str(self, sample_tree: dict[str, Any]) -> None:
        document = TreeDocument.from_json(json.dumps(sample_tree))

        assert document.root().level == 0

    def test_rejects_invalid_json(self) -> None:
        with pytest.raises(MalformedDocumentError, match="Invalid JSON"):
            TreeDocument.from_json(b"{not json")

    def test_rejects_top_level_list(self) -> None:
        with pytest.raises(MalformedDocumentError, match="JSON object"):
            TreeDocument.from_json(b"[]")


class TestRoot:
    """Tests for TreeDocument.root."""

    def test_maps_fields(self) -> None:
        payload = make_node("A", 1, name="Alpha", tissue="Skin", main_type="Melanoma", color="Black")

        root = TreeDocument({"A": payload}).root()

        assert root.code == "A"
        assert root.name == "Alpha"
        assert root.tissue == "Skin"
        assert root.main_type == "Melanoma"
        assert root.color == "Black"
        assert root.is_leaf

    def test_nulls_become_none(self) -> None:
        root = TreeDocument({"R": make_node("R", 0)}).root()

        assert root.tissue is None
        assert root.main_type is None
        assert root.color is None

    @pytest.mark.parametrize("payload", [{}, {"A": make_node("A", 0), "B": make_node("B", 0)}])
    def test_requires_exactly_one_entry(self, payload: dict[str, Any]) -> None:
        with pytest.raises(MalformedDocumentError, match="exactly one top-level entry"):
            TreeDocument(payload).root()

    @pytest.mark.parametrize("field", ["code", "level"])
    def test_missing_required_field(self, field: str) -> None:
        payload = make_node("R", 0)
        del payload[field]

        with pytest.raises(MalformedDocumentError, match=field):
            TreeDocument({"R": payload}).root()

    def test_non_integer_level(self) -> None:
        payload = make_node("R", 0)
        payload["level"] = "0"

        with pytest.raises(MalformedDocumentError, match="non-integer level"):
            TreeDocument({"R": payload}).root()

    def test_non_object_children(self) -> None:
        payload = make_node("R", 0)
        payload["children"] = ["A"]

        with pytest.raises(MalformedDocumentError, match="non-object children"):
            TreeDocument({"R": payload}).root()

    def test_non_string_code(self) -> None:
        payload = make_node("R", 0)
        payload["code"] = 12

        with pytest.raises(MalformedDocumentError, match="malformed"):
            TreeDocument({"R": payload}).root()


class TestChildren:
    """Tests for TreeDocument.children."""

    def test_returns_child_views(self, sample_tree: dict[str, Any]) -> None:
        document = TreeDocument(sample_tree)

        children = document.children(document.root())

        assert {child.code for child in children} == {"SKIN", "BREAST"}
        assert all(child.level == 1 for child in children)

    def test_leaf_has_no_children(self) -> None:
        document = TreeDocument({"R": make_node("R", 0)})

        assert document.children(document.root()) == ()

    def test_non_object_child(self) -> None:
        payload = make_node("R", 0)
        payload["children"] = {"A": "not a node"}
        document = TreeDocument({"R": payload})

        with pytest.raises(MalformedDocumentError, match="not an object"):
            document.children(document.root())
