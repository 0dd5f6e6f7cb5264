"""Test setup for oncotree2graph."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


def make_node(
    code: str,
    level: int,
    *,
    name: str | None = None,
    tissue: str | None = None,
    main_type: str | None = None,
    color: str | None = None,
    children: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build one node payload in the shape the tree API returns."""
    return {
        "code": code,
        "name": name if name is not None else f"{code} name",
        "tissue": tissue,
        "mainType": main_type,
        "color": color,
        "level": level,
        "parent": None,
        "children": {child["code"]: child for child in children or []},
    }


@pytest.fixture
def sample_tree() -> dict[str, Any]:
    """A small OncoTree-shaped document with two tissues."""
    return {
        "TISSUE": make_node(
            "TISSUE",
            0,
            name="Tissue",
            children=[
                make_node(
                    "SKIN",
                    1,
                    name="Skin",
                    tissue="Skin",
                    main_type="Melanoma",
                    color="Black",
                    children=[
                        make_node("MEL", 2, name="Melanoma", tissue="Skin", main_type="Melanoma", color="Black"),
                        make_node("SCCE", 2, name="Squamous", tissue="Skin", main_type="Skin Cancer", color="black"),
                    ],
                ),
                make_node(
                    "BREAST",
                    1,
                    name="Breast",
                    tissue="Breast",
                    main_type="Breast Cancer",
                    color="HotPink",
                    children=[
                        make_node(
                            "IDC",
                            2,
                            name="Invasive Ductal",
                            tissue="Breast",
                            main_type="Breast Cancer",
                            color="HotPink",
                            children=[
                                make_node("MDLC", 3, tissue="Breast", main_type="Breast Cancer", color="HotPink"),
                            ],
                        ),
                    ],
                ),
            ],
        )
    }


@pytest.fixture
def sample_tree_bytes(sample_tree: dict[str, Any]) -> bytes:
    return json.dumps(sample_tree).encode("utf-8")
