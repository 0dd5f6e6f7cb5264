"""Tests for the command line entry point."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from oncotree2graph.cli import main


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from replacing handlers installed by pytest."""
    with patch("oncotree2graph.cli.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def tree_file(tmp_path: Path, sample_tree_bytes: bytes) -> Path:
    path = tmp_path / "tree.json"
    path.write_bytes(sample_tree_bytes)
    return path


def test_builds_from_local_file(tree_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "graph.json"

    with patch("oncotree2graph.ingestion.fetch_oncotree", AsyncMock()) as mock_fetch:
        exit_code = main(["--input", str(tree_file), "--output", str(output), "--tree"])

    assert exit_code == 0
    mock_fetch.assert_not_called()
    out = capsys.readouterr().out
    assert "Nodes: 7" in out
    assert "    SKIN: Skin" in out
    assert json.loads(output.read_text())["directed"] is True


def test_fetches_by_default(sample_tree_bytes: bytes, capsys: pytest.CaptureFixture[str]) -> None:
    with patch("oncotree2graph.ingestion.fetch_oncotree", AsyncMock(return_value=sample_tree_bytes)) as mock_fetch:
        exit_code = main(["--version", "oncotree_2021_11_02", "--no-cache"])

    assert exit_code == 0
    mock_fetch.assert_awaited_once_with(version="oncotree_2021_11_02", url=None, use_cache=False)
    assert "Version: oncotree_2021_11_02" in capsys.readouterr().out


def test_reports_unmapped_colors(tmp_path: Path, sample_tree: dict[str, Any], capsys: pytest.CaptureFixture[str]) -> None:
    sample_tree["TISSUE"]["children"]["BREAST"]["color"] = "Mauve"
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(sample_tree))

    assert main(["--input", str(path)]) == 0
    assert "Unmapped colors: BREAST" in capsys.readouterr().out


def test_malformed_input_exits_nonzero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "tree.json"
    path.write_text("{}")

    assert main(["--input", str(path)]) == 1
    assert "exactly one top-level entry" in capsys.readouterr().err


def test_missing_input_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--input", str(tmp_path / "missing.json")]) == 1
    assert "error:" in capsys.readouterr().err


def test_log_level_forwarded(tree_file: Path, no_logging_setup) -> None:
    """Level names are case-insensitive."""
    main(["--input", str(tree_file), "--log-level", "debug"])

    no_logging_setup.assert_called_once_with("DEBUG")


def test_unknown_log_level_is_a_usage_error(tree_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--input", str(tree_file), "--log-level", "bogus"])

    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
