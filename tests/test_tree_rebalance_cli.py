"""Tests for the ``tree_rebalance`` CLI demonstration script."""

from __future__ import annotations

from pathlib import Path

import tree_rebalance


def test_cli_outputs_expected_demo_lines(capsys) -> None:
    """Ensure the CLI emits the documented demonstration output."""

    assert tree_rebalance.main([]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Original tree (height 7, balanced? No)"
    assert lines[1] == "In order: 1 2 3 4 5 6 7"
    assert lines[2:9] == [" " * (4 * level) + str(level) for level in range(7, 0, -1)]
    assert lines[9] == ""
    assert lines[10] == "Rebalanced tree (height 3, balanced? Yes)"
    assert lines[11] == "In order: 1 2 3 4 5 6 7"
    assert lines[12:] == [
        "            7",
        "        6",
        "            5",
        "    4",
        "            3",
        "        2",
        "            1",
    ]


def test_cli_skips_duplicate_values() -> None:
    lines: list[str] = []
    assert tree_rebalance.main(["3", "1", "3"], out=lines.append) == 0
    assert lines[1] == "In order: 1 3"


def test_build_tree_counts_outcomes() -> None:
    tree, summary = tree_rebalance.build_tree([2, 1, 2, 3, 1])
    assert list(tree) == [1, 2, 3]
    assert summary == tree_rebalance.InsertSummary(inserted=3, duplicates=2)


def test_cli_applies_display_config(tmp_path: Path) -> None:
    config_path = tmp_path / "display.yaml"
    config_path.write_text("indent_width: 1\nseparator: ','\n", encoding="utf-8")

    lines: list[str] = []
    assert tree_rebalance.main(["2", "1", "3", "--config", str(config_path)], out=lines.append) == 0
    assert lines[:5] == [
        "Original tree (height 2, balanced? Yes)",
        "In order: 1,2,3",
        "  3",
        " 2",
        "  1",
    ]


def test_cli_reports_config_errors(tmp_path: Path) -> None:
    lines: list[str] = []
    missing = tmp_path / "missing.yaml"
    assert tree_rebalance.main(["--config", str(missing)], out=lines.append) == 1
    assert lines == []
