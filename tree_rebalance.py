"""Command line demonstration of on-demand tree rebalancing.

The script inserts integers into an :class:`ordered_tree.OrderedTree` in the
order given, prints the ordered line, the sideways view and the height, then
rebuilds the tree through the sorted-list round trip and prints the same
report again.  Without arguments a sorted sequence is used so the first tree
degenerates into a chain and the effect of rebalancing is obvious.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ordered_tree import (
    ConfigError,
    DisplayConfig,
    InsertOutcome,
    OrderedTree,
    OrderedTreeError,
    is_balanced,
    load_display_config,
    rebalance,
    render_inorder,
    tree_height,
    write_sideways,
)

logger = logging.getLogger(__name__)

DEFAULT_VALUES = (1, 2, 3, 4, 5, 6, 7)


@dataclass(frozen=True)
class InsertSummary:
    """Counts of insertion outcomes for a batch of values."""

    inserted: int
    duplicates: int


def build_tree(values: Sequence[int]) -> tuple[OrderedTree, InsertSummary]:
    """Insert *values* in order and report how many were accepted."""

    tree = OrderedTree()
    inserted = duplicates = 0
    for value in values:
        outcome = tree.insert(value)
        if outcome is InsertOutcome.INSERTED:
            inserted += 1
        elif outcome is InsertOutcome.DUPLICATE_KEY:
            duplicates += 1
            logger.info("Skipping duplicate value %s", value)
        else:
            raise OrderedTreeError(f"Could not insert {value}: out of memory")
    return tree, InsertSummary(inserted=inserted, duplicates=duplicates)


def _format_report(label: str, tree: OrderedTree, config: DisplayConfig) -> List[str]:
    """Return formatted output lines describing *tree*."""

    status = "Yes" if is_balanced(tree) else "No"
    lines = [
        f"{label} tree (height {tree_height(tree)}, balanced? {status})",
        f"In order: {render_inorder(tree, config)}",
    ]
    write_sideways(tree, lines.append, config)
    return lines


def main(argv: Optional[Sequence[str]] = None, *, out: Callable[[str], None] = print) -> int:
    """Execute the demonstration flow and return a process exit code."""

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "values",
        nargs="*",
        type=int,
        help="Integers to insert in order. Defaults to 1 through 7.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional JSON or YAML file with display options.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    values = args.values or list(DEFAULT_VALUES)
    try:
        config = load_display_config(args.config)
        tree, summary = build_tree(values)
        logger.info(
            "Inserted %d values, rejected %d duplicates",
            summary.inserted,
            summary.duplicates,
        )
        before = _format_report("Original", tree, config)
        rebalance(tree)
        after = _format_report("Rebalanced", tree, config)
    except (ConfigError, OrderedTreeError) as exc:
        logger.error("Tree demonstration failed: %s", exc)
        return 1

    for line in before:
        out(line)
    out("")  # Spacer between reports
    for line in after:
        out(line)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
