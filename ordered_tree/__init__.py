"""Binary search tree with on-demand rebalancing."""

from .balance import is_balanced, linearize, rebalance, rebuild_balanced, tree_height
from .config import DisplayConfig, load_display_config
from .display import (
    Sink,
    render_inorder,
    render_levels,
    render_sideways,
    write_inorder,
    write_sideways,
)
from .errors import ConfigError, InsertOutcome, OrderedTreeError, TreeAllocationError
from .tree import Node, OrderedTree

__all__ = [
    "ConfigError",
    "DisplayConfig",
    "InsertOutcome",
    "Node",
    "OrderedTree",
    "OrderedTreeError",
    "Sink",
    "TreeAllocationError",
    "is_balanced",
    "linearize",
    "load_display_config",
    "rebalance",
    "rebuild_balanced",
    "render_inorder",
    "render_levels",
    "render_sideways",
    "tree_height",
    "write_inorder",
    "write_sideways",
]
