"""Textual views of an :class:`~ordered_tree.tree.OrderedTree`.

Every writer takes a *sink*: a callable receiving one complete line without
its terminator.  The default sink is :func:`print`, which appends the line
terminator; tests pass ``list.append`` instead of capturing stdout.

* ``write_inorder`` – one line, elements in ascending order.
* ``write_sideways`` – the tree rotated a quarter turn: right subtree first,
  each element on its own line indented by its depth.
* ``render_levels`` – level-order rows with placeholders for missing
  children, handy when comparing shapes in test failures.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, List, Optional

from .config import DisplayConfig
from .tree import Node, OrderedTree

__all__ = [
    "Sink",
    "render_inorder",
    "render_levels",
    "render_sideways",
    "write_inorder",
    "write_sideways",
]

Sink = Callable[[str], None]


def render_inorder(tree: OrderedTree, config: Optional[DisplayConfig] = None) -> str:
    """Return the elements of *tree* in ascending order on a single line."""

    config = config or DisplayConfig()
    return config.separator.join(str(element) for element in tree)


def write_inorder(
    tree: OrderedTree, sink: Sink = print, config: Optional[DisplayConfig] = None
) -> None:
    """Emit the ordered line for *tree*; an empty tree emits an empty line."""

    sink(render_inorder(tree, config))


def _sideways_lines(
    node: Optional[Node], level: int, indent_width: int, lines: List[str]
) -> None:
    if node is None:
        return
    level += 1
    _sideways_lines(node.right, level, indent_width, lines)
    lines.append(" " * (indent_width * level) + str(node.data))
    _sideways_lines(node.left, level, indent_width, lines)


def _sideways(tree: OrderedTree, config: Optional[DisplayConfig]) -> List[str]:
    config = config or DisplayConfig()
    lines: List[str] = []
    _sideways_lines(tree.root, 0, config.indent_width, lines)
    return lines


def render_sideways(tree: OrderedTree, config: Optional[DisplayConfig] = None) -> str:
    """Return the rotated view of *tree*; the root is indented one step."""

    return "\n".join(_sideways(tree, config))


def write_sideways(
    tree: OrderedTree, sink: Sink = print, config: Optional[DisplayConfig] = None
) -> None:
    """Emit the rotated view of *tree* one element per line."""

    for line in _sideways(tree, config):
        sink(line)


def render_levels(tree: OrderedTree, config: Optional[DisplayConfig] = None) -> str:
    """Render *tree* level-by-level, marking missing nodes with a placeholder.

    The renderer stops once the next level would be empty, so the output
    contains no trailing placeholder-only rows.
    """

    config = config or DisplayConfig()
    if tree.root is None:
        return config.empty_marker

    rows: List[str] = []
    queue: Deque[Optional[Node]] = deque([tree.root])

    while queue:
        level_count = len(queue)
        level_nodes: List[str] = []
        next_level_has_real_node = False
        for _ in range(level_count):
            node = queue.popleft()
            if node is None:
                level_nodes.append(config.placeholder)
                queue.extend((None, None))
                continue

            level_nodes.append(str(node.data))
            queue.append(node.left)
            queue.append(node.right)
            if node.left is not None or node.right is not None:
                next_level_has_real_node = True

        rows.append(config.separator.join(level_nodes))
        if not next_level_has_real_node:
            break

    return "\n".join(rows)
