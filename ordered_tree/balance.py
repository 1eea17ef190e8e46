"""Sorted-list round trip used to rebuild height-balanced trees.

``linearize`` drains a tree into an ascending list and ``rebuild_balanced``
consumes such a list, inserting the middle element of every segment first so
the resulting height is ``ceil(log2(n + 1))`` regardless of how the original
tree was shaped.  ``tree_height`` and ``is_balanced`` report on the outcome.
"""

from __future__ import annotations

import logging
from typing import Any, List, MutableSequence, Optional, Sequence, Set

from .errors import InsertOutcome, TreeAllocationError
from .tree import Node, OrderedTree

__all__ = [
    "is_balanced",
    "linearize",
    "rebalance",
    "rebuild_balanced",
    "tree_height",
]

logger = logging.getLogger(__name__)

BalanceResult = tuple[bool, int]


def linearize(tree: OrderedTree) -> List[Any]:
    """Move every element of *tree* into an ascending list.

    The tree is empty afterwards; the elements are transferred, not copied.
    """

    target: List[Any] = []
    _inorder_transfer(tree.root, target)
    tree.make_empty()
    logger.debug("Linearized %d elements", len(target))
    return target


def _inorder_transfer(node: Optional[Node], target: List[Any]) -> None:
    if node is None:
        return
    _inorder_transfer(node.left, target)
    target.append(node.data)
    node.data = None
    _inorder_transfer(node.right, target)


def rebuild_balanced(
    elements: Sequence[Any], tree: Optional[OrderedTree] = None
) -> OrderedTree:
    """Build a height-balanced tree from the ascending *elements*.

    When *tree* is supplied its current contents are discarded and it is
    refilled in place; otherwise a new tree is returned.  Ordering is not
    verified: unsorted input yields a tree that may violate the search
    invariant.  Transferred elements are removed from a mutable *elements*
    sequence, so a sorted, duplicate-free list ends up empty.

    Raises :class:`TreeAllocationError` when a node cannot be allocated; the
    tree is then left empty and *elements* is not modified.
    """

    if tree is None:
        tree = OrderedTree()
    else:
        tree.make_empty()

    taken: Set[int] = set()
    if elements:
        try:
            _bisect_build(tree, elements, 0, len(elements) - 1, taken)
        except TreeAllocationError:
            tree.make_empty()
            raise

    if isinstance(elements, MutableSequence):
        for index in sorted(taken, reverse=True):
            del elements[index]
        if elements:
            logger.warning(
                "%d elements were rejected while rebuilding the tree", len(elements)
            )
    return tree


def _bisect_build(
    tree: OrderedTree, source: Sequence[Any], low: int, high: int, taken: Set[int]
) -> None:
    if low > high:
        return
    mid = (low + high) // 2
    outcome = tree.insert(source[mid])
    if outcome is InsertOutcome.ALLOCATION_FAILURE:
        raise TreeAllocationError(f"Could not allocate a node for {source[mid]}")
    if outcome is InsertOutcome.DUPLICATE_KEY:
        return
    taken.add(mid)
    _bisect_build(tree, source, low, mid - 1, taken)
    _bisect_build(tree, source, mid + 1, high, taken)


def rebalance(tree: OrderedTree) -> OrderedTree:
    """Rebuild *tree* in place through the sorted-list round trip.

    If the rebuild runs out of memory the tree is left empty and the drained
    elements are handed back on :attr:`TreeAllocationError.elements`.
    """

    elements = linearize(tree)
    try:
        return rebuild_balanced(elements, tree)
    except TreeAllocationError as exc:
        exc.elements = elements
        logger.error("Rebalance failed; %d elements returned on the error", len(elements))
        raise


def _check_height(node: Optional[Node]) -> BalanceResult:
    """Return a tuple indicating whether *node* is balanced and its height."""

    if node is None:
        return True, 0

    left_balanced, left_height = _check_height(node.left)
    if not left_balanced:
        return False, left_height + 1

    right_balanced, right_height = _check_height(node.right)
    if not right_balanced:
        return False, right_height + 1

    balanced = abs(left_height - right_height) <= 1
    return balanced, max(left_height, right_height) + 1


def _height(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


def tree_height(tree: OrderedTree) -> int:
    """Return the number of levels in *tree* (0 when empty)."""

    return _height(tree.root)


def is_balanced(tree: OrderedTree) -> bool:
    """Return ``True`` when no node's subtrees differ in height by more than one."""

    balanced, _ = _check_height(tree.root)
    return balanced
