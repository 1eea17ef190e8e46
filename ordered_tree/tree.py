"""Binary search tree holding unique, totally ordered elements.

The :class:`OrderedTree` container keeps every element in exactly one
:class:`Node` and every node under exactly one parent link (or the root link).
Elements are opaque: the tree only relies on ``==``, ``<`` and ``str()``.

The public surface covers:

* ``insert`` – recursive descent returning an :class:`InsertOutcome` so a
  duplicate is never confused with an allocation failure.
* ``retrieve`` – ordering-guided exact match lookup.
* ``depth`` – unconditional left-then-right structural search, 1 at the root
  and 0 when the key is absent.
* ``==`` / ``!=`` – shape *and* content comparison.
* ``copy`` / ``assign`` / ``make_empty`` – deep copy, assignment and
  post-order teardown.

Bulk conversion to and from a sorted list lives in :mod:`ordered_tree.balance`
and the textual views in :mod:`ordered_tree.display`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
import logging
from typing import Any, Iterable, Iterator, Optional, Tuple

from .errors import InsertOutcome, TreeAllocationError

__all__ = [
    "Node",
    "OrderedTree",
]

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class Node:
    """Structural unit owning one element and at most two children."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def __post_init__(self) -> None:
        if self.data is None:
            raise TypeError("Node data must not be None")


def _allocate_node(element: Any) -> Node:
    return Node(element)


def _duplicate(element: Any) -> Any:
    return copy.deepcopy(element)


class OrderedTree:
    """Binary search tree without duplicates and without automatic balancing."""

    __slots__ = ("root",)

    def __init__(self, elements: Optional[Iterable[Any]] = None) -> None:
        self.root: Optional[Node] = None
        if elements is not None:
            for element in elements:
                self.insert(element)

    # ------------------------------------------------------------------
    # Structural operations
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        """Return ``True`` when the tree holds no nodes."""

        return self.root is None

    def insert(self, element: Any) -> InsertOutcome:
        """Insert *element* as a new leaf.

        Returns :attr:`InsertOutcome.DUPLICATE_KEY` and leaves the tree
        unchanged when an equal element is already present, and
        :attr:`InsertOutcome.ALLOCATION_FAILURE` when the leaf could not be
        created.
        """

        if element is None:
            raise TypeError("Cannot insert None into an OrderedTree")
        self.root, outcome = self._insert_item(self.root, element)
        if outcome is InsertOutcome.DUPLICATE_KEY:
            logger.debug("Rejected duplicate element %s", element)
        return outcome

    def retrieve(self, key: Any) -> Optional[Any]:
        """Return the stored element equal to *key*, or ``None`` if absent.

        A ``None`` key never matches.  Other keys must be comparable with the
        stored elements using ``==`` and ``<``.
        """

        if key is None:
            return None
        return self._retrieve_item(self.root, key)

    def depth(self, key: Any) -> int:
        """Return the level of *key* (root is 1) or 0 when it is not stored.

        The search visits the current node, then the whole left subtree and
        only then the right subtree; the ordering of the elements is not used.
        """

        return self._depth(self.root, key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedTree):
            return NotImplemented
        return self._compare(self.root, other.root)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def make_empty(self) -> None:
        """Release every node, children before their parent."""

        if self.root is not None:
            logger.debug("Clearing tree with root %s", self.root.data)
        self._destroy_tree(self.root)
        self.root = None

    clear = make_empty

    def copy(self) -> "OrderedTree":
        """Return a deep structural copy sharing no nodes or elements."""

        duplicate = type(self)()
        duplicate._copy_from(self.root)
        return duplicate

    def __copy__(self) -> "OrderedTree":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "OrderedTree":
        return self.copy()

    def assign(self, other: "OrderedTree") -> "OrderedTree":
        """Replace this tree's contents with a deep copy of *other*."""

        if other is self:
            return self
        if not isinstance(other, OrderedTree):
            raise TypeError("assign() expects an OrderedTree")
        self.make_empty()
        self._copy_from(other.root)
        return self

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Any]:
        """Yield the elements in ascending order without modifying the tree."""

        yield from self._inorder(self.root)

    def __contains__(self, key: object) -> bool:
        return self.retrieve(key) is not None

    def __len__(self) -> int:
        return self._count(self.root)

    def __repr__(self) -> str:
        items = ", ".join(repr(element) for element in self)
        return f"{type(self).__name__}([{items}])"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _insert_item(
        node: Optional[Node], element: Any
    ) -> Tuple[Optional[Node], InsertOutcome]:
        if node is None:
            try:
                return _allocate_node(element), InsertOutcome.INSERTED
            except MemoryError:
                logger.error("Could not allocate memory for %s: insert failed", element)
                return None, InsertOutcome.ALLOCATION_FAILURE
        if element == node.data:
            return node, InsertOutcome.DUPLICATE_KEY
        if element < node.data:
            node.left, outcome = OrderedTree._insert_item(node.left, element)
        else:
            node.right, outcome = OrderedTree._insert_item(node.right, element)
        return node, outcome

    @staticmethod
    def _retrieve_item(node: Optional[Node], key: Any) -> Optional[Any]:
        if node is None:
            return None
        if key == node.data:
            return node.data
        if key < node.data:
            return OrderedTree._retrieve_item(node.left, key)
        return OrderedTree._retrieve_item(node.right, key)

    @staticmethod
    def _depth(node: Optional[Node], key: Any) -> int:
        if node is None:
            return 0
        if key == node.data:
            return 1
        level = OrderedTree._depth(node.left, key)
        if level == 0:
            level = OrderedTree._depth(node.right, key)
        return level + 1 if level > 0 else 0

    @staticmethod
    def _compare(lhs: Optional[Node], rhs: Optional[Node]) -> bool:
        if lhs is None and rhs is None:
            return True
        if lhs is None or rhs is None:
            return False
        return (
            lhs.data == rhs.data
            and OrderedTree._compare(lhs.left, rhs.left)
            and OrderedTree._compare(lhs.right, rhs.right)
        )

    @staticmethod
    def _copy_tree(node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        new_node = _allocate_node(_duplicate(node.data))
        new_node.left = OrderedTree._copy_tree(node.left)
        new_node.right = OrderedTree._copy_tree(node.right)
        return new_node

    def _copy_from(self, source: Optional[Node]) -> None:
        try:
            self.root = self._copy_tree(source)
        except MemoryError as exc:
            self.root = None
            logger.error("Could not allocate memory: tree copy failed")
            raise TreeAllocationError("Could not allocate memory while copying tree") from exc
        if source is not None:
            logger.debug("Copied tree rooted at %s", source.data)

    @staticmethod
    def _destroy_tree(node: Optional[Node]) -> None:
        if node is None:
            return
        OrderedTree._destroy_tree(node.left)
        OrderedTree._destroy_tree(node.right)
        node.left = None
        node.right = None
        node.data = None

    @staticmethod
    def _inorder(node: Optional[Node]) -> Iterator[Any]:
        if node is None:
            return
        yield from OrderedTree._inorder(node.left)
        yield node.data
        yield from OrderedTree._inorder(node.right)

    @staticmethod
    def _count(node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + OrderedTree._count(node.left) + OrderedTree._count(node.right)
