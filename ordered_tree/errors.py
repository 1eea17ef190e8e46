"""Error taxonomy shared by the ordered tree modules."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

__all__ = [
    "ConfigError",
    "InsertOutcome",
    "OrderedTreeError",
    "TreeAllocationError",
]


class OrderedTreeError(RuntimeError):
    """Base class for failures raised by :mod:`ordered_tree`."""


class TreeAllocationError(OrderedTreeError):
    """Raised when memory runs out while copying or rebuilding a tree.

    ``elements`` carries the drained elements when a rebalance fails, so the
    caller still owns them.
    """

    def __init__(self, message: str, elements: Optional[List[Any]] = None) -> None:
        super().__init__(message)
        self.elements = elements


class ConfigError(ValueError):
    """Raised when a display configuration is invalid."""


class InsertOutcome(Enum):
    """Tagged result of :meth:`OrderedTree.insert`.

    Only ``INSERTED`` is truthy so ``if tree.insert(item):`` reads like a
    plain success flag, while callers that need to tell a duplicate apart from
    an allocation failure can compare against the members directly.
    """

    INSERTED = "inserted"
    DUPLICATE_KEY = "duplicate_key"
    ALLOCATION_FAILURE = "allocation_failure"

    def __bool__(self) -> bool:
        return self is InsertOutcome.INSERTED
