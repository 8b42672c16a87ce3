"""Gap filling for ordered selections of tree nodes.

Given any ordered selection of nodes from a tree (or forest) where each node
only knows its parent, produce the smallest ordered list that also contains
every missing ancestor, placed before its descendants.
"""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

N = TypeVar("N")

logger = logging.getLogger(__name__)

_parent = attrgetter("parent")


class MalformedHierarchyError(ValueError):
    """Raised when a parent chain loops back on itself."""

    def __init__(self, node: object, chain: Sequence[object]) -> None:
        self.node = node
        self.chain = list(chain)
        start = self.chain[0] if self.chain else node
        super().__init__(f"Parent chain of {start!r} cycles back to {node!r}")


def fill_gaps(
    nodes: Iterable[N],
    parent_of: Callable[[N], N | None] = _parent,
    key: Callable[[N], Hashable] = id,
) -> list[N]:
    """Return ``nodes`` with every missing ancestor inserted before its descendants.

    Nodes already in ``nodes`` keep their relative order and appear once.
    Ancestors are emitted at the point where the first node needing them is
    processed. The upward walk from each node stops at the first ancestor that
    was already emitted, so every parent link is followed at most once.

    Args:
        nodes: Ordered selection of nodes. Not modified.
        parent_of: Returns the parent of a node, or None for a root.
            Defaults to reading the node's ``parent`` attribute.
        key: Identifies a node. Defaults to object identity, so nodes need
            not be hashable; pass e.g. ``str`` when equal values denote the
            same node.

    Returns:
        A new list satisfying the closure invariant.

    Raises:
        MalformedHierarchyError: If a parent chain contains a cycle.
    """
    result: list[N] = []
    placed: set[Hashable] = set()
    requested = 0
    added = 0

    for node in nodes:
        requested += 1
        chain: list[N] = []
        on_chain: set[Hashable] = set()
        current: N | None = node
        while current is not None:
            current_key = key(current)
            if current_key in placed:
                break
            if current_key in on_chain:
                raise MalformedHierarchyError(current, chain)
            chain.append(current)
            on_chain.add(current_key)
            current = parent_of(current)

        if chain:
            added += len(chain) - 1
        # chain runs node -> ancestors; emit root-most first
        while chain:
            ancestor = chain.pop()
            result.append(ancestor)
            placed.add(key(ancestor))

    logger.debug("Added %d missing ancestors to %d requested nodes", added, requested)
    return result
