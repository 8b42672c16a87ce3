"""Name-keyed project hierarchy.

Stores parent-child relationships between projects identified by name and
closes arbitrary name selections over their ancestors.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .gap_filler import MalformedHierarchyError, fill_gaps


class ProjectTree:
    """A forest of project names.

    Each project may have at most one parent and zero or more children.
    Names are registered in the order they are first seen.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(type(self).__name__)
        self._parents: dict[str, str | None] = {}
        self._children: dict[str, dict[str, None]] = {}

    def add(self, parent: str, children: Iterable[str]) -> None:
        """Register a parent and its direct children.

        Raises:
            ValueError: If a child is already registered under another parent.
        """
        children = list(children)
        for child in children:
            current = self._parents.get(child)
            if current is not None and current != parent:
                raise ValueError(f"Project {child!r} already has parent {current!r}, cannot add under {parent!r}")

        self._parents.setdefault(parent, None)
        known = self._children.setdefault(parent, {})
        for child in children:
            self._parents[child] = parent
            known[child] = None
        self._logger.debug("Registered %s -> %s", parent, list(known))

    def get_parent(self, name: str) -> str | None:
        """Return the parent of a project, or None for roots and unknown names."""
        return self._parents.get(name)

    def get_children(self, name: str) -> set[str]:
        """Return direct children of a project."""
        return set(self._children.get(name, ()))

    def get_ancestors(self, name: str) -> list[str]:
        """Return ancestors of a project from its parent up to the root."""
        result: list[str] = []
        seen = {name}
        parent = self._parents.get(name)
        while parent is not None:
            if parent in seen:
                raise MalformedHierarchyError(parent, [name, *result])
            seen.add(parent)
            result.append(parent)
            parent = self._parents.get(parent)
        return result

    def roots(self) -> list[str]:
        """Return projects without a parent, in registration order."""
        return [name for name, parent in self._parents.items() if parent is None]

    def fill_gaps(self, names: Iterable[str]) -> list[str]:
        """Close a selection of project names over their ancestors."""
        return fill_gaps(names, parent_of=self.get_parent, key=str)

    def __contains__(self, name: object) -> bool:
        return name in self._parents

    def __len__(self) -> int:
        return len(self._parents)
