"""Plain tree node with an explicit parent reference."""

from __future__ import annotations

from .gap_filler import MalformedHierarchyError

PATH_SEPARATOR = ":"


class Node:
    """A named position in a project tree.

    Nodes compare and hash by identity: two nodes with the same name are
    still different nodes.
    """

    __slots__ = ("_name", "_parent")

    def __init__(self, name: str, parent: Node | None = None) -> None:
        self._name = name
        self._parent = parent

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Node | None:
        return self._parent

    @property
    def depth(self) -> int:
        """Number of ancestors between this node and its root."""
        return len(self.ancestors())

    @property
    def path(self) -> str:
        """Separator-joined path from the root, e.g. ``:a:b``.

        The root's own name is not part of the path; the root is ``:``.
        """
        sep = PATH_SEPARATOR
        if self._parent is None:
            return sep
        names = [n.name for n in reversed(self.ancestors()[:-1])]
        names.append(self._name)
        return sep + sep.join(names)

    def ancestors(self) -> list[Node]:
        """Return ancestors from the parent up to the root."""
        result: list[Node] = []
        seen: set[Node] = {self}
        current = self._parent
        while current is not None:
            if current in seen:
                raise MalformedHierarchyError(current, [self, *result])
            seen.add(current)
            result.append(current)
            current = current.parent
        return result

    def __repr__(self) -> str:
        return f"Node({self._name!r})"
