"""Ancestor closure for tree-structured project models."""

from .gap_filler import MalformedHierarchyError, fill_gaps
from .node import PATH_SEPARATOR, Node
from .project_tree import ProjectTree

__all__ = [
    "PATH_SEPARATOR",
    "MalformedHierarchyError",
    "Node",
    "ProjectTree",
    "fill_gaps",
]
