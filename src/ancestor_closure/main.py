"""Command line entry point.

Reads a project hierarchy from a tree file, closes the requested project
names over their ancestors and prints the result, one name per line.

Tree file format, one parent per line::

    # comment
    root: app lib
    app: app-web app-cli
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Sequence

from .gap_filler import MalformedHierarchyError
from .logging_config import setup_logging
from .project_tree import ProjectTree

EXIT_OK = 0
EXIT_FAILURE = 1

logger = logging.getLogger(__name__)


def parse_tree(lines: Iterable[str]) -> ProjectTree:
    """Build a ProjectTree from ``parent: child...`` lines."""
    tree = ProjectTree()
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parent, sep, rest = line.partition(":")
        parent = parent.strip()
        if not sep or not parent:
            raise ValueError(f"line {lineno}: expected 'parent: child...', got {line!r}")
        tree.add(parent, rest.split())
    return tree


def load_tree(path: str) -> ProjectTree:
    """Read and parse a tree file."""
    with open(path, encoding="utf-8") as f:
        tree = parse_tree(f)
    logger.info("Loaded %d projects (%d roots) from %s", len(tree), len(tree.roots()), path)
    return tree


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ancestor-closure",
        description="Print project names together with every missing ancestor, parents first.",
    )
    parser.add_argument("tree_file", help="Tree file with 'parent: child...' lines")
    parser.add_argument("names", nargs="+", metavar="NAME", help="Project names to close over their ancestors")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages to stderr",
    )
    parser.add_argument(
        "--log-file",
        help="Also write debug logs to this file, rotated",
    )
    return parser


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """Parse command line arguments. Exits with status 2 on usage errors."""
    return build_parser().parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Close the requested names over the tree file and print them; return an exit status."""
    tree_file, names = args.tree_file, list(args.names)
    try:
        tree = load_tree(tree_file)
        closed = tree.fill_gaps(names)
    except MalformedHierarchyError as e:
        logger.error("Malformed hierarchy in %s: %s", tree_file, e)
        return EXIT_FAILURE
    except (OSError, ValueError) as e:
        logger.error("Invalid tree file %s: %s", tree_file, e)
        return EXIT_FAILURE

    unknown = [name for name in names if name not in tree]
    if unknown:
        logger.warning("Names not found in %s, treated as roots: %s", tree_file, unknown)

    logger.info("Requested %d projects, closed set has %d", len(names), len(closed))
    for name in closed:
        print(name)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_file, level=logging.DEBUG if args.verbose else logging.INFO)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
