"""Sideways drawing of a binary tree, right branch above left branch."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Optional, TextIO

from arbolado.binarytree import BinaryTree, Node

_BRANCH = "   |"
_LAST = "    "


def _walk(node: Optional[Node], prefix: str) -> Iterator[str]:
    if node is None:
        yield f"{prefix}-- x"
        return
    yield f"{prefix}-- {node.label}"
    if node.left is None and node.right is None:
        return
    yield from _walk(node.right, prefix + _BRANCH)
    yield from _walk(node.left, prefix + _LAST)


def schema_lines(
    tree: BinaryTree, node: Optional[Node] = None, prefix: str = ""
) -> list[str]:
    """Return the drawing lines of the branch at ``node``.

    When ``node`` is omitted the drawing starts at the root of ``tree``.
    A missing child of an inner node is drawn as ``x``; leaves show no
    children at all.
    """
    start = tree.root if node is None else node
    return list(_walk(start, prefix))


def format_schema(tree: BinaryTree) -> str:
    """Return the whole drawing of ``tree``, one line per entry."""
    return "".join(f"{line}\n" for line in schema_lines(tree))


def print_schema(tree: BinaryTree, stream: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``stream`` (standard output by default)."""
    target = sys.stdout if stream is None else stream
    target.write(format_schema(tree))