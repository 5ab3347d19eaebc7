"""Text serialisation of binary trees in preorder with null markers.

A null node is written as ``x`` and a real node as ``n`` followed by its
label; each token is followed by a single space.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional, TextIO

from arbolado.binarytree import BinaryTree, Node

NODE_MARK = "n"
NULL_MARK = "x"


def dumps(tree: BinaryTree) -> str:
    """Return the preorder text form of ``tree``."""
    parts: list[str] = []
    pending: list[Optional[Node]] = [tree.root]
    while pending:
        node = pending.pop()
        if node is None:
            parts.append(NULL_MARK)
        else:
            parts.append(NODE_MARK)
            parts.append(str(node.label))
            pending.append(node.right)
            pending.append(node.left)
    return "".join(f"{part} " for part in parts)


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of tree text") from None


def _parse(tokens: Iterator[str], convert: Callable[[str], Any]) -> Optional[Node]:
    root: Optional[Node] = None
    # Each slot is (parent, side); a parent of None stands for the root slot.
    slots: list[tuple[Optional[Node], str]] = [(None, "root")]
    while slots:
        parent, side = slots.pop()
        token = _next_token(tokens)
        if token != NODE_MARK:
            continue
        node = Node(convert(_next_token(tokens)), parent=parent)
        if parent is None:
            root = node
        elif side == "left":
            parent.left = node
        else:
            parent.right = node
        slots.append((node, "right"))
        slots.append((node, "left"))
    return root


def loads(text: str, convert: Callable[[str], Any] = str) -> BinaryTree:
    """Build a tree from its text form, turning labels with ``convert``.

    Raises ValueError if the text ends early or holds tokens after the tree.
    """
    tokens = iter(text.split())
    tree = BinaryTree()
    tree.root = _parse(tokens, convert)
    leftover = next(tokens, None)
    if leftover is not None:
        raise ValueError(f"unexpected token after tree: {leftover!r}")
    return tree


def dump(tree: BinaryTree, stream: TextIO) -> None:
    """Write the text form of ``tree`` to ``stream``."""
    stream.write(dumps(tree))


def load(stream: TextIO, convert: Callable[[str], Any] = str) -> BinaryTree:
    """Read a tree in text form from ``stream``."""
    return loads(stream.read(), convert)