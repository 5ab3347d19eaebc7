"""Binary search tree kept on a linked binary tree, iterated in order."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

from arbolado.binarytree import BinaryTree, Node
from arbolado.treeschema import format_schema


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _successor(node: Node) -> Optional[Node]:
    if node.right is not None:
        return _leftmost(node.right)
    while node.parent is not None and node.parent.right is node:
        node = node.parent
    return node.parent


class BinarySearchTree:
    """Binary search tree; equal items are placed to the right."""

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError(
                f"BinarySearchTree takes at most one argument ({len(args)} given)"
            )
        if not args:
            self._tree = BinaryTree()
        elif isinstance(args[0], BinarySearchTree):
            self._tree = args[0]._tree.copy()
        else:
            self._tree = BinaryTree(args[0])

    def _find(self, item: Any) -> Optional[Node]:
        node = self._tree.root
        while node is not None:
            if node.label == item:
                return node
            node = node.left if item < node.label else node.right
        return None

    def __contains__(self, item: Any) -> bool:
        return self._find(item) is not None

    def insert(self, item: Any) -> None:
        """Add ``item``; duplicates go to the right of their equals."""
        if self._tree.is_empty():
            self._tree = BinaryTree(item)
            return
        node = self._tree.root
        while True:
            child = node.left if item < node.label else node.right
            if child is None:
                break
            node = child
        branch = BinaryTree(item)
        if item < node.label:
            self._tree.insert_left(node, branch)
        else:
            self._tree.insert_right(node, branch)

    def remove(self, item: Any) -> None:
        """Remove one occurrence of ``item``; nothing happens if it is absent."""
        node = self._find(item)
        if node is not None:
            self._remove_node(node)

    def _remove_node(self, node: Node) -> None:
        tree = self._tree
        parent = node.parent
        if node.left is not None and node.right is not None:
            predecessor = node.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            node.label = predecessor.label
            self._remove_node(predecessor)
            return
        if node.left is None and node.right is None:
            if parent is None:
                tree.clear()
            elif parent.left is node:
                tree.prune_left(parent)
            else:
                tree.prune_right(parent)
            return
        if node.left is None:
            child = node.right
            if parent is None:
                tree.assign_subtree(child)
                return
            branch = tree.prune_right(node)
        else:
            child = node.left
            if parent is None:
                tree.assign_subtree(child)
                return
            branch = tree.prune_left(node)
        if parent.left is node:
            tree.insert_left(parent, branch)
        else:
            tree.insert_right(parent, branch)

    def __iter__(self) -> Iterator[Any]:
        root = self._tree.root
        node = None if root is None else _leftmost(root)
        while node is not None:
            yield node.label
            node = _successor(node)

    def __len__(self) -> int:
        return len(self._tree)

    def schema(self) -> str:
        """Return the sideways drawing of the tree."""
        return format_schema(self._tree)


def _integers(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            yield int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a tree with random numbers, then search and remove interactively."""
    tree = BinarySearchTree()
    for _ in range(20):
        tree.insert(random.randint(0, 100))

    def show() -> None:
        print("".join(f"{item} " for item in tree))

    numbers = _integers(sys.stdin)

    def ask() -> int:
        print("Introduce un entero (< 0 para terminar) ", end="", flush=True)
        return next(numbers, -1)

    show()
    print("BÚSQUEDA DE DATOS")
    value = ask()
    while value >= 0:
        answer = " SÍ" if value in tree else " NO"
        print(f"{value}{answer} está en el ABB")
        value = ask()

    print(tree.schema(), end="")
    print("BORRADO DE DATOS")
    value = ask()
    while value >= 0:
        tree.remove(value)
        show()
        print(tree.schema(), end="")
        value = ask()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())