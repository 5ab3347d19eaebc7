"""Self-balancing (AVL) search tree kept on a linked binary tree."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

from arbolado.binarytree import BinaryTree, Node
from arbolado.treeschema import format_schema

_log = logging.getLogger(__name__)


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


class AVLTree:
    """Height-balanced binary search tree; equal items go to the right."""

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError(f"AVLTree takes at most one argument ({len(args)} given)")
        if not args:
            self._tree = BinaryTree()
        elif isinstance(args[0], AVLTree):
            self._tree = args[0]._tree.copy()
        else:
            self._tree = BinaryTree(args[0])

    def _height(self, node: Optional[Node]) -> int:
        return self._tree.height(node)

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
        """Add ``item`` and restore the balance on the way up to the root."""
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
        self.rebalance(node)

    def remove(self, item: Any) -> None:
        """Remove one occurrence of ``item``; nothing happens if it is absent."""
        node = self._find(item)
        if node is not None:
            self._remove_node(node)

    def _remove_node(self, node: Node) -> None:
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
                self._tree.clear()
                return
            if parent.left is node:
                self._tree.prune_left(parent)
            else:
                self._tree.prune_right(parent)
            self.rebalance(parent)
            return
        only_child = node.right if node.left is None else node.left
        if parent is None:
            self._tree.assign_subtree(only_child)
            return
        if node.left is None:
            branch = self._tree.prune_right(node)
        else:
            branch = self._tree.prune_left(node)
        if parent.left is node:
            self._tree.insert_left(parent, branch)
        else:
            self._tree.insert_right(parent, branch)
        self.rebalance(parent)

    def rebalance(self, node: Optional[Node]) -> None:
        """Rotate where needed on the path from ``node`` up to the root."""
        if node is not None:
            _log.debug("Ajuste %s", node.label)
        while node is not None:
            left_height = self._height(node.left)
            right_height = self._height(node.right)
            if abs(left_height - right_height) > 1:
                if left_height > right_height:
                    child = node.left
                    if self._height(child.left) > self._height(child.right):
                        node = self.rotate_right(node)
                    else:
                        self.rotate_left(child)
                        node = self.rotate_right(node)
                else:
                    child = node.right
                    if self._height(child.right) > self._height(child.left):
                        node = self.rotate_left(node)
                    else:
                        self.rotate_right(child)
                        node = self.rotate_left(node)
            node = node.parent

    def _detach(self, node: Node) -> BinaryTree:
        parent = node.parent
        if parent is None:
            return self._tree
        if parent.left is node:
            return self._tree.prune_left(parent)
        return self._tree.prune_right(parent)

    def _reattach(self, parent: Optional[Node], was_left: bool, branch: BinaryTree) -> None:
        if parent is None:
            self._tree = branch
        elif was_left:
            self._tree.insert_left(parent, branch)
        else:
            self._tree.insert_right(parent, branch)

    def rotate_right(self, node: Optional[Node]) -> Node:
        """Single right rotation at ``node``; return the new top of the branch."""
        if node is None or node.left is None:
            raise ValueError("right rotation needs a node with a left child")
        _log.debug("RSD %s", node.label)
        parent = node.parent
        was_left = parent is not None and parent.left is node
        branch = self._detach(node)
        lifted = branch.prune_left(node)
        pivot = lifted.root
        branch.insert_left(node, lifted.prune_right(pivot))
        lifted.insert_right(pivot, branch)
        self._reattach(parent, was_left, lifted)
        return pivot

    def rotate_left(self, node: Optional[Node]) -> Node:
        """Single left rotation at ``node``; return the new top of the branch."""
        if node is None or node.right is None:
            raise ValueError("left rotation needs a node with a right child")
        _log.debug("RSI %s", node.label)
        parent = node.parent
        was_left = parent is not None and parent.left is node
        branch = self._detach(node)
        lifted = branch.prune_right(node)
        pivot = lifted.root
        branch.insert_right(node, lifted.prune_left(pivot))
        lifted.insert_left(pivot, branch)
        self._reattach(parent, was_left, lifted)
        return pivot

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


_DONE = object()


def intersection(first: AVLTree, second: AVLTree) -> AVLTree:
    """Return a tree with the items present in both trees (merged in order)."""
    result = AVLTree()
    left, right = iter(first), iter(second)
    a, b = next(left, _DONE), next(right, _DONE)
    while a is not _DONE and b is not _DONE:
        if a < b:
            a = next(left, _DONE)
        elif b < a:
            b = next(right, _DONE)
        else:
            result.insert(a)
            a, b = next(left, _DONE), next(right, _DONE)
    return result


def union(first: AVLTree, second: AVLTree) -> AVLTree:
    """Return a tree with the items of either tree; matching pairs appear once."""
    result = AVLTree()
    left, right = iter(first), iter(second)
    a, b = next(left, _DONE), next(right, _DONE)
    while a is not _DONE and b is not _DONE:
        if a < b:
            result.insert(a)
            a = next(left, _DONE)
        elif b < a:
            result.insert(b)
            b = next(right, _DONE)
        else:
            result.insert(a)
            a, b = next(left, _DONE), next(right, _DONE)
    while a is not _DONE:
        result.insert(a)
        a = next(left, _DONE)
    while b is not _DONE:
        result.insert(b)
        b = next(right, _DONE)
    return result


def _integers(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            yield int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Insert, search and remove numbers read from standard input."""
    numbers = _integers(sys.stdin)
    tree, other = AVLTree(), AVLTree()

    def ask(prompt: str) -> int:
        print(prompt, end="", flush=True)
        return next(numbers, -1)

    def show(target: AVLTree) -> None:
        print("".join(f"{item} " for item in target))
        print(target.schema(), end="")

    insert_prompt = "Introduce un entero (<0 para terminar) "
    other_prompt = "Introduce un entero (< 0 para terminar) "

    print("INSERCIÓN DE DATOS")
    value = ask(insert_prompt)
    while value >= 0:
        tree.insert(value)
        show(tree)
        value = ask(insert_prompt)

    print("BÚSQUEDA DE DATOS")
    value = ask(other_prompt)
    while value >= 0:
        answer = " SÍ" if value in tree else " NO"
        print(f"{value}{answer} está en el AVL")
        value = ask(other_prompt)

    print(tree.schema(), end="")
    print("BORRADO DE DATOS")
    value = ask(other_prompt)
    while value >= 0:
        tree.remove(value)
        show(tree)
        value = ask(other_prompt)

    print("INSERCIÓN DE DATOS AVL2")
    value = ask(insert_prompt)
    while value >= 0:
        other.insert(value)
        show(other)
        value = ask(insert_prompt)

    print("INTERSECCIÓN DE AVL Y AVL2")
    print()
    print(intersection(tree, other).schema(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())