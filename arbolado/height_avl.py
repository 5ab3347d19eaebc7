"""AVL search tree whose nodes store their own height."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

_EMPTY = object()


@dataclass(eq=False)
class HeightNode:
    """A node with a label, its links and the height of its branch."""

    label: Any
    parent: Optional["HeightNode"] = field(default=None, repr=False)
    left: Optional["HeightNode"] = field(default=None, repr=False)
    right: Optional["HeightNode"] = field(default=None, repr=False)
    height: int = 0


def _height(node: Optional[HeightNode]) -> int:
    return -1 if node is None else node.height


def _update_height(node: HeightNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _copy(node: Optional[HeightNode]) -> Optional[HeightNode]:
    if node is None:
        return None
    duplicate = HeightNode(node.label, height=node.height)
    duplicate.left = _copy(node.left)
    duplicate.right = _copy(node.right)
    if duplicate.left is not None:
        duplicate.left.parent = duplicate
    if duplicate.right is not None:
        duplicate.right.parent = duplicate
    return duplicate


def _count(node: Optional[HeightNode]) -> int:
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def _same(first: Optional[HeightNode], second: Optional[HeightNode]) -> bool:
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.label == second.label
        and _same(first.left, second.left)
        and _same(first.right, second.right)
    )


def _leftmost(node: HeightNode) -> HeightNode:
    while node.left is not None:
        node = node.left
    return node


def _successor(node: HeightNode) -> Optional[HeightNode]:
    if node.right is not None:
        return _leftmost(node.right)
    while node.parent is not None and node.parent.right is node:
        node = node.parent
    return node.parent


class HeightAVL:
    """Height-balanced search tree without duplicates.

    ``root`` is ``None`` when the tree is empty.
    """

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError(f"HeightAVL takes at most one argument ({len(args)} given)")
        self.root: Optional[HeightNode] = None
        if args:
            source = args[0]
            if isinstance(source, HeightAVL):
                self.root = _copy(source.root)
            else:
                self.root = HeightNode(source)

    def copy(self) -> "HeightAVL":
        """Return a deep copy of the tree."""
        return HeightAVL(self)

    def _find(self, item: Any) -> Optional[HeightNode]:
        node = self.root
        while node is not None:
            if node.label == item:
                return node
            node = node.left if item < node.label else node.right
        return None

    def __contains__(self, item: Any) -> bool:
        return self._find(item) is not None

    def _replace_child(self, old: HeightNode, new: Optional[HeightNode]) -> None:
        parent = old.parent
        if new is not None:
            new.parent = parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_right(self, node: HeightNode) -> HeightNode:
        pivot = node.left
        assert pivot is not None
        self._replace_child(node, pivot)
        node.left = pivot.right
        if node.left is not None:
            node.left.parent = node
        pivot.right = node
        node.parent = pivot
        _update_height(node)
        _update_height(pivot)
        return pivot

    def _rotate_left(self, node: HeightNode) -> HeightNode:
        pivot = node.right
        assert pivot is not None
        self._replace_child(node, pivot)
        node.right = pivot.left
        if node.right is not None:
            node.right.parent = node
        pivot.left = node
        node.parent = pivot
        _update_height(node)
        _update_height(pivot)
        return pivot

    def _rebalance(self, node: Optional[HeightNode]) -> None:
        while node is not None:
            _update_height(node)
            left_height = _height(node.left)
            right_height = _height(node.right)
            if abs(left_height - right_height) > 1:
                if left_height > right_height:
                    child = node.left
                    if _height(child.left) >= _height(child.right):
                        node = self._rotate_right(node)
                    else:
                        self._rotate_left(child)
                        node = self._rotate_right(node)
                else:
                    child = node.right
                    if _height(child.right) >= _height(child.left):
                        node = self._rotate_left(node)
                    else:
                        self._rotate_right(child)
                        node = self._rotate_left(node)
            node = node.parent

    def insert(self, item: Any) -> bool:
        """Add ``item``; return False, changing nothing, if it is already there."""
        if self.root is None:
            self.root = HeightNode(item)
            return True
        node = self.root
        while True:
            if item == node.label:
                return False
            child = node.left if item < node.label else node.right
            if child is None:
                break
            node = child
        fresh = HeightNode(item, parent=node)
        if item < node.label:
            node.left = fresh
        else:
            node.right = fresh
        self._rebalance(node)
        return True

    def remove(self, item: Any) -> None:
        """Remove ``item``; nothing happens if it is absent."""
        node = self._find(item)
        if node is not None:
            self._remove_node(node)

    def _remove_node(self, node: HeightNode) -> None:
        if node.left is not None and node.right is not None:
            successor = _leftmost(node.right)
            node.label = successor.label
            self._remove_node(successor)
            return
        if node.left is None and node.right is None:
            parent = node.parent
            self._replace_child(node, None)
            self._rebalance(parent)
            return
        child = node.left if node.left is not None else node.right
        self._replace_child(node, child)
        self._rebalance(child)

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def is_empty(self) -> bool:
        """Return True when the tree has no nodes."""
        return self.root is None

    def __len__(self) -> int:
        return _count(self.root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeightAVL):
            return NotImplemented
        return _same(self.root, other.root)

    __hash__ = None  # type: ignore[assignment]

    def _nodes(self) -> Iterator[HeightNode]:
        node = None if self.root is None else _leftmost(self.root)
        while node is not None:
            yield node
            node = _successor(node)

    def __iter__(self) -> Iterator[Any]:
        return (node.label for node in self._nodes())

    def with_heights(self) -> list[tuple[Any, int]]:
        """Return ``(label, height)`` pairs in ascending order of label."""
        return [(node.label, node.height) for node in self._nodes()]


def _listing(tree: HeightAVL) -> str:
    pairs = "".join(f"{label} ({height}) " for label, height in tree.with_heights())
    return f"\n Elementos ordenados con sus alturas: {pairs}"


def _split_tokens(lines: Iterable[str]) -> tuple[list[int], Iterator[int]]:
    tokens = iter([token for line in lines for token in line.split()])
    values: list[int] = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            break

    def rest() -> Iterator[int]:
        for token in tokens:
            try:
                yield int(token)
            except ValueError:
                return

    return values, rest()


def main(argv: Sequence[str] | None = None) -> int:
    """Insert integers from standard input, then remove the ones that follow.

    Numbers up to the first non-numeric token are inserted; numbers after it
    are removed one by one.
    """
    values, removals = _split_tokens(sys.stdin)
    tree = HeightAVL()
    for value in values:
        tree.insert(value)
        print(f"\nInsertando {value}", end="")
        print(_listing(tree), end="")

    print("\nDime un elemento a borrar: ", end="", flush=True)
    for value in removals:
        if value in tree:
            tree.remove(value)
        else:
            print(f"El elemento {value} no esta")
        if tree.is_empty():
            break
        print(_listing(tree), end="")
        print("\nDime un elemento a borrar: ", end="", flush=True)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())