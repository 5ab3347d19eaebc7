"""A linked binary tree whose nodes know their parent."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

_EMPTY = object()


@dataclass(eq=False)
class Node:
    """A tree node holding a label and links to its children and parent."""

    label: Any
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)
    parent: Optional["Node"] = field(default=None, repr=False)


def _copy(node: Optional[Node]) -> Optional[Node]:
    if node is None:
        return None
    duplicate = Node(node.label)
    duplicate.left = _copy(node.left)
    duplicate.right = _copy(node.right)
    if duplicate.left is not None:
        duplicate.left.parent = duplicate
    if duplicate.right is not None:
        duplicate.right.parent = duplicate
    return duplicate


def _count(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def _same(first: Optional[Node], second: Optional[Node]) -> bool:
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.label == second.label
        and _same(first.left, second.left)
        and _same(first.right, second.right)
    )


def _require(node: Optional[Node]) -> Node:
    if node is None:
        raise ValueError("operation needs a node, not the null node")
    return node


class BinaryTree:
    """A binary tree; ``root`` is ``None`` when the tree is empty."""

    def __init__(self, label: Any = _EMPTY) -> None:
        self.root: Optional[Node] = None if label is _EMPTY else Node(label)

    @classmethod
    def _from_root(cls, root: Optional[Node]) -> "BinaryTree":
        tree = cls()
        if root is not None:
            root.parent = None
        tree.root = root
        return tree

    def copy(self) -> "BinaryTree":
        """Return a deep copy of the tree."""
        return BinaryTree._from_root(_copy(self.root))

    def set_root(self, label: Any) -> None:
        """Replace the whole tree by a single node labelled ``label``."""
        self.root = Node(label)

    def assign_subtree(self, node: Optional[Node]) -> None:
        """Make this tree a copy of the branch hanging from ``node``."""
        duplicate = _copy(node)
        if duplicate is not None:
            duplicate.parent = None
        self.root = duplicate

    def prune_left(self, node: Optional[Node]) -> "BinaryTree":
        """Detach and return the left branch of ``node``."""
        node = _require(node)
        branch, node.left = node.left, None
        return BinaryTree._from_root(branch)

    def prune_right(self, node: Optional[Node]) -> "BinaryTree":
        """Detach and return the right branch of ``node``."""
        node = _require(node)
        branch, node.right = node.right, None
        return BinaryTree._from_root(branch)

    def insert_left(self, node: Optional[Node], branch: "BinaryTree") -> None:
        """Hang ``branch`` as the left child of ``node``, emptying ``branch``.

        Whatever hung to the left of ``node`` is discarded.
        """
        node = _require(node)
        node.left = branch.root
        if node.left is not None:
            node.left.parent = node
            branch.root = None

    def insert_right(self, node: Optional[Node], branch: "BinaryTree") -> None:
        """Hang ``branch`` as the right child of ``node``, emptying ``branch``.

        Whatever hung to the right of ``node`` is discarded.
        """
        node = _require(node)
        node.right = branch.root
        if node.right is not None:
            node.right.parent = node
            branch.root = None

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def is_empty(self) -> bool:
        """Return True when the tree has no nodes."""
        return self.root is None

    def __len__(self) -> int:
        return _count(self.root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryTree):
            return NotImplemented
        return _same(self.root, other.root)

    __hash__ = None  # type: ignore[assignment]

    def height(self, node: Optional[Node]) -> int:
        """Height of the branch at ``node``; -1 for the null node."""
        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))