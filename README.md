# arbolado

Tree data structures in plain Python, with no dependencies outside the standard library.

- `arbolado.binarytree`: a general binary tree (`BinaryTree`, `Node`). Nodes keep links to their parents. The tree can prune and graft branches (`prune_left`, `prune_right`, `insert_left`, `insert_right`) and copy a branch (`assign_subtree`). It also offers `height`, `copy`, `clear`, `is_empty`, `len()` and structural equality.
- `arbolado.treeio`: a text format for binary trees. Trees are written in preorder, with `n <label>` for a node and `x` for an empty child. The functions are `dumps`, `loads`, `dump` and `load`. When loading, each label goes through a `convert` callable, which is `str` by default. `loads` raises `ValueError` if the text ends early or has tokens left after the tree.
- `arbolado.treeschema`: a sideways sketch of a tree, with the right branch drawn above the left one. It comes from `schema_lines`, `format_schema` and `print_schema`.
- `arbolado.bst`: `BinarySearchTree`, an unbalanced search tree. Equal items go to the right. It supports `insert`, `remove`, `in`, in-order iteration, `len()` and `schema()`.
- `arbolado.avl`: `AVLTree`, a self-balancing search tree built on `BinaryTree`. It has explicit `rotate_left`, `rotate_right` and `rebalance`. The module also provides `intersection` and `union` of two trees. Rotations are logged at debug level through the `arbolado.avl` logger.
- `arbolado.height_avl`: `HeightAVL`, an AVL tree that stores a height in every node and rejects duplicates. For this tree `insert` returns `False` when the item is already present. `with_heights()` lists `(label, height)` pairs in order.
- `arbolado.listops`: small list helpers: `reverse_list`, `common_elements`, `insert_after` (the position counts from 1) and `format_list`.

## Usage

```python
from arbolado.bst import BinarySearchTree
from arbolado.avl import AVLTree, intersection
from arbolado.treeio import dumps, loads
from arbolado.binarytree import BinaryTree

bst = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    bst.insert(value)
print(list(bst))        # [20, 30, 40, 50, 70]
print(40 in bst)        # True
bst.remove(30)
print(bst.schema())

a = AVLTree()
b = AVLTree()
for v in range(10):
    a.insert(v)
for v in range(5, 15):
    b.insert(v)
print(list(intersection(a, b)))   # [5, 6, 7, 8, 9]

tree = loads("n 1 n 2 x x x ", int)
print(dumps(tree))                # "n 1 n 2 x x x "
```

## Command-line demos

```
arbolado-lists
arbolado-bst
arbolado-avl
arbolado-height-avl
```

- `arbolado-lists` runs the list helpers on a fixed example and prints the results. It reads no input.
- `arbolado-bst` fills a tree with 20 random numbers from 0 to 100 and prints them in order. It then reads integers from standard input, first to search for them and then to remove them. A negative number ends each phase.
- `arbolado-avl` reads integers from standard input in four phases, and a negative number ends each phase:
  1. Insert into a first tree.
  2. Search that tree.
  3. Remove from it.
  4. Insert into a second tree.

  At the end it prints the sketch of the intersection of the two trees.
- `arbolado-height-avl` inserts the integers from standard input up to the first token that is not a number. It then removes the integers that follow, one at a time. After each step it prints the elements with their stored heights. It stops when the tree becomes empty.

The search-tree demos print the tree's contents in order, together with its sketch, as they go.

## Tests

```
pip install -e .[test]
pytest
```