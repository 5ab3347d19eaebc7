import io
import random

import pytest

from arbolado.avl import AVLTree, intersection, main, union


def _check(node):
    """Return the height of ``node`` after asserting balance and parent links."""
    if node is None:
        return -1
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
    left = _check(node.left)
    right = _check(node.right)
    assert abs(left - right) <= 1
    return 1 + max(left, right)


def _build(items):
    tree = AVLTree()
    for item in items:
        tree.insert(item)
    return tree


def test_ascending_insertions_stay_balanced():
    tree = _build(range(1, 16))
    assert list(tree) == list(range(1, 16))
    assert _check(tree._tree.root) == 3
    assert tree._tree.root.parent is None


def test_three_ascending_items_rotate_to_middle_root():
    tree = _build([1, 2, 3])
    assert tree.schema() == "-- 2\n   |-- 3\n    -- 1\n"


def test_double_rotation_case():
    tree = _build([3, 1, 2])
    assert tree._tree.root.label == 2
    assert list(tree) == [1, 2, 3]


def test_random_insertions_keep_order_and_balance():
    rng = random.Random(7)
    items = [rng.randint(0, 50) for _ in range(80)]
    tree = _build(items)
    assert list(tree) == sorted(items)
    assert len(tree) == len(items)
    _check(tree._tree.root)


def test_contains():
    tree = _build([5, 3, 8, 1])
    assert 3 in tree
    assert 8 in tree
    assert 4 not in tree
    assert 1 not in AVLTree()


def test_duplicates_are_kept():
    tree = _build([5, 5, 5])
    assert list(tree) == [5, 5, 5]
    tree.remove(5)
    assert list(tree) == [5, 5]


def test_remove_keeps_balance():
    rng = random.Random(3)
    items = list(range(40))
    tree = _build(items)
    rng.shuffle(items)
    remaining = sorted(items)
    for item in items[:30]:
        tree.remove(item)
        remaining.remove(item)
        assert list(tree) == remaining
        _check(tree._tree.root)


def test_remove_missing_is_noop():
    tree = _build([2, 1, 3])
    tree.remove(42)
    assert list(tree) == [1, 2, 3]


def test_remove_everything_empties_tree():
    tree = _build([4, 2, 6])
    for item in (2, 4, 6):
        tree.remove(item)
    assert len(tree) == 0
    assert list(tree) == []


def test_single_label_constructor_and_copy():
    tree = AVLTree(10)
    assert list(tree) == [10]
    copy = AVLTree(tree)
    copy.insert(11)
    assert list(tree) == [10]
    assert list(copy) == [10, 11]


def test_constructor_rejects_extra_arguments():
    with pytest.raises(TypeError):
        AVLTree(1, 2)


def test_rotate_right_at_root():
    tree = _build([2, 1])
    pivot = tree.rotate_right(tree._tree.root)
    assert pivot.label == 1
    assert tree._tree.root is pivot
    assert list(tree) == [1, 2]
    assert tree._tree.root.right.parent is pivot


def test_rotate_left_under_parent():
    tree = _build([5, 3, 8, 9])
    eight = tree._tree.root.right
    pivot = tree.rotate_left(eight)
    assert pivot.label == 9
    assert tree._tree.root.right is pivot
    assert pivot.parent is tree._tree.root
    assert list(tree) == [3, 5, 8, 9]


def test_rotation_without_child_raises():
    tree = _build([1])
    with pytest.raises(ValueError):
        tree.rotate_right(tree._tree.root)
    with pytest.raises(ValueError):
        tree.rotate_left(tree._tree.root)


def test_rebalance_none_is_noop():
    tree = _build([1, 2])
    tree.rebalance(None)
    assert list(tree) == [1, 2]


def test_intersection_and_union():
    first = _build([1, 2, 3, 4])
    second = _build([3, 4, 5])
    assert list(intersection(first, second)) == [3, 4]
    assert list(union(first, second)) == [1, 2, 3, 4, 5]


def test_union_with_empty_tree():
    first = _build([2, 7])
    assert list(union(first, AVLTree())) == [2, 7]
    assert list(union(AVLTree(), first)) == [2, 7]
    assert list(intersection(first, AVLTree())) == []


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 3 8 -1 3 4 -1 8 -1 3 -1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "3 SÍ está en el AVL" in out
    assert "4 NO está en el AVL" in out
    assert out.endswith("-- 3\n")