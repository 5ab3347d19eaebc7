import io
import random
import sys

import pytest

from arbolado.height_avl import HeightAVL, HeightNode, main


def _check(node, parent=None):
    """Verify links, stored heights, ordering and balance; return height."""
    if node is None:
        return -1
    assert node.parent is parent
    left = _check(node.left, node)
    right = _check(node.right, node)
    if node.left is not None:
        assert node.left.label < node.label
    if node.right is not None:
        assert node.right.label > node.label
    assert abs(left - right) <= 1
    assert node.height == max(left, right) + 1
    return node.height


def _build(values):
    tree = HeightAVL()
    for value in values:
        tree.insert(value)
    return tree


def test_empty_tree():
    tree = HeightAVL()
    assert tree.is_empty()
    assert len(tree) == 0
    assert list(tree) == []
    assert 3 not in tree


def test_single_label_constructor():
    tree = HeightAVL(5)
    assert list(tree) == [5]
    assert tree.with_heights() == [(5, 0)]


def test_too_many_arguments():
    with pytest.raises(TypeError):
        HeightAVL(1, 2)


def test_ascending_three_rotates():
    tree = _build([1, 2, 3])
    assert tree.root.label == 2
    assert tree.with_heights() == [(1, 0), (2, 1), (3, 0)]


def test_ascending_seven_is_perfect():
    tree = _build(range(1, 8))
    assert tree.root.label == 4
    assert _check(tree.root) == 2
    assert list(tree) == list(range(1, 8))


def test_double_rotation():
    tree = _build([3, 1, 2])
    assert tree.root.label == 2
    _check(tree.root)


def test_duplicate_not_inserted():
    tree = _build([4, 2, 6])
    assert tree.insert(2) is False
    assert tree.insert(5) is True
    assert list(tree) == [2, 4, 5, 6]


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_inserts_keep_invariants(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 200) for _ in range(150)]
    tree = _build(values)
    _check(tree.root)
    assert list(tree) == sorted(set(values))
    assert len(tree) == len(set(values))
    assert all(value in tree for value in values)


@pytest.mark.parametrize("seed", [4, 5, 6])
def test_random_removals_keep_invariants(seed):
    rng = random.Random(seed)
    values = list(set(rng.randint(0, 300) for _ in range(120)))
    tree = _build(values)
    rng.shuffle(values)
    remaining = set(values)
    for value in values[:80]:
        tree.remove(value)
        remaining.discard(value)
        _check(tree.root)
        assert list(tree) == sorted(remaining)
        assert value not in tree


def test_remove_all_empties_tree():
    tree = _build([5, 3, 8, 1, 4])
    for value in [5, 3, 8, 1, 4]:
        tree.remove(value)
    assert tree.is_empty()
    assert tree.root is None


def test_remove_absent_is_noop():
    tree = _build([2, 1, 3])
    before = tree.copy()
    tree.remove(10)
    assert tree == before


def test_remove_root_with_two_children_uses_successor():
    tree = _build([2, 1, 3])
    tree.remove(2)
    assert tree.root.label == 3
    assert list(tree) == [1, 3]
    _check(tree.root)


def test_copy_is_equal_and_independent():
    tree = _build([10, 5, 15, 3])
    duplicate = tree.copy()
    assert duplicate == tree
    assert duplicate.with_heights() == tree.with_heights()
    duplicate.insert(20)
    assert duplicate != tree
    assert 20 not in tree


def test_constructor_from_tree_copies():
    tree = _build([1, 2, 3])
    other = HeightAVL(tree)
    assert other == tree
    assert other.root is not tree.root


def test_equality_depends_on_shape():
    first = HeightAVL()
    first.root = HeightNode(2)
    first.root.left = HeightNode(1, parent=first.root)
    second = HeightAVL()
    second.root = HeightNode(1)
    second.root.right = HeightNode(2, parent=second.root)
    assert list(first) == list(second)
    assert first != second


def test_clear():
    tree = _build([1, 2, 3])
    tree.clear()
    assert tree.is_empty()
    assert len(tree) == 0


def test_main_inserts_and_removes(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5 3 8\nfin\n9 3\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "El elemento 9 no esta" in out
    assert "5 (0) 8 (0)" in out.replace("5 (1) 8 (0)", "5 (0) 8 (0)") or "5 (1) 8 (0)" in out
    assert "Elementos ordenados con sus alturas: 3 (0) 5 (1) 8 (0)" in out


def test_main_with_no_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main() == 0
    assert "Dime un elemento a borrar" in capsys.readouterr().out