import random

import pytest

from puzzlekit.trees import TreeNode, bst_insert, build_bst, distribute_coins, top_view


def _in_order(node):
    values = []
    stack = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def _mirror(node):
    if node is None:
        return None
    return TreeNode(node.val, _mirror(node.right), _mirror(node.left))


def test_build_bst_in_order_is_sorted():
    values = random.Random(7).sample(range(1000), 200)
    assert _in_order(build_bst(values)) == sorted(values)


def test_bst_insert_returns_root_and_sends_equal_left():
    root = bst_insert(None, 5)
    assert bst_insert(root, 5) is root
    assert root.left.val == 5
    assert root.right is None


def test_build_bst_handles_long_sorted_input():
    values = list(range(5000))
    assert _in_order(build_bst(values)) == values


def test_build_bst_empty():
    assert build_bst([]) is None


def test_top_view_example():
    assert top_view(build_bst([1, 2, 5, 3, 6, 4])) == [1, 2, 5, 6]


def test_top_view_of_right_chain_is_every_value():
    values = [3, 8, 11, 20, 31]
    assert top_view(build_bst(values)) == values


def test_top_view_of_left_chain_is_sorted():
    values = [31, 20, 11, 8, 3]
    assert top_view(build_bst(values)) == sorted(values)


def test_top_view_empty():
    assert top_view(None) == []


def test_distribute_coins_from_root():
    assert distribute_coins(TreeNode(3, TreeNode(0), TreeNode(0))) == 2


def test_distribute_coins_balanced_tree_needs_no_moves():
    root = build_bst([4, 2, 6, 1, 3, 5, 7])
    for node in _nodes(root):
        node.val = 1
    assert distribute_coins(root) == 0


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_distribute_coins_mirror_symmetric(seed):
    rng = random.Random(seed)
    root = build_bst(rng.sample(range(100), 15))
    nodes = list(_nodes(root))
    for node in nodes:
        node.val = 0
    for _ in nodes:
        rng.choice(nodes).val += 1
    assert distribute_coins(_mirror(root)) == distribute_coins(root)


def test_distribute_coins_empty_tree():
    assert distribute_coins(None) == distribute_coins(TreeNode(1))


def _nodes(root):
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node
        stack.extend((node.left, node.right))