"""Binary tree puzzles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def bst_insert(root: TreeNode | None, value: int) -> TreeNode:
    """Insert ``value`` into a search tree, equal values going left; return the root."""
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value <= current.val:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_bst(values: Iterable[int]) -> TreeNode | None:
    """Search tree built by inserting ``values`` in order."""
    root = None
    for value in values:
        root = bst_insert(root, value)
    return root


def top_view(root: TreeNode | None) -> list[int]:
    """Values seen looking down on the tree, from leftmost column to rightmost.

    A column whose first value seen is 0 takes the next value found in it.
    """
    if root is None:
        return []
    seen: dict[int, int] = {}
    queue = deque([(root, 0)])
    while queue:
        node, column = queue.popleft()
        if not seen.get(column):
            seen[column] = node.val
        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))
    return [seen[column] for column in sorted(seen)]


def distribute_coins(root: TreeNode | None) -> int:
    """Moves needed so every node holds one coin, a move passing one coin along an edge."""
    moves = 0
    excess: dict[int, int] = {}
    stack: list[tuple[TreeNode | None, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if node is None:
            continue
        if not children_done:
            stack.append((node, True))
            stack.append((node.left, False))
            stack.append((node.right, False))
            continue
        left = excess.pop(id(node.left), 0) if node.left is not None else 0
        right = excess.pop(id(node.right), 0) if node.right is not None else 0
        moves += abs(left) + abs(right)
        excess[id(node)] = node.val + left + right - 1
    return moves