"""Binary tree node and algorithms over binary trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterator, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def inorder(self) -> Iterator[int]:
        """Yield the values of this subtree in in-order sequence."""
        stack: list[TreeNode] = []
        node: Optional[TreeNode] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.val
            node = node.right


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child is not None]


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and values."""
    pending = [(p, q)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pending.append((a.left, b.left))
        pending.append((a.right, b.right))
    return True


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a mirror image of itself."""
    if root is None:
        return True
    pending = [(root.left, root.right)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pending.append((a.left, b.right))
        pending.append((a.right, b.left))
    return True


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted values."""

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = start + (end - start) // 2
        return TreeNode(nums[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(nums) - 1)


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Return True if some root-to-leaf path has values summing to ``target_sum``."""
    if root is None:
        return False
    pending = [(root, root.val)]
    while pending:
        node, total = pending.pop()
        if node.left is None and node.right is None:
            if total == target_sum:
                return True
            continue
        for child in (node.left, node.right):
            if child is not None:
                pending.append((child, total + child.val))
    return False


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    return sum(len(level) for level in _levels(root))


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        node.left, node.right = node.right, node.left
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return root


def minimum_difference(root: Optional[TreeNode]) -> int:
    """Return the smallest difference between in-order neighbours of a search tree."""
    values = list(root.inorder()) if root is not None else []
    if len(values) < 2:
        raise ValueError("tree must hold at least two nodes")
    return min(abs(b - a) for a, b in pairwise(values))


def average_of_levels(root: Optional[TreeNode]) -> list[float]:
    """Return the mean node value of each level, top to bottom."""
    return [sum(node.val for node in level) / len(level) for level in _levels(root)]