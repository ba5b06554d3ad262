"""Breadth-first traversal of binary trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def level_order_traversal(root: TreeNode | None) -> list[list[int]]:
    """Return the node values level by level, left to right."""
    if root is None:
        return []
    result: list[list[int]] = []
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        result.append(level)
    return result