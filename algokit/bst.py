"""Binary search trees and a few checks on plain binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Optional

from algokit.binary_tree import (
    TreeNode,
    count_nodes,
    height,
    inorder,
    postorder,
    preorder,
    sum_nodes,
)

__all__ = [
    "BinarySearchTree",
    "is_difference_tree",
    "min_depth",
    "sibling_difference_sum",
]

_INDENT = 10


class BinarySearchTree:
    """A binary search tree; equal values go to the left subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[TreeNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree."""
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value <= current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __contains__(self, value: object) -> bool:
        current = self.root
        while current is not None:
            if current.value == value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def delete(self, value: int) -> None:
        """Remove one node holding ``value``; nothing happens when it is absent."""

        def remove(node: Optional[TreeNode], target: int) -> Optional[TreeNode]:
            if node is None:
                return None
            if target < node.value:
                node.left = remove(node.left, target)
            elif target > node.value:
                node.right = remove(node.right, target)
            elif node.left is None:
                return node.right
            elif node.right is None:
                return node.left
            else:
                successor = node.right
                while successor.left is not None:
                    successor = successor.left
                node.value = successor.value
                node.right = remove(node.right, successor.value)
            return node

        self.root = remove(self.root, value)

    def _require_root(self) -> TreeNode:
        if self.root is None:
            raise ValueError("tree is empty")
        return self.root

    def minimum(self) -> int:
        """Smallest value in the tree."""
        node = self._require_root()
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> int:
        """Largest value in the tree."""
        node = self._require_root()
        while node.right is not None:
            node = node.right
        return node.value

    def level_of(self, value: int) -> int:
        """Depth of the node holding ``value`` (the root is 0), or -1 if absent."""
        node = self.root
        depth = 0
        while node is not None:
            if node.value == value:
                return depth
            node = node.left if value < node.value else node.right
            depth += 1
        return -1

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        return inorder(self.root)

    def preorder(self) -> list[int]:
        """Values with each node before its subtrees."""
        return preorder(self.root)

    def postorder(self) -> list[int]:
        """Values with each node after its subtrees."""
        return postorder(self.root)

    def level_order(self) -> list[int]:
        """Values read breadth first, left to right."""
        if self.root is None:
            return []
        result: list[int] = []
        waiting: deque[TreeNode] = deque([self.root])
        while waiting:
            node = waiting.popleft()
            result.append(node.value)
            waiting.extend(child for child in (node.left, node.right) if child is not None)
        return result

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return height(self.root)

    def diameter(self) -> int:
        """Number of edges on the longest path between two nodes."""

        def measure(node: Optional[TreeNode]) -> tuple[int, int]:
            if node is None:
                return 0, 0
            left_height, left_best = measure(node.left)
            right_height, right_best = measure(node.right)
            best = max(left_height + right_height, left_best, right_best)
            return 1 + max(left_height, right_height), best

        return measure(self.root)[1]

    def total(self) -> int:
        """Sum of every value in the tree."""
        return sum_nodes(self.root)

    def __len__(self) -> int:
        return count_nodes(self.root)

    def count_right_nodes(self) -> int:
        """Number of nodes that have a right child."""
        return sum(1 for node in self._nodes() if node.right is not None)

    def count_leaves(self) -> int:
        """Number of nodes without children."""
        return sum(1 for node in self._nodes() if node.left is None and node.right is None)

    def _nodes(self) -> Iterator[TreeNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            stack.extend(child for child in (node.left, node.right) if child is not None)

    def render(self) -> str:
        """Sideways drawing: right subtree above, ten spaces per level."""

        def lines(node: Optional[TreeNode], depth: int) -> Iterator[str]:
            if node is None:
                return
            yield from lines(node.right, depth + 1)
            yield "\n" + " " * (_INDENT * depth) + f"{node.value}\n"
            yield from lines(node.left, depth + 1)

        return "".join(lines(self.root, 0))

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.preorder()!r})"


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def is_difference_tree(root: Optional[TreeNode]) -> bool:
    """Whether every inner node equals its left subtree's sum minus its right's."""
    if root is None or _is_leaf(root):
        return True
    if root.value != sum_nodes(root.left) - sum_nodes(root.right):
        return False
    return is_difference_tree(root.left) and is_difference_tree(root.right)


def min_depth(root: Optional[TreeNode]) -> int:
    """Edges down to the shallowest leaf, a missing child counting as depth 0."""
    if root is None or _is_leaf(root):
        return 0
    return 1 + min(min_depth(root.left), min_depth(root.right))


def sibling_difference_sum(root: Optional[TreeNode]) -> int:
    """Sum of ``left - right`` over every node that has both children."""
    if root is None:
        return 0
    own = 0
    if root.left is not None and root.right is not None:
        own = root.left.value - root.right.value
    return own + sibling_difference_sum(root.left) + sibling_difference_sum(root.right)