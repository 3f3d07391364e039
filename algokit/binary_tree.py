"""Binary trees: building, recursive and iterative traversals, and measures."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple, Optional

__all__ = [
    "NULL_MARKER",
    "TreeNode",
    "Traversals",
    "build_preorder",
    "populate_complete",
    "preorder",
    "inorder",
    "postorder",
    "preorder_iterative",
    "inorder_iterative",
    "postorder_iterative",
    "all_traversals",
    "level_order",
    "count_nodes",
    "sum_nodes",
    "height",
    "diameter",
]

NULL_MARKER = -1
"""Value that stands for a missing child in a preorder description."""


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class Traversals(NamedTuple):
    """The three depth-first orders of one tree."""

    preorder: list[int]
    inorder: list[int]
    postorder: list[int]


def build_preorder(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from a preorder listing where ``-1`` marks a missing child.

    Values left over once the tree is complete are ignored.
    """
    stream: Iterator[int] = iter(values)

    def build() -> Optional[TreeNode]:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("preorder description ends before the tree is complete") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def populate_complete(size: int) -> Optional[TreeNode]:
    """Complete binary tree holding ``1..size`` in level order."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return None
    root = TreeNode(1)
    waiting: deque[TreeNode] = deque([root])
    next_value = 2
    while next_value <= size:
        parent = waiting.popleft()
        parent.left = TreeNode(next_value)
        waiting.append(parent.left)
        next_value += 1
        if next_value > size:
            break
        parent.right = TreeNode(next_value)
        waiting.append(parent.right)
        next_value += 1
    return root


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Node, then left subtree, then right subtree."""
    if root is None:
        return []
    return [root.value, *preorder(root.left), *preorder(root.right)]


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Left subtree, then node, then right subtree."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Left subtree, then right subtree, then node."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def preorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Preorder traversal driven by an explicit stack."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Inorder traversal driven by an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.value)
        current = current.right
    return result


def postorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Postorder traversal with a single stack holding right children ahead."""
    if root is None:
        return []
    result: list[int] = []
    stack: list[TreeNode] = []
    node: Optional[TreeNode] = root
    while True:
        while node is not None:
            if node.right is not None:
                stack.append(node.right)
            stack.append(node)
            node = node.left
        node = stack.pop()
        if node.right is not None and stack and stack[-1] is node.right:
            # The right subtree is still pending: visit it before this node.
            stack.pop()
            stack.append(node)
            node = node.right
        else:
            result.append(node.value)
            node = None
        if not stack:
            break
    return result


def all_traversals(root: Optional[TreeNode]) -> Traversals:
    """Preorder, inorder and postorder gathered in one stack-driven walk."""
    pre: list[int] = []
    ino: list[int] = []
    post: list[int] = []
    if root is None:
        return Traversals(pre, ino, post)
    # Each entry holds a node and how many times it has been reached.
    stack: list[list] = [[root, 1]]
    while stack:
        entry = stack[-1]
        node, visits = entry
        if visits == 1:
            entry[1] = 2
            pre.append(node.value)
            if node.left is not None:
                stack.append([node.left, 1])
        elif visits == 2:
            entry[1] = 3
            ino.append(node.value)
            if node.right is not None:
                stack.append([node.right, 1])
        else:
            post.append(node.value)
            stack.pop()
    return Traversals(pre, ino, post)


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, each level read left to right."""
    if root is None:
        return []
    levels: list[list[int]] = []
    current = [root]
    while current:
        levels.append([node.value for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def count_nodes(root: Optional[TreeNode]) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def sum_nodes(root: Optional[TreeNode]) -> int:
    """Sum of every value in the tree."""
    if root is None:
        return 0
    return root.value + sum_nodes(root.left) + sum_nodes(root.right)


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def diameter(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest path between any two nodes."""

    def measure(node: Optional[TreeNode]) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_height, left_diameter = measure(node.left)
        right_height, right_diameter = measure(node.right)
        through = left_height + right_height + 1
        return (
            1 + max(left_height, right_height),
            max(through, left_diameter, right_diameter),
        )

    return measure(root)[1]