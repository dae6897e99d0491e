"""Binary tree traversals and structural queries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _children(node: TreeNode) -> Iterator[TreeNode]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in _children(node)]


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Values visited left subtree, node, right subtree."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Values visited node, left subtree, right subtree."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Values visited left subtree, right subtree, node."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        stack.extend(_children(node))
    result.reverse()
    return result


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by depth, each level read left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by depth, alternating left-to-right and right-to-left."""
    return [
        values[::-1] if depth % 2 else values
        for depth, values in enumerate(level_order(root))
    ]


def right_side_view(root: TreeNode | None) -> list[int]:
    """The rightmost value at every depth, from the top down."""
    return [level[-1].val for level in _levels(root)]


def width_of_binary_tree(root: TreeNode | None) -> int:
    """Largest span of any level, counting the gaps between its end nodes."""
    if root is None:
        return 0
    best = 1
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        first = level[0][1]
        following: list[tuple[TreeNode, int]] = []
        for node, index in level:
            offset = (index - first) * 2
            if node.left is not None:
                following.append((node.left, offset + 1))
            if node.right is not None:
                following.append((node.right, offset + 2))
        if following:
            best = max(best, following[-1][1] - following[0][1] + 1)
        level = following
    return best


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Every root-to-leaf path written as values joined by "->"."""
    paths: list[str] = []
    stack: list[tuple[TreeNode, str]] = [(root, str(root.val))] if root is not None else []
    while stack:
        node, path = stack.pop()
        if node.left is None and node.right is None:
            paths.append(path)
            continue
        if node.right is not None:
            stack.append((node.right, f"{path}->{node.right.val}"))
        if node.left is not None:
            stack.append((node.left, f"{path}->{node.left.val}"))
    return paths


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Whether both trees have the same shape and the same values."""
    stack = [(p, q)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.right, b.right))
        stack.append((a.left, b.left))
    return True


def is_symmetric(root: TreeNode | None) -> bool:
    """Whether the tree is a mirror image of itself."""
    if root is None:
        return True
    stack = [(root.left, root.right)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.right, b.left))
        stack.append((a.left, b.right))
    return True


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    if root is None:
        return 0
    heights: dict[int, int] = {}
    best = 0
    stack: list[tuple[TreeNode, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if not children_done:
            stack.append((node, True))
            stack.extend((child, False) for child in _children(node))
            continue
        left = heights.get(id(node.left), 0) if node.left is not None else 0
        right = heights.get(id(node.right), 0) if node.right is not None else 0
        best = max(best, left + right)
        heights[id(node)] = max(left, right) + 1
    return best


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place by swapping every node's children; return the root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(_children(node))
    return root