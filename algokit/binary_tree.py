"""Binary trees and recursive algorithms over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, where None marks a missing child.

    Missing nodes get no children of their own, so their slots are skipped.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None

    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        parent = pending.popleft()
        try:
            left = next(items)
        except StopIteration:
            break
        if left is not None:
            parent.left = TreeNode(left)
            pending.append(parent.left)
        try:
            right = next(items)
        except StopIteration:
            break
        if right is not None:
            parent.right = TreeNode(right)
            pending.append(parent.right)
    return root


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    right = root.right
    root.right = invert_tree(root.left)
    root.left = invert_tree(right)
    return root


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path from the root to a leaf."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in depth by at most one."""

    def balanced_height(node: Optional[TreeNode]) -> Optional[int]:
        if node is None:
            return 0
        left = balanced_height(node.left)
        if left is None:
            return None
        right = balanced_height(node.right)
        if right is None:
            return None
        if abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return balanced_height(root) is not None


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    if p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def is_subtree(root: Optional[TreeNode], sub_root: Optional[TreeNode]) -> bool:
    """Tell whether some node of ``root`` heads a tree identical to ``sub_root``."""
    if root is None:
        return False
    if is_same_tree(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield node.val
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in root, left, right order."""
    return list(_preorder(root))


def tree_to_str(root: Optional[TreeNode]) -> str:
    """Render the tree as ``val(left)(right)``, omitting parentheses that carry nothing.

    An empty left pair ``()`` is kept when a right child exists.
    """
    if root is None:
        return ""
    parts = [str(root.val)]
    if root.left is not None:
        parts.append(f"({tree_to_str(root.left)})")
    elif root.right is not None:
        parts.append("()")
    if root.right is not None:
        parts.append(f"({tree_to_str(root.right)})")
    return "".join(parts)