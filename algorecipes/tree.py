"""Binary trees: building, traversing, comparing and reshaping them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from its level-order listing, ``None`` marking a missing child.

    Raises ValueError when a value has no parent slot left to fill.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        if any(value is not None for value in items):
            raise ValueError("level-order values follow a missing root")
        return None

    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    exhausted = False
    while pending and not exhausted:
        node = pending.popleft()
        for side in ("left", "right"):
            value = next(items, _END)
            if value is _END:
                exhausted = True
                break
            if value is not None:
                child = TreeNode(value)  # type: ignore[arg-type]
                setattr(node, side, child)
                pending.append(child)
    if any(value is not None for value in items):
        raise ValueError("level-order values have no parent to attach to")
    return root


def to_level_order(root: TreeNode | None) -> list[int | None]:
    """Return the level-order listing of a tree, without trailing ``None``s."""
    result: list[int | None] = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, node, right order."""
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


def preorder(root: TreeNode | None) -> list[int]:
    """Return the values in node, left, right order."""
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


def postorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, right, node order."""
    reversed_order: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reversed_order.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed_order[::-1]


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced search tree from sorted values.

    The root of each subtree is the lower middle element of its slice.
    """
    if not nums:
        return None
    mid = (len(nums) - 1) // 2
    return TreeNode(
        nums[mid],
        sorted_array_to_bst(nums[:mid]),
        sorted_array_to_bst(nums[mid + 1 :]),
    )


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _is_mirror(p: TreeNode | None, q: TreeNode | None) -> bool:
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return _is_mirror(p.left, q.right) and _is_mirror(p.right, q.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    return root is None or _is_mirror(root.left, root.right)


def is_subtree(root: TreeNode | None, sub_root: TreeNode | None) -> bool:
    """Tell whether ``sub_root`` equals some node of ``root`` with all its descendants.

    An empty ``root`` holds no subtree; an empty ``sub_root`` is in any non-empty tree.
    """
    if root is None:
        return False
    if sub_root is None:
        return True
    if is_same_tree(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def merge_trees(root1: TreeNode | None, root2: TreeNode | None) -> TreeNode | None:
    """Overlay two trees, summing values where both have a node.

    Overlapping nodes are new; where only one tree has a subtree, that subtree
    is shared with the result.
    """
    if root1 is None:
        return root2
    if root2 is None:
        return root1
    return TreeNode(
        root1.val + root2.val,
        merge_trees(root1.left, root2.left),
        merge_trees(root1.right, root2.right),
    )