"""Questions asked of a binary tree: diameter, tilt, cousins, path sums and more."""

from __future__ import annotations

from algorecipes.tree import TreeNode, inorder


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def find_tilt(root: TreeNode | None) -> int:
    """Return the sum over all nodes of |sum of left subtree - sum of right subtree|."""
    total_tilt = 0

    def subtree_sum(node: TreeNode | None) -> int:
        nonlocal total_tilt
        if node is None:
            return 0
        left = subtree_sum(node.left)
        right = subtree_sum(node.right)
        total_tilt += abs(left - right)
        return node.val + left + right

    subtree_sum(root)
    return total_tilt


def minimum_difference(root: TreeNode | None) -> int:
    """Return the smallest absolute difference between in-order neighbours of a BST.

    Raises ValueError when the tree has fewer than two nodes.
    """
    values = inorder(root)
    if len(values) < 2:
        raise ValueError("a tree needs at least two nodes to have a difference")
    return min(abs(b - a) for a, b in zip(values, values[1:]))


def _locate(
    root: TreeNode, target: int
) -> tuple[int, TreeNode | None] | None:
    """Return (depth, parent) of the first node holding ``target``, or None."""
    stack: list[tuple[TreeNode, int, TreeNode | None]] = [(root, 0, None)]
    while stack:
        node, depth, parent = stack.pop()
        if node.val == target:
            return depth, parent
        if node.right is not None:
            stack.append((node.right, depth + 1, node))
        if node.left is not None:
            stack.append((node.left, depth + 1, node))
    return None


def is_cousins(root: TreeNode | None, x: int, y: int) -> bool:
    """Tell whether the nodes holding ``x`` and ``y`` share a depth but not a parent."""
    if root is None:
        return False
    found_x = _locate(root, x)
    found_y = _locate(root, y)
    if found_x is None or found_y is None:
        return False
    depth_x, parent_x = found_x
    depth_y, parent_y = found_y
    return depth_x == depth_y and parent_x is not parent_y


def second_minimum_value(root: TreeNode | None) -> int | None:
    """Return the second smallest distinct value of a min-rooted special tree.

    Each node's value is the smaller of its two children's, so branches whose
    root already exceeds the minimum need not be searched deeper. Returns None
    when no such value exists.
    """
    if root is None:
        return None
    smallest = root.val
    candidate: int | None = None
    stack: list[TreeNode] = [root]
    while stack:
        node = stack.pop()
        if node.val > smallest:
            if candidate is None or node.val < candidate:
                candidate = node.val
        elif node.val == smallest:
            stack.extend(child for child in (node.left, node.right) if child is not None)
    return candidate


def sum_root_to_leaf(root: TreeNode | None) -> int:
    """Sum the binary numbers spelt by the 0/1 values on each root-to-leaf path."""
    total = 0
    stack: list[tuple[TreeNode, int]] = [(root, 0)] if root is not None else []
    while stack:
        node, prefix = stack.pop()
        number = prefix * 2 + node.val
        if node.left is None and node.right is None:
            total += number
            continue
        stack.extend(
            (child, number) for child in (node.left, node.right) if child is not None
        )
    return total