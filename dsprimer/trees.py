"""Binary tree nodes, depth-first traversals and binary-search-tree queries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import pairwise
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node with optional left and right children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield values root, left subtree, right subtree."""
    if node is not None:
        yield node.data
        yield from preorder(node.left)
        yield from preorder(node.right)


def inorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree, root, right subtree."""
    if node is not None:
        yield from inorder(node.left)
        yield node.data
        yield from inorder(node.right)


def postorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree, right subtree, root."""
    if node is not None:
        yield from postorder(node.left)
        yield from postorder(node.right)
        yield node.data


def is_bst(node: TreeNode | None) -> bool:
    """Report whether the in-order values are strictly increasing."""
    return all(earlier < later for earlier, later in pairwise(inorder(node)))


def search(node: TreeNode | None, key: Any) -> TreeNode | None:
    """Find the node holding ``key`` in a binary search tree, recursively."""
    if node is None or node.data == key:
        return node
    if node.data > key:
        return search(node.left, key)
    return search(node.right, key)


def search_iterative(node: TreeNode | None, key: Any) -> TreeNode | None:
    """Find the node holding ``key`` in a binary search tree with a loop."""
    while node is not None:
        if node.data == key:
            return node
        node = node.left if node.data > key else node.right
    return None