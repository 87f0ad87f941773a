"""Binary tree nodes and root-to-leaf paths."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Return every root-to-leaf path as values joined by '->', left subtrees first."""

    def walk(node: TreeNode | None, prefix: list[str]) -> Iterator[str]:
        if node is None:
            return
        path = [*prefix, str(node.val)]
        if node.left is None and node.right is None:
            yield "->".join(path)
            return
        yield from walk(node.left, path)
        yield from walk(node.right, path)

    return list(walk(root, []))