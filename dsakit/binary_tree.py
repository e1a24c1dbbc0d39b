"""Binary trees: construction, traversals and node counts."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

__all__ = ["TreeNode", "BinaryTree"]


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    data: Any
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


class BinaryTree:
    """A binary tree with recursive and iterative traversals.

    Every traversal returns a list of the node values in visiting order.
    """

    def __init__(self, root: TreeNode | None = None) -> None:
        self.root = root

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level_order={self.level_order()!r})"

    @classmethod
    def from_level_order(cls, values: Iterable[Any]) -> BinaryTree:
        """Build a tree from values given level by level.

        The first value is the root; then, for each node in the order it
        was created, come the values of its left and right child. ``None``
        stands for a missing child, and values that run out before every
        node has been given children leave those children missing.
        """
        it = iter(values)
        first = next(it, None)
        if first is None:
            return cls()
        root = TreeNode(first)
        queue = deque([root])
        while queue:
            p = queue.popleft()
            left = next(it, None)
            if left is not None:
                p.left = TreeNode(left)
                queue.append(p.left)
            right = next(it, None)
            if right is not None:
                p.right = TreeNode(right)
                queue.append(p.right)
        return cls(root)

    @classmethod
    def from_traversals(
        cls, inorder: Sequence[Any], preorder: Sequence[Any]
    ) -> BinaryTree:
        """Rebuild the tree that has the given inorder and preorder traversals."""
        if len(inorder) != len(preorder):
            raise ValueError("traversals differ in length")
        pending = iter(preorder)

        def build(start: int, end: int) -> TreeNode | None:
            if start > end:
                return None
            value = next(pending)
            try:
                split = inorder.index(value, start, end + 1)
            except ValueError:
                raise ValueError(
                    f"value {value!r} is not where the inorder traversal needs it"
                ) from None
            node = TreeNode(value)
            node.left = build(start, split - 1)
            node.right = build(split + 1, end)
            return node

        return cls(build(0, len(inorder) - 1))

    def preorder(self) -> list[Any]:
        """Visit node, left subtree, right subtree."""
        out: list[Any] = []

        def visit(p: TreeNode | None) -> None:
            if p is not None:
                out.append(p.data)
                visit(p.left)
                visit(p.right)

        visit(self.root)
        return out

    def inorder(self) -> list[Any]:
        """Visit left subtree, node, right subtree."""
        out: list[Any] = []

        def visit(p: TreeNode | None) -> None:
            if p is not None:
                visit(p.left)
                out.append(p.data)
                visit(p.right)

        visit(self.root)
        return out

    def postorder(self) -> list[Any]:
        """Visit left subtree, right subtree, node."""
        out: list[Any] = []

        def visit(p: TreeNode | None) -> None:
            if p is not None:
                visit(p.left)
                visit(p.right)
                out.append(p.data)

        visit(self.root)
        return out

    def iterative_preorder(self) -> list[Any]:
        """Preorder traversal using an explicit stack."""
        out: list[Any] = []
        stack: list[TreeNode] = []
        p = self.root
        while p is not None or stack:
            if p is not None:
                out.append(p.data)
                stack.append(p)
                p = p.left
            else:
                p = stack.pop().right
        return out

    def iterative_inorder(self) -> list[Any]:
        """Inorder traversal using an explicit stack."""
        out: list[Any] = []
        stack: list[TreeNode] = []
        p = self.root
        while p is not None or stack:
            if p is not None:
                stack.append(p)
                p = p.left
            else:
                node = stack.pop()
                out.append(node.data)
                p = node.right
        return out

    def iterative_postorder(self) -> list[Any]:
        """Postorder traversal using a stack of nodes marked once visited."""
        out: list[Any] = []
        stack: list[tuple[TreeNode, bool]] = []
        p = self.root
        while p is not None or stack:
            if p is not None:
                stack.append((p, False))
                p = p.left
            else:
                node, right_done = stack.pop()
                if right_done:
                    out.append(node.data)
                else:
                    stack.append((node, True))
                    p = node.right
        return out

    def level_order(self) -> list[Any]:
        """Visit the nodes level by level, left to right."""
        if self.root is None:
            return []
        out = [self.root.data]
        queue = deque([self.root])
        while queue:
            p = queue.popleft()
            for child in (p.left, p.right):
                if child is not None:
                    out.append(child.data)
                    queue.append(child)
        return out

    def _count_where(self, wanted: Any) -> int:
        def count(p: TreeNode | None) -> int:
            if p is None:
                return 0
            here = 1 if wanted(p) else 0
            return count(p.left) + count(p.right) + here

        return count(self.root)

    def count(self) -> int:
        """Return the number of nodes."""
        return self._count_where(lambda p: True)

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""

        def height(p: TreeNode | None) -> int:
            if p is None:
                return 0
            return max(height(p.left), height(p.right)) + 1

        return height(self.root)

    def count_leaves(self) -> int:
        """Return the number of nodes with no children."""
        return self._count_where(lambda p: p.left is None and p.right is None)

    def count_degree_two(self) -> int:
        """Return the number of nodes with two children."""
        return self._count_where(
            lambda p: p.left is not None and p.right is not None
        )

    def count_degree_one_or_two(self) -> int:
        """Return the number of nodes with at least one child."""
        return self._count_where(
            lambda p: p.left is not None or p.right is not None
        )

    def count_degree_one(self) -> int:
        """Return the number of nodes with exactly one child."""
        return self._count_where(
            lambda p: (p.left is not None) != (p.right is not None)
        )