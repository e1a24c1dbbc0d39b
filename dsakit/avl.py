"""Self-balancing AVL search tree with insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["AVLNode", "AVLTree"]


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; a leaf has height 1."""

    key: Any
    left: AVLNode | None = field(default=None, repr=False)
    right: AVLNode | None = field(default=None, repr=False)
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(p: AVLNode) -> AVLNode:
    pl = p.left
    assert pl is not None
    p.left = pl.right
    pl.right = p
    _update(p)
    _update(pl)
    return pl


def _rotate_left(p: AVLNode) -> AVLNode:
    pr = p.right
    assert pr is not None
    p.right = pr.left
    pr.left = p
    _update(p)
    _update(pr)
    return pr


def _rebalance(p: AVLNode) -> AVLNode:
    """Restore the AVL property at p with an LL, LR, RR or RL rotation."""
    _update(p)
    factor = _balance(p)
    if factor == 2:
        if _balance(p.left) >= 0:
            return _rotate_right(p)
        assert p.left is not None
        p.left = _rotate_left(p.left)
        return _rotate_right(p)
    if factor == -2:
        if _balance(p.right) <= 0:
            return _rotate_left(p)
        assert p.right is not None
        p.right = _rotate_right(p.right)
        return _rotate_left(p)
    return p


class AVLTree:
    """A binary search tree kept height-balanced by rotations.

    Keys are unique; inserting a key already present changes nothing.
    Iteration yields the keys in ascending order.
    """

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def __iter__(self) -> Iterator[Any]:
        stack: list[AVLNode] = []
        p = self.root
        while p is not None or stack:
            if p is not None:
                stack.append(p)
                p = p.left
            else:
                node = stack.pop()
                yield node.key
                p = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, key: Any) -> bool:
        p = self.root
        while p is not None:
            if key < p.key:
                p = p.left
            elif key > p.key:
                p = p.right
            else:
                return True
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert(self, key: Any) -> None:
        """Add key to the tree, rebalancing on the way back up."""

        def insert(p: AVLNode | None) -> AVLNode:
            if p is None:
                return AVLNode(key)
            if key < p.key:
                p.left = insert(p.left)
            elif key > p.key:
                p.right = insert(p.right)
            else:
                return p
            return _rebalance(p)

        self.root = insert(self.root)

    def delete(self, key: Any) -> None:
        """Remove key from the tree; raise KeyError if it is absent.

        A node with children takes the key of its inorder predecessor when
        its left subtree is taller, otherwise of its inorder successor.
        """

        def delete(p: AVLNode | None, key: Any) -> AVLNode | None:
            if p is None:
                raise KeyError(key)
            if key < p.key:
                p.left = delete(p.left, key)
            elif key > p.key:
                p.right = delete(p.right, key)
            else:
                if p.left is None and p.right is None:
                    return None
                if _height(p.left) > _height(p.right):
                    q = p.left
                    assert q is not None
                    while q.right is not None:
                        q = q.right
                    p.key = q.key
                    p.left = delete(p.left, q.key)
                else:
                    q = p.right
                    assert q is not None
                    while q.left is not None:
                        q = q.left
                    p.key = q.key
                    p.right = delete(p.right, q.key)
            return _rebalance(p)

        self.root = delete(self.root, key)