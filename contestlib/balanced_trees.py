"""Self-balancing binary search trees: treap, splay tree and AVL tree."""

from __future__ import annotations

import random
from collections.abc import Iterator
from typing import Optional, Protocol


class _KeyedNode(Protocol):
    key: int
    left: Optional[_KeyedNode]
    right: Optional[_KeyedNode]


def _iter_inorder(root: Optional[_KeyedNode]) -> Iterator[int]:
    stack: list[_KeyedNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.key
        node = node.right


def _contains(root: Optional[_KeyedNode], key: int) -> bool:
    node = root
    while node is not None:
        if key == node.key:
            return True
        node = node.left if key < node.key else node.right
    return False


class _TreapNode:
    __slots__ = ("key", "priority", "size", "left", "right")

    def __init__(self, key: int, priority: float) -> None:
        self.key = key
        self.priority = priority
        self.size = 1
        self.left: Optional[_TreapNode] = None
        self.right: Optional[_TreapNode] = None


def _size(node: Optional[_TreapNode]) -> int:
    return node.size if node is not None else 0


def _resize(node: _TreapNode) -> None:
    node.size = 1 + _size(node.left) + _size(node.right)


class Treap:
    """Randomized search tree of distinct keys with order statistics."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self._root: Optional[_TreapNode] = None

    @staticmethod
    def _rotate_left(node: _TreapNode) -> _TreapNode:
        new_root = node.right
        assert new_root is not None
        node.right = new_root.left
        new_root.left = node
        _resize(node)
        _resize(new_root)
        return new_root

    @staticmethod
    def _rotate_right(node: _TreapNode) -> _TreapNode:
        new_root = node.left
        assert new_root is not None
        node.left = new_root.right
        new_root.right = node
        _resize(node)
        _resize(new_root)
        return new_root

    def _merge(
        self, left: Optional[_TreapNode], right: Optional[_TreapNode]
    ) -> Optional[_TreapNode]:
        if left is None or right is None:
            return left if left is not None else right
        if left.priority > right.priority:
            left.right = self._merge(left.right, right)
            _resize(left)
            return left
        right.left = self._merge(left, right.left)
        _resize(right)
        return right

    def _insert(self, node: Optional[_TreapNode], key: int) -> _TreapNode:
        if node is None:
            return _TreapNode(key, self._rng.random())
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node
        _resize(node)
        if node.left is not None and node.left.priority > node.priority:
            return self._rotate_right(node)
        if node.right is not None and node.right.priority > node.priority:
            return self._rotate_left(node)
        return node

    def _remove(self, node: Optional[_TreapNode], key: int) -> Optional[_TreapNode]:
        if node is None:
            return None
        if key < node.key:
            node.left = self._remove(node.left, key)
        elif key > node.key:
            node.right = self._remove(node.right, key)
        else:
            return self._merge(node.left, node.right)
        _resize(node)
        return node

    def insert(self, key: int) -> None:
        """Add key; an existing key is left as it is."""
        self._root = self._insert(self._root, key)

    def remove(self, key: int) -> None:
        """Remove key if present."""
        self._root = self._remove(self._root, key)

    def find(self, key: int) -> bool:
        return _contains(self._root, key)

    def __len__(self) -> int:
        return _size(self._root)

    def kth_element(self, k: int) -> int:
        """The k-th smallest key, counting from 1."""
        if not 1 <= k <= len(self):
            raise IndexError(f"k={k} out of range for {len(self)} keys")
        node = self._root
        while node is not None:
            left_size = _size(node.left)
            if k == left_size + 1:
                return node.key
            if k <= left_size:
                node = node.left
            else:
                k -= left_size + 1
                node = node.right
        raise AssertionError("subtree sizes are inconsistent")

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return list(_iter_inorder(self._root))


class _SplayNode:
    __slots__ = ("key", "left", "right", "parent")

    def __init__(self, key: int, parent: Optional[_SplayNode] = None) -> None:
        self.key = key
        self.left: Optional[_SplayNode] = None
        self.right: Optional[_SplayNode] = None
        self.parent = parent


class SplayTree:
    """Search tree that moves every accessed key to the root."""

    def __init__(self) -> None:
        self._root: Optional[_SplayNode] = None

    @staticmethod
    def _rotate(child: _SplayNode, parent: _SplayNode) -> None:
        grandparent = parent.parent
        if grandparent is not None:
            if grandparent.left is parent:
                grandparent.left = child
            else:
                grandparent.right = child
        if parent.left is child:
            parent.left = child.right
            if parent.left is not None:
                parent.left.parent = parent
            child.right = parent
        else:
            parent.right = child.left
            if parent.right is not None:
                parent.right.parent = parent
            child.left = parent
        parent.parent = child
        child.parent = grandparent

    def _splay(self, node: _SplayNode) -> None:
        while node.parent is not None:
            parent = node.parent
            grandparent = parent.parent
            if grandparent is None:
                self._rotate(node, parent)
            elif (grandparent.left is parent) == (parent.left is node):
                self._rotate(parent, grandparent)
                self._rotate(node, parent)
            else:
                self._rotate(node, parent)
                self._rotate(node, grandparent)
        self._root = node

    def insert(self, key: int) -> None:
        """Add key (duplicates are ignored) and splay it to the root."""
        if self._root is None:
            self._root = _SplayNode(key)
            return
        node = self._root
        while key != node.key:
            if key < node.key:
                if node.left is None:
                    node.left = _SplayNode(key, node)
                node = node.left
            else:
                if node.right is None:
                    node.right = _SplayNode(key, node)
                node = node.right
        self._splay(node)

    def find(self, key: int) -> bool:
        """True if key is present; a found key is splayed to the root."""
        node = self._root
        while node is not None:
            if key == node.key:
                self._splay(node)
                return True
            node = node.left if key < node.key else node.right
        return False

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return list(_iter_inorder(self._root))


class _AVLNode:
    __slots__ = ("key", "height", "left", "right")

    def __init__(self, key: int) -> None:
        self.key = key
        self.height = 1
        self.left: Optional[_AVLNode] = None
        self.right: Optional[_AVLNode] = None


def _height(node: Optional[_AVLNode]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[_AVLNode]) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _reheight(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _avl_rotate_right(y: _AVLNode) -> _AVLNode:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _reheight(y)
    _reheight(x)
    return x


def _avl_rotate_left(x: _AVLNode) -> _AVLNode:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _reheight(x)
    _reheight(y)
    return y


class AVLTree:
    """Height-balanced search tree of distinct keys."""

    def __init__(self) -> None:
        self._root: Optional[_AVLNode] = None

    def _insert(self, node: Optional[_AVLNode], key: int) -> _AVLNode:
        if node is None:
            return _AVLNode(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node
        _reheight(node)
        balance = _balance(node)
        if balance > 1:
            assert node.left is not None
            if key > node.left.key:
                node.left = _avl_rotate_left(node.left)
            return _avl_rotate_right(node)
        if balance < -1:
            assert node.right is not None
            if key < node.right.key:
                node.right = _avl_rotate_right(node.right)
            return _avl_rotate_left(node)
        return node

    def _remove(self, node: Optional[_AVLNode], key: int) -> Optional[_AVLNode]:
        if node is None:
            return None
        if key < node.key:
            node.left = self._remove(node.left, key)
        elif key > node.key:
            node.right = self._remove(node.right, key)
        elif node.left is None or node.right is None:
            return node.left if node.left is not None else node.right
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            node.right = self._remove(node.right, successor.key)
        _reheight(node)
        balance = _balance(node)
        if balance > 1:
            if _balance(node.left) < 0:
                assert node.left is not None
                node.left = _avl_rotate_left(node.left)
            return _avl_rotate_right(node)
        if balance < -1:
            if _balance(node.right) > 0:
                assert node.right is not None
                node.right = _avl_rotate_right(node.right)
            return _avl_rotate_left(node)
        return node

    def insert(self, key: int) -> None:
        """Add key; duplicates are ignored."""
        self._root = self._insert(self._root, key)

    def remove(self, key: int) -> None:
        """Remove key if present."""
        self._root = self._remove(self._root, key)

    def find(self, key: int) -> bool:
        return _contains(self._root, key)

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return list(_iter_inorder(self._root))