"""Binary search tree ordered by a three-way comparison function."""

from __future__ import annotations

from enum import Enum
from itertools import islice
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], int]


class Order(Enum):
    """Traversal order of a tree walk."""

    INORDER = "inorder"
    PREORDER = "preorder"
    POSTORDER = "postorder"


class _Node(Generic[T]):
    __slots__ = ("item", "left", "right")

    def __init__(self, item: T) -> None:
        self.item = item
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree.

    ``compare(a, b)`` returns a negative number, zero or a positive number.
    Items comparing equal to an existing one are stored in its left subtree.
    """

    def __init__(self, compare: Compare) -> None:
        if not callable(compare):
            raise TypeError("a comparison function is required")
        self._compare = compare
        self._root: Optional[_Node[T]] = None
        self._size = 0

    def insert(self, item: T) -> None:
        """Add ``item`` to the tree."""
        new = _Node(item)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if self._compare(item, node.item) > 0:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return
                node = node.left

    def remove(self, item: Any) -> T:
        """Remove an item comparing equal to ``item`` and return it.

        Raises KeyError if there is none.
        """
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            cmp = self._compare(item, node.item)
            if cmp == 0:
                break
            parent = node
            node = node.right if cmp > 0 else node.left
        if node is None:
            raise KeyError(item)

        found = node.item
        if node.left is not None and node.right is not None:
            pred_parent = node
            pred = node.left
            while pred.right is not None:
                pred_parent = pred
                pred = pred.right
            node.item = pred.item
            if pred_parent is node:
                node.left = pred.left
            else:
                pred_parent.right = pred.left
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1
        return found

    def get(self, item: Any) -> Optional[T]:
        """The stored item comparing equal to ``item``, or None."""
        node = self._root
        while node is not None:
            cmp = self._compare(item, node.item)
            if cmp == 0:
                return node.item
            node = node.right if cmp > 0 else node.left
        return None

    def _inorder(self) -> Iterator[T]:
        stack: List[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node.item
                node = node.right

    def _preorder(self) -> Iterator[T]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.item
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _postorder(self) -> Iterator[T]:
        stack: List[_Node[T]] = []
        node = self._root
        last: Optional[_Node[T]] = None
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                peek = stack[-1]
                if peek.right is not None and last is not peek.right:
                    node = peek.right
                else:
                    yield peek.item
                    last = stack.pop()

    def _walk(self, order: Order) -> Iterator[T]:
        if order is Order.INORDER:
            return self._inorder()
        if order is Order.PREORDER:
            return self._preorder()
        if order is Order.POSTORDER:
            return self._postorder()
        raise ValueError(f"unknown order: {order!r}")

    def visit(self, order: Order, func: Callable[[T], bool]) -> int:
        """Call ``func`` on each item in ``order`` until it returns false.

        Returns how many times ``func`` was called.
        """
        calls = 0
        for item in self._walk(order):
            calls += 1
            if not func(item):
                break
        return calls

    def to_list(self, order: Order = Order.INORDER, limit: Optional[int] = None) -> List[T]:
        """Items in ``order``, at most ``limit`` of them when given."""
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")
        return list(islice(self._walk(order), limit))

    def __iter__(self) -> Iterator[T]:
        return self._inorder()

    def __len__(self) -> int:
        return self._size