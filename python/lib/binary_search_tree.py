#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
binary_search_tree.py
---------------------

An ordered, in‑memory **binary search tree** of unique elements.  There is no
rebalancing: the shape depends on insertion order, so the height ranges from
O(log n) for a well mixed input to n for an already sorted one.

Features
~~~~~~~~
* `tree.insert(item)`    – add an element, ``False`` if it was already there
* `tree.remove(item)`    – delete and return an element, ``None`` if missing
* `item in tree`         – membership test (also `tree.contains(item)`)
* `len(tree)`            – number of stored elements
* iteration (`for item in tree:`) – elements in ascending order
* `tree.min()`, `tree.max()` – extreme elements (``None`` on an empty tree)
* `tree.height()`        – longest root‑to‑leaf path, counted in nodes
* `tree == other`        – same elements in the same order, shape ignored
* `tree.validate()` – sanity‑check the ordering invariant (useful for debugging)

Elements only need a total order (``<`` and ``==``); they are never hashed.
Nodes have no parent pointer, each one owns its two children.  Removal
therefore locates the target from the parent side and hands back the
replacement subtree, which the parent stores in the slot the target used to
occupy.

Typical usage
~~~~~~~~~~~~~
>>> from binary_search_tree import BinarySearchTree
>>> bst = BinarySearchTree([5, 2, 8])
>>> bst.insert(3)
True
>>> bst.insert(3)
False
>>> list(bst)
[2, 3, 5, 8]
>>> bst.remove(5)
5
>>> bst.remove(5) is None
True
>>> bst.min(), bst.max()
(2, 8)
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import (
    Any,
    Callable,
    Dict,
    Generator,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Type variable (elements must be totally ordered)
# ----------------------------------------------------------------------
T = TypeVar("T")


class _Node(Generic[T]):
    """Internal node object – not meant to be used directly by callers."""

    __slots__ = ("item", "left", "right")

    def __init__(
        self,
        item: T,
        left: Optional["_Node[T]"] = None,
        right: Optional["_Node[T]"] = None,
    ) -> None:
        self.item = item
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"<Node {self.item!r}>"

    # ------------------------------------------------------------------
    #   Queries
    # ------------------------------------------------------------------
    def search(self, target: T) -> Optional["_Node[T]"]:
        """Return the node in this subtree holding *target*, or ``None``."""
        cur: Optional[_Node[T]] = self
        while cur is not None:
            if target == cur.item:
                return cur
            elif target < cur.item:
                cur = cur.left
            else:
                cur = cur.right
        return None

    def min(self) -> "_Node[T]":
        node = self
        while node.left is not None:
            node = node.left
        return node

    def max(self) -> "_Node[T]":
        node = self
        while node.right is not None:
            node = node.right
        return node

    def height(self) -> int:
        """Number of nodes on the longest path from this node down to a leaf."""
        best = 0
        stack: List[Tuple[_Node[T], int]] = [(self, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > best:
                best = depth
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def walk(self) -> Generator[T, None, None]:
        """Yield the items of this subtree in ascending (in‑order) order."""
        stack: List[_Node[T]] = []
        cur: Optional[_Node[T]] = self
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            node = stack.pop()
            yield node.item
            cur = node.right

    def for_each(self, visit: Callable[[T], Any]) -> None:
        """Call *visit* on every item of this subtree, smallest first."""
        for item in self.walk():
            visit(item)

    # ------------------------------------------------------------------
    #   Mutation
    # ------------------------------------------------------------------
    def insert(self, new_item: T) -> bool:
        """
        Attach *new_item* as a new leaf below this node.
        Returns ``False`` (and changes nothing) if an equal item is present.
        """
        cur = self
        while True:
            if new_item == cur.item:
                return False
            elif new_item < cur.item:
                if cur.left is None:
                    cur.left = _Node(new_item)
                    return True
                cur = cur.left
            else:
                if cur.right is None:
                    cur.right = _Node(new_item)
                    return True
                cur = cur.right

    def splice(self) -> Optional["_Node[T]"]:
        """
        Return the subtree that should replace this node in its parent's slot.

        * no children  – nothing, the slot becomes empty
        * one child    – that child, promoted as is
        * two children – a new node holding the in‑order successor, with
          this node's left subtree and the successor‑less right subtree
        """
        if self.left is None:
            return self.right
        if self.right is None:
            return self.left

        # The successor is the leftmost node of the right subtree, so it has
        # no left child and its own removal is always a 0/1‑child splice.
        successor = self.right.min()
        removed, right = _remove(self.right, successor.item)
        if removed is None:
            logger.error(
                "successor %r vanished from the right subtree of %r",
                successor.item,
                self.item,
            )
            raise RuntimeError(
                f"BST invariant violated while removing {self.item!r}: "
                f"successor {successor.item!r} not found"
            )
        return _Node(removed.item, left=self.left, right=right)

    def copy(self, copy_item: Optional[Callable[[T], T]] = None) -> "_Node[T]":
        """
        Return a node‑for‑node copy of this subtree.
        Items are shared unless *copy_item* is given, in which case each new
        node holds ``copy_item(item)``.
        """
        if copy_item is None:
            copy_item = lambda item: item  # noqa: E731
        root = _Node(copy_item(self.item))
        stack: List[Tuple[_Node[T], _Node[T]]] = [(self, root)]
        while stack:
            src, dst = stack.pop()
            if src.left is not None:
                dst.left = _Node(copy_item(src.left.item))
                stack.append((src.left, dst.left))
            if src.right is not None:
                dst.right = _Node(copy_item(src.right.item))
                stack.append((src.right, dst.right))
        return root


def _remove(
    root: Optional[_Node[T]], target: T
) -> Tuple[Optional[_Node[T]], Optional[_Node[T]]]:
    """
    Remove *target* from the subtree rooted at *root*.

    Returns ``(removed_node, new_root)``.  ``removed_node`` is ``None`` when
    *target* is not present, in which case ``new_root`` is *root* unchanged.
    The comparison that picks a child is made by the parent, so the parent
    can overwrite its own ``left``/``right`` slot with the replacement.
    """
    parent: Optional[_Node[T]] = None
    node = root
    while node is not None and target != node.item:
        parent = node
        node = node.left if target < node.item else node.right

    if node is None:
        return None, root

    replacement = node.splice()
    if parent is None:
        return node, replacement
    if parent.left is node:
        parent.left = replacement
    else:
        parent.right = replacement
    return node, root


class BinarySearchTree(Generic[T]):
    """
    A sorted collection of unique elements stored in a plain (unbalanced)
    binary search tree.

    Lookup, insertion and removal cost O(height).  Duplicate inserts and
    removals of missing elements are not errors: they are reported through
    the return value and leave the tree untouched.
    """

    __slots__ = ("_root", "_size", "_version")

    # the tree is mutable, so it must not be hashable
    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    #   Construction / basic container protocol
    # ------------------------------------------------------------------
    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        """
        Create an empty tree or optionally fill it from an iterable.

        Parameters
        ----------
        items : iterable   optional
            Inserted one by one in iteration order, so the first occurrence
            of equal elements wins and later ones are ignored.
        """
        self._root: Optional[_Node[T]] = None
        self._size: int = 0
        # Bumped on every structural change; iterators compare against it.
        self._version: int = 0

        if items is not None:
            self.extend(items)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        """
        Return an iterator over the elements in ascending order.
        The tree's state is captured here, not on the first ``next()``, so
        any later structural change makes the iterator raise ``RuntimeError``.
        """
        return self._iterate(self._root, self._version)

    def _iterate(
        self, root: Optional[_Node[T]], version: int
    ) -> Generator[T, None, None]:
        if root is not None:
            for item in root.walk():
                self._check_version(version)
                yield item
        self._check_version(version)

    def _check_version(self, version: int) -> None:
        if self._version != version:
            raise RuntimeError("BinarySearchTree mutated during iteration")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    # ------------------------------------------------------------------
    #   Public API
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        return self._size == 0

    def insert(self, item: T) -> bool:
        """Add *item*; return ``True`` if it was new, ``False`` if a duplicate."""
        if self._root is None:
            self._root = _Node(item)
            inserted = True
        else:
            inserted = self._root.insert(item)

        if inserted:
            self._size += 1
            self._version += 1
        else:
            logger.debug("duplicate %r rejected", item)
        return inserted

    def extend(self, items: Iterable[T]) -> int:
        """Insert every element of *items*; return how many were new."""
        added = 0
        for item in items:
            if self.insert(item):
                added += 1
        return added

    def remove(self, item: T) -> Optional[T]:
        """
        Delete *item* and return the stored element that compared equal to it.
        Returns ``None`` if nothing matched (the tree is left untouched).
        """
        removed, self._root = _remove(self._root, item)
        if removed is None:
            logger.debug("remove: %r not found", item)
            return None
        self._size -= 1
        self._version += 1
        return removed.item

    def contains(self, item: T) -> bool:
        """Return ``True`` if an element equal to *item* is stored."""
        if self._root is None:
            return False
        return self._root.search(item) is not None

    def min(self) -> Optional[T]:
        """Smallest element, or ``None`` if the tree is empty."""
        if self._root is None:
            return None
        return self._root.min().item

    def max(self) -> Optional[T]:
        """Largest element, or ``None`` if the tree is empty."""
        if self._root is None:
            return None
        return self._root.max().item

    def height(self) -> int:
        """
        Maximum number of nodes from the root down to a leaf.
        0 for an empty tree, ``len(self)`` for a degenerate (sorted‑input) one.
        """
        if self._root is None:
            return 0
        return self._root.height()

    def for_each(self, visit: Callable[[T], Any]) -> None:
        """Call ``visit(item)`` once per element, in ascending order."""
        if self._root is not None:
            self._root.for_each(visit)

    def clear(self) -> None:
        """Drop every element."""
        logger.debug("clearing %d elements", self._size)
        self._root = None
        self._size = 0
        self._version += 1

    def copy(self) -> "BinarySearchTree[T]":
        """
        Return an independent tree with the same elements *and* the same shape.
        Nodes are duplicated, the elements themselves are shared.
        """
        clone: BinarySearchTree[T] = BinarySearchTree()
        if self._root is not None:
            clone._root = self._root.copy()
            clone._size = self._size
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: Dict[int, Any]) -> "BinarySearchTree[T]":
        """Like ``copy()``, but the elements are deep‑copied as well."""
        clone: BinarySearchTree[T] = BinarySearchTree()
        memo[id(self)] = clone
        if self._root is not None:
            clone._root = self._root.copy(lambda item: deepcopy(item, memo))
            clone._size = self._size
        return clone

    # ------------------------------------------------------------------
    #   Validation/checking utilities – useful for debugging
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify the BST ordering invariant and the cached length.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        count = 0
        # Each entry carries the exclusive (low, high) bounds for its subtree.
        stack: List[Tuple[_Node[T], Optional[T], Optional[T]]] = []
        if self._root is not None:
            stack.append((self._root, None, None))
        while stack:
            node, low, high = stack.pop()
            count += 1
            if low is not None:
                assert low < node.item, (
                    f"BST property violated ({node.item!r} not greater than {low!r})"
                )
            if high is not None:
                assert node.item < high, (
                    f"BST property violated ({node.item!r} not less than {high!r})"
                )
            if node.left is not None:
                stack.append((node.left, low, node.item))
            if node.right is not None:
                stack.append((node.right, node.item, high))

        assert count == self._size, f"Length mismatch: {count} nodes, size {self._size}"

    # ------------------------------------------------------------------
    #   Convenience string representation (for debugging)
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        items = ", ".join(repr(item) for item in self)
        return f"BinarySearchTree([{items}])"
