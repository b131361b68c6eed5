"""An ordered multi-dictionary kept in a binary search tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Relation = Callable[[Any, Any], bool]


@dataclass(slots=True)
class _Node:
    key: Any
    values: list[Any] = field(default_factory=list)
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class OrderedMultiDict:
    """Maps each key to a list of values, keeping keys ordered by a relation.

    ``relation(a, b)`` returns True when key ``a`` comes before (or may sit
    together with) key ``b``. Iteration yields ``(key, values)`` pairs in
    that order.
    """

    def __init__(self, relation: Relation) -> None:
        self._rel = relation
        self._root: Optional[_Node] = None

    def _find(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if node.key == key:
                return node
            node = node.left if self._rel(key, node.key) else node.right
        return None

    def add(self, key: Any, value: Any) -> None:
        """Add the pair (key, value)."""
        if self._root is None:
            self._root = _Node(key, [value])
            return
        node = self._root
        while True:
            if node.key == key:
                node.values.append(value)
                return
            if self._rel(key, node.key):
                if node.left is None:
                    node.left = _Node(key, [value])
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(key, [value])
                    return
                node = node.right

    def search(self, key: Any) -> list[Any]:
        """Return a copy of the values stored for ``key``; empty if absent."""
        node = self._find(key)
        return [] if node is None else list(node.values)

    def remove(self, key: Any, value: Any) -> bool:
        """Remove one occurrence of (key, value); return whether it was present."""
        node = self._find(key)
        if node is None or value not in node.values:
            return False
        if len(node.values) > 1:
            node.values.remove(value)
        else:
            self._delete_node(key)
        return True

    def _delete_node(self, key: Any) -> None:
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if self._rel(key, node.key) else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.key = succ.key
            node.values = succ.values
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
            return
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def __len__(self) -> int:
        return sum(len(values) for _, values in self)

    def is_empty(self) -> bool:
        """Return True when no pairs are stored."""
        return self._root is None

    def iterator(self) -> "OrderedMultiDictIterator":
        """Return a cursor-style iterator positioned on the first key."""
        return OrderedMultiDictIterator(self)

    def __iter__(self) -> Iterator[tuple[Any, list[Any]]]:
        cursor = OrderedMultiDictIterator(self)
        while cursor.valid():
            yield cursor.element()
            cursor.advance()

    def add_missing(self, other: "OrderedMultiDict") -> int:
        """Add every pair of ``other`` not already present; return how many were added."""
        added = 0
        for key, values in list(other):
            present = self.search(key)
            for value in values:
                if value not in present:
                    self.add(key, value)
                    added += 1
        return added


class OrderedMultiDictIterator:
    """In-order cursor over an ordered multi-dictionary, yielding (key, values)."""

    def __init__(self, multidict: OrderedMultiDict) -> None:
        self._md = multidict
        self._stack: list[_Node] = []
        self._current: Optional[_Node] = None
        self.first()

    def _descend_left(self, node: Optional[_Node]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left
        self._current = self._stack.pop() if self._stack else None

    def first(self) -> None:
        """Reset the cursor to the first key in order."""
        self._stack.clear()
        self._descend_left(self._md._root)

    def advance(self) -> None:
        """Move to the next key; raise ValueError if the cursor is invalid."""
        if self._current is None:
            raise ValueError("iterator is not valid")
        self._descend_left(self._current.right)

    def valid(self) -> bool:
        """Return True while the cursor points at a key."""
        return self._current is not None

    def element(self) -> tuple[Any, list[Any]]:
        """Return the current (key, values) pair; raise ValueError if invalid."""
        if self._current is None:
            raise ValueError("iterator is not valid")
        return self._current.key, list(self._current.values)