"""A binary heap ordered by a caller-supplied relation."""

from __future__ import annotations

from typing import Any, Callable


class Heap:
    """Binary heap whose top element ``a`` satisfies ``relation(a, b)`` for the rest.

    ``relation(a, b)`` returns True when ``a`` may sit above ``b``.
    """

    def __init__(self, relation: Callable[[Any, Any], bool]) -> None:
        self._rel = relation
        self._items: list[Any] = []

    def _sift_up(self) -> None:
        items = self._items
        index = len(items) - 1
        temp = items[index]
        while index != 0:
            parent = (index - 1) // 2
            if self._rel(items[parent], temp):
                break
            items[index] = items[parent]
            index = parent
        items[index] = temp

    def _sift_down(self) -> None:
        items = self._items
        last = len(items) - 1
        temp = items[last]
        index = 0
        child = 1
        while child <= last:
            if child < last and self._rel(items[child + 1], items[child]):
                child += 1
            if self._rel(temp, items[child]):
                break
            items[index] = items[child]
            index = child
            child = 2 * index + 1
        items[index] = temp

    def add(self, elem: Any) -> None:
        """Insert ``elem``."""
        self._items.append(elem)
        self._sift_up()

    def remove(self) -> Any:
        """Remove and return the top element, or None when the heap is empty."""
        if not self._items:
            return None
        top = self._items[0]
        self._sift_down()
        self._items.pop()
        return top

    def first(self) -> Any:
        """Return the top element, or None when the heap is empty."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        """Return True when the heap holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)